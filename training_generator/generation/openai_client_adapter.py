import httpx
import openai

from training_generator.generation.client_base import BaseModelClient
from training_generator.generation.exceptions import ModelClientError, ModelNetworkError
from training_generator.generation.models import ContentPart, InlineImagePart, TextPart


class OpenAIClientAdapter(BaseModelClient):
    """Model client built on the OpenAI-compatible chat completions API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    def generate_content(
        self,
        *,
        model: str,
        system_instruction: str,
        parts: list[ContentPart],
        temperature: float,
    ) -> str:
        messages: list[dict[str, object]] = []
        if system_instruction:
            messages.append({"role": "system", "content": system_instruction})
        messages.append({"role": "user", "content": [_to_content_item(p) for p in parts]})

        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                messages=messages,  # type: ignore[arg-type]
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise ModelNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise ModelNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise ModelClientError("AI returned no choices")
        return response.choices[0].message.content or ""


def _to_content_item(part: ContentPart) -> dict[str, object]:
    if isinstance(part, TextPart):
        return {"type": "text", "text": part.text}
    if isinstance(part, InlineImagePart):
        return {
            "type": "image_url",
            "image_url": {"url": f"data:{part.mime_type};{part.encoding},{part.data}"},
        }
    raise TypeError(f"Unsupported content part: {type(part).__name__}")

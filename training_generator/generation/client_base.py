from abc import ABC, abstractmethod

from training_generator.generation.models import ContentPart


class BaseModelClient(ABC):
    """Contract for provider-specific generative model clients."""

    @abstractmethod
    def generate_content(
        self,
        *,
        model: str,
        system_instruction: str,
        parts: list[ContentPart],
        temperature: float,
    ) -> str:
        """Return the model's text response.

        A response without text is returned as an empty string.

        Raises:
            ModelClientError: if the provider response is unusable.
            ModelNetworkError: if the call fails at the transport level.
        """

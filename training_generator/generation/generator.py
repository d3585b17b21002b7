"""Generation and refinement of HTML training artifacts."""

from training_generator.generation.client_base import BaseModelClient
from training_generator.generation.exceptions import GenerationFailedError, RefinementFailedError
from training_generator.generation.models import InlineImagePart, Prompt
from training_generator.generation.prompt_builder import PromptBuilder
from training_generator.generation.response import EMPTY_GENERATION_PLACEHOLDER, clean_response
from training_generator.ingestion.models import ParsedFile
from training_generator.logging.logger import Log
from training_generator.outputs.registry import OutputType


class TrainingGenerator:
    """Issues generation and refinement calls against a model client.

    One call per operation, no retries. Client failures surface as
    GenerationFailedError or RefinementFailedError with the cause chained.
    """

    def __init__(
        self,
        *,
        client: BaseModelClient,
        model: str,
        builder: PromptBuilder,
        generation_temperature: float = 0.5,
        refinement_temperature: float = 0.4,
    ) -> None:
        self._client = client
        self._model = model
        self._builder = builder
        self._generation_temperature = generation_temperature
        self._refinement_temperature = refinement_temperature

    def generate(
        self,
        parsed_file: ParsedFile,
        output_type: OutputType,
        extra_instructions: str | None = None,
    ) -> str:
        """Generate a training artifact for a concrete output type."""
        prompt = self._builder.build(parsed_file, output_type, extra_instructions)
        Log.debug(f"Generation prompt:\n{prompt.text}")
        Log.info(
            f"Generating {output_type.value} for {parsed_file.metadata.file_name} "
            f"({len(prompt.parts)} parts, {len(prompt.images)} images)"
        )
        try:
            raw = self._call_model(prompt, self._generation_temperature)
        except Exception as exc:
            Log.error(f"Generation failed: {exc}")
            raise GenerationFailedError(f"Failed to generate training content: {exc}", exc) from exc

        if not raw:
            Log.warning("Model returned an empty generation response")
            return EMPTY_GENERATION_PLACEHOLDER
        html = clean_response(raw)
        Log.info(f"Generation complete: {len(html)} characters")
        return html

    def refine(
        self,
        current_html: str,
        instruction: str,
        reference_image: InlineImagePart | None = None,
    ) -> str:
        """Return a refined copy of current_html; the input is never modified."""
        prompt = self._builder.build_refinement(current_html, instruction, reference_image)
        Log.debug(f"Refinement prompt:\n{prompt.text}")
        try:
            raw = self._call_model(prompt, self._refinement_temperature)
        except Exception as exc:
            Log.error(f"Refinement failed: {exc}")
            raise RefinementFailedError(f"Failed to refine training content: {exc}", exc) from exc

        if not raw:
            Log.warning("Model returned an empty refinement response, keeping current content")
            return current_html
        html = clean_response(raw)
        Log.info(f"Refinement complete: {len(html)} characters")
        return html

    def _call_model(self, prompt: Prompt, temperature: float) -> str:
        return self._client.generate_content(
            model=self._model,
            system_instruction=prompt.system_instruction,
            parts=prompt.parts,
            temperature=temperature,
        )

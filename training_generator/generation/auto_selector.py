"""Model-driven output type selection with a deterministic fallback."""

from training_generator.generation.client_base import BaseModelClient
from training_generator.generation.exceptions import AutoSelectFailedError
from training_generator.generation.prompt_builder import PromptBuilder
from training_generator.ingestion.models import ParsedFile, SupportedFileType
from training_generator.logging.logger import Log
from training_generator.outputs.registry import OutputType, concrete_output_types

DEFAULT_OUTPUT_BY_FILE_TYPE: dict[SupportedFileType, OutputType] = {
    SupportedFileType.IMAGE: OutputType.DAMAGE_DETECTIVE,
    SupportedFileType.VIDEO: OutputType.INSPECTION_WALKTHROUGH,
    SupportedFileType.CSV: OutputType.COMMISSION_TYCOON,
    SupportedFileType.EXCEL: OutputType.COMMISSION_TYCOON,
    SupportedFileType.PDF: OutputType.FLASHCARD_DRILL,
    SupportedFileType.TEXT: OutputType.FLASHCARD_DRILL,
    SupportedFileType.MARKDOWN: OutputType.FLASHCARD_DRILL,
}

_missing = set(SupportedFileType) - set(DEFAULT_OUTPUT_BY_FILE_TYPE)
if _missing:
    raise RuntimeError(f"No fallback output type for: {sorted(t.value for t in _missing)}")

_STRIP_CHARS = "\"'`"


class AutoSelector:
    """Asks the model for the best output type for a parsed file."""

    def __init__(
        self,
        *,
        client: BaseModelClient,
        model: str,
        builder: PromptBuilder,
        temperature: float = 0.1,
    ) -> None:
        self._client = client
        self._model = model
        self._builder = builder
        self._temperature = temperature

    def select(self, parsed_file: ParsedFile) -> OutputType:
        """Return a concrete output type. Never raises."""
        fallback = DEFAULT_OUTPUT_BY_FILE_TYPE[parsed_file.type]
        try:
            selected = self._ask_model(parsed_file)
        except Exception as exc:
            Log.warning(
                f"Auto-select failed for {parsed_file.metadata.file_name}, "
                f"using fallback {fallback.value}: {exc}"
            )
            return fallback
        Log.info(f"Auto-selected output type: {selected.value}")
        return selected

    def _ask_model(self, parsed_file: ParsedFile) -> OutputType:
        prompt = self._builder.build_auto_select(parsed_file)
        Log.debug(f"Auto-select prompt:\n{prompt.text}")
        raw = self._client.generate_content(
            model=self._model,
            system_instruction=prompt.system_instruction,
            parts=prompt.parts,
            temperature=self._temperature,
        )
        return parse_output_type(raw)


def parse_output_type(raw: str) -> OutputType:
    """Normalize a model answer into a concrete output type.

    Raises:
        AutoSelectFailedError: if the answer is not exactly a concrete id.
    """
    answer = raw.strip().lower().strip(_STRIP_CHARS).strip()
    for output_type in concrete_output_types():
        if output_type.value == answer:
            return output_type
    raise AutoSelectFailedError(f"Model answered with an unknown output type: {raw!r}")

"""Training session: the upload -> choose -> generate -> refine lifecycle.

A session runs one pipeline operation at a time. Failures move the session
back to a stable state (idle, or ready with the previous creation intact),
record the error and re-raise it.
"""

import base64
import mimetypes
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum
from pathlib import Path

from training_generator.config.settings import Settings
from training_generator.creations.exceptions import CreationImportError
from training_generator.creations.history import CreationHistory
from training_generator.creations.models import Creation, new_creation
from training_generator.generation.auto_selector import AutoSelector
from training_generator.generation.client_base import BaseModelClient
from training_generator.generation.factory import ModelClientFactory
from training_generator.generation.generator import TrainingGenerator
from training_generator.generation.models import InlineImagePart
from training_generator.generation.prompt_builder import PromptBuilder
from training_generator.ingestion.models import (
    ImageContent,
    PagedContent,
    ParsedFile,
    UploadedFile,
    VideoContent,
)
from training_generator.ingestion.processor import FileProcessor, build_processor
from training_generator.logging.logger import Log
from training_generator.outputs.registry import (
    OutputConfig,
    OutputType,
    applicable_outputs,
    get_output_config,
    is_output_applicable,
)
from training_generator.session.exceptions import (
    CreationNotFoundError,
    InvalidSessionStateError,
    OutputNotApplicableError,
    SessionBusyError,
)


class SessionState(str, Enum):
    IDLE = "idle"
    EXTRACTING = "extracting"
    AWAITING_OUTPUT_CHOICE = "awaiting_output_choice"
    AUTO_SELECTING = "auto_selecting"
    GENERATING = "generating"
    READY = "ready"
    REFINING = "refining"


class TrainingSession:
    """Drives one user's creation flow and keeps the creation history."""

    def __init__(
        self,
        *,
        processor: FileProcessor,
        generator: TrainingGenerator,
        auto_selector: AutoSelector,
        history: CreationHistory,
    ) -> None:
        self._processor = processor
        self._generator = generator
        self._auto_selector = auto_selector
        self._history = history
        self._lock = threading.Lock()
        self._state = SessionState.IDLE
        self._parsed_file: ParsedFile | None = None
        self._active: Creation | None = None
        self._last_error: Exception | None = None

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def parsed_file(self) -> ParsedFile | None:
        return self._parsed_file

    @property
    def active_creation(self) -> Creation | None:
        return self._active

    @property
    def last_error(self) -> Exception | None:
        return self._last_error

    @property
    def history(self) -> CreationHistory:
        return self._history

    def upload(self, file: UploadedFile) -> ParsedFile:
        """Parse a file and wait for an output choice."""
        with self._operation(SessionState.IDLE, SessionState.READY):
            self._active = None
            self._parsed_file = None
            self._state = SessionState.EXTRACTING
            try:
                parsed = self._processor.process(file)
            except Exception as exc:
                self._fail(exc, SessionState.IDLE)
                raise
            self._parsed_file = parsed
            self._state = SessionState.AWAITING_OUTPUT_CHOICE
            return parsed

    def applicable_outputs(self) -> list[OutputConfig]:
        """Auto-select followed by the concrete outputs for the uploaded file."""
        if self._parsed_file is None:
            raise InvalidSessionStateError("No file uploaded")
        return [get_output_config(OutputType.AUTO), *applicable_outputs(self._parsed_file.type)]

    def cancel_selection(self) -> None:
        with self._operation(SessionState.AWAITING_OUTPUT_CHOICE):
            self._parsed_file = None
            self._state = SessionState.IDLE

    def generate(
        self,
        output_type: OutputType,
        extra_instructions: str | None = None,
    ) -> Creation:
        """Generate a creation from the uploaded file.

        Raises:
            OutputNotApplicableError: if a concrete output_type does not accept the file.
            GenerationFailedError: if the model call fails; the session returns to idle.
        """
        with self._operation(SessionState.AWAITING_OUTPUT_CHOICE):
            parsed = self._require_parsed_file()
            if output_type is not OutputType.AUTO and not is_output_applicable(
                output_type, parsed.type
            ):
                raise OutputNotApplicableError(
                    f"Output type '{output_type.value}' does not accept {parsed.type.value} files"
                )

            try:
                if output_type is OutputType.AUTO:
                    self._state = SessionState.AUTO_SELECTING
                    output_type = self._auto_selector.select(parsed)
                self._state = SessionState.GENERATING
                html = self._generator.generate(parsed, output_type, extra_instructions)
            except Exception as exc:
                self._parsed_file = None
                self._fail(exc, SessionState.IDLE)
                raise

            creation = new_creation(
                name=parsed.metadata.file_name,
                html=html,
                original_image=preview_image(parsed),
                output_type=output_type,
                source_file_type=parsed.type,
                metadata=parsed.metadata,
            )
            self._history.add(creation)
            self._active = creation
            self._parsed_file = None
            self._last_error = None
            self._state = SessionState.READY
            Log.info(f"Created {output_type.value} training '{creation.name}' ({creation.id})")
            return creation

    def refine(self, instruction: str, reference_image: UploadedFile | None = None) -> Creation:
        """Refine the active creation; on failure it is kept unchanged."""
        with self._operation(SessionState.READY):
            active = self._require_active()
            self._state = SessionState.REFINING
            try:
                image_part = reference_image_part(reference_image) if reference_image else None
                html = self._generator.refine(active.html, instruction, image_part)
            except Exception as exc:
                self._fail(exc, SessionState.READY)
                raise

            self._last_error = None
            self._state = SessionState.READY
            if html == active.html:
                return active

            refined = active.with_html(html)
            if not self._history.replace(refined):
                self._history.add(refined)
            self._active = refined
            return refined

    def select_creation(self, creation_id: str) -> Creation:
        with self._operation(SessionState.IDLE, SessionState.READY):
            creation = self._history.get(creation_id)
            if creation is None:
                raise CreationNotFoundError(f"Creation not found: {creation_id}")
            self._active = creation
            self._state = SessionState.READY
            return creation

    def import_creation(self, json_text: str) -> Creation:
        """Import an exported creation and make it active.

        An id already in history is not added twice, but the imported
        copy still becomes the active creation.
        """
        with self._operation(SessionState.IDLE, SessionState.READY):
            try:
                creation = Creation.from_json(json_text)
            except CreationImportError as exc:
                self._last_error = exc
                Log.error(f"Import failed: {exc}")
                raise
            self._history.add(creation)
            self._active = creation
            self._state = SessionState.READY
            return creation

    def export_active(self) -> str:
        if self._active is None:
            raise InvalidSessionStateError("No active creation to export")
        return self._active.to_json()

    def reset(self) -> None:
        with self._operation(*SessionState):
            self._active = None
            self._parsed_file = None
            self._last_error = None
            self._state = SessionState.IDLE

    @contextmanager
    def _operation(self, *allowed: SessionState) -> Iterator[None]:
        if not self._lock.acquire(blocking=False):
            raise SessionBusyError(f"Session is busy ({self._state.value})")
        try:
            if self._state not in allowed:
                raise InvalidSessionStateError(
                    f"Operation not allowed in state '{self._state.value}'"
                )
            yield
        finally:
            self._lock.release()

    def _fail(self, exc: Exception, state: SessionState) -> None:
        Log.error(f"Session operation failed in state '{self._state.value}': {exc}")
        self._last_error = exc
        self._state = state

    def _require_parsed_file(self) -> ParsedFile:
        if self._parsed_file is None:
            raise InvalidSessionStateError("No file uploaded")
        return self._parsed_file

    def _require_active(self) -> Creation:
        if self._active is None:
            raise InvalidSessionStateError("No active creation")
        return self._active


def preview_image(parsed_file: ParsedFile) -> str | None:
    """Data URL for the creation thumbnail, if the file has a raster to show."""
    content = parsed_file.content
    if isinstance(content, ImageContent) and content.raw_base64:
        return f"data:{content.mime_type or parsed_file.mime_type};base64,{content.raw_base64}"
    if isinstance(content, PagedContent) and content.pages and content.pages[0].image_base64:
        return f"data:image/png;base64,{content.pages[0].image_base64}"
    if isinstance(content, VideoContent) and content.frames:
        return f"data:image/jpeg;base64,{content.frames[0].image_base64}"
    return None


def reference_image_part(file: UploadedFile) -> InlineImagePart:
    """Inline prompt part for a refinement reference image."""
    mime_type = file.mime_type.lower() or mimetypes.guess_type(file.name)[0] or "image/png"
    return InlineImagePart(
        data=base64.b64encode(file.data).decode("ascii"),
        mime_type=mime_type,
    )


def build_session(settings: Settings, client: BaseModelClient | None = None) -> TrainingSession:
    """Wire a session from settings; the client defaults to the configured provider."""
    model_client = client or ModelClientFactory.create(settings)
    builder = PromptBuilder()
    history = CreationHistory(
        path=Path(settings.history_path) if settings.history_path else None,
        max_entries=settings.history_max_entries,
    )
    history.load()
    return TrainingSession(
        processor=build_processor(settings),
        generator=TrainingGenerator(
            client=model_client,
            model=settings.ai_model_name,
            builder=builder,
            generation_temperature=settings.generation_temperature,
            refinement_temperature=settings.refinement_temperature,
        ),
        auto_selector=AutoSelector(
            client=model_client,
            model=settings.ai_model_name,
            builder=builder,
            temperature=settings.auto_select_temperature,
        ),
        history=history,
    )

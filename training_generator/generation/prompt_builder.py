"""Assembles model prompts from parsed files.

Content parts follow a fixed order: leading instruction, primary source
text, PDF pages, data table, video frames, image. Segments for absent
content are omitted entirely.
"""

from pathlib import Path

from training_generator.generation.models import ContentPart, InlineImagePart, Prompt, TextPart
from training_generator.generation.prompt_loader import (
    AUTO_SELECT_PROMPT,
    REFINE_PROMPT,
    REFINE_SYSTEM_PROMPT,
    SYSTEM_PROMPT,
    load_prompt_template,
)
from training_generator.ingestion.models import (
    ImageContent,
    PagedContent,
    ParsedFile,
    TabularContent,
    VideoContent,
)
from training_generator.ingestion.tabular import format_row
from training_generator.outputs.registry import OutputType, get_output_config

MAX_PAGE_IMAGES = 5
MAX_TABLE_ROWS = 50
AUTO_SELECT_TEXT_PREVIEW = 1500

_RULE = "=" * 40


class PromptBuilder:
    """Builds generation, auto-selection and refinement prompts."""

    def __init__(self, prompt_dir: Path | None = None) -> None:
        self._system_template = load_prompt_template(SYSTEM_PROMPT, prompt_dir)
        self._auto_select_template = load_prompt_template(AUTO_SELECT_PROMPT, prompt_dir)
        self._refine_template = load_prompt_template(REFINE_PROMPT, prompt_dir)
        self._refine_system = load_prompt_template(REFINE_SYSTEM_PROMPT, prompt_dir)

    def build(
        self,
        parsed_file: ParsedFile,
        output_type: OutputType,
        extra_instructions: str | None = None,
    ) -> Prompt:
        """Build the generation prompt for a concrete output type.

        Raises:
            ValueError: if output_type is AUTO; resolve it first.
        """
        if output_type is OutputType.AUTO:
            raise ValueError("Output type 'auto' must be resolved before building a prompt")
        config = get_output_config(output_type)
        system_instruction = self._system_template.format(
            prompt_fragment=config.prompt_fragment
        )
        return Prompt(
            system_instruction=system_instruction,
            parts=build_content_parts(parsed_file, extra_instructions),
        )

    def build_auto_select(self, parsed_file: ParsedFile) -> Prompt:
        """Build the classification prompt used to pick an output type."""
        text = self._auto_select_template.format(
            content_preview=build_content_preview(parsed_file)
        )
        return Prompt(parts=[TextPart(text)])

    def build_refinement(
        self,
        current_html: str,
        instruction: str,
        reference_image: InlineImagePart | None = None,
    ) -> Prompt:
        """Build a prompt that embeds the current markup verbatim."""
        parts: list[ContentPart] = [
            TextPart(self._refine_template.format(
                instruction=instruction,
                current_html=current_html,
            ))
        ]
        if reference_image is not None:
            parts.append(TextPart("\nREFERENCE IMAGE (use it as visual guidance for the change):\n"))
            parts.append(reference_image)
        return Prompt(system_instruction=self._refine_system, parts=parts)


def build_content_parts(
    parsed_file: ParsedFile,
    extra_instructions: str | None = None,
) -> list[ContentPart]:
    """Ordered content parts for a generation request."""
    content = parsed_file.content
    file_name = parsed_file.metadata.file_name
    parts: list[ContentPart] = [TextPart(_leading_instruction(extra_instructions))]

    if parsed_file.text:
        parts.append(TextPart(
            f"\n{_RULE}\n"
            f"PRIMARY SOURCE CONTENT (USE THIS DATA ONLY)\n"
            f"File: {file_name}\n"
            f"{_RULE}\n"
            f"{parsed_file.text}\n"
            f"{_RULE}\n"
            f"END OF PRIMARY SOURCE\n"
            f"{_RULE}\n"
        ))

    if isinstance(content, PagedContent) and content.pages:
        parts.extend(_page_parts(content))
    elif isinstance(content, TabularContent) and content.rows:
        parts.append(TextPart(_table_text(content, file_name)))
    elif isinstance(content, VideoContent) and content.frames:
        parts.extend(_frame_parts(content))
    elif isinstance(content, ImageContent) and content.raw_base64:
        parts.append(TextPart(
            "\n=== IMAGE FILE ===\n"
            "Analyze this image and create training content based on what you see:\n"
        ))
        parts.append(InlineImagePart(
            data=content.raw_base64,
            mime_type=content.mime_type or parsed_file.mime_type,
        ))
        parts.append(TextPart("\n=== END IMAGE ===\n"))

    return parts


def build_content_preview(parsed_file: ParsedFile) -> str:
    """Bounded description of a file for the auto-selection prompt."""
    content = parsed_file.content
    metadata = parsed_file.metadata
    lines = [
        f"File type: {parsed_file.type.value}",
        f"File name: {metadata.file_name}",
    ]
    if parsed_file.text:
        lines.append(f"Text preview: {parsed_file.text[:AUTO_SELECT_TEXT_PREVIEW]}")
    if isinstance(content, TabularContent):
        lines.append(f"Data rows: {metadata.row_count}, columns: {metadata.column_count}")
    if isinstance(content, PagedContent):
        lines.append(f"PDF pages: {metadata.page_count}")
    if isinstance(content, VideoContent):
        lines.append(f"Video frames: {len(content.frames)}")
    return "\n".join(lines)


def _leading_instruction(extra_instructions: str | None) -> str:
    text = (
        "CREATE AN INTERACTIVE TRAINING MODULE FROM THIS UPLOADED CONTENT.\n"
        "IMPORTANT: Use ONLY the content below. Do NOT add external information.\n"
    )
    if extra_instructions and extra_instructions.strip():
        text += f"\nADDITIONAL INSTRUCTIONS: {extra_instructions.strip()}\n"
    return text


def _page_parts(content: PagedContent) -> list[ContentPart]:
    parts: list[ContentPart] = [
        TextPart(f"\n=== PDF DOCUMENT ({len(content.pages)} pages) ===\n")
    ]
    for index, page in enumerate(content.pages):
        parts.append(TextPart(f"\n--- PAGE {page.page_number} ---\n{page.text}\n"))
        if page.image_base64 and index < MAX_PAGE_IMAGES:
            parts.append(InlineImagePart(data=page.image_base64, mime_type="image/png"))
    parts.append(TextPart("\n=== END PDF ===\n"))
    return parts


def _table_text(content: TabularContent, file_name: str) -> str:
    headers = list(content.headers)
    lines = [
        "",
        _RULE,
        "PRIMARY DATA TABLE (USE THIS DATA FOR TRAINING)",
        f"File: {file_name}",
        _RULE,
        f"Total Rows: {len(content.rows)}, Columns: {len(headers)}",
        f"Column Headers: {' | '.join(headers)}",
        "",
        "ACTUAL DATA FROM UPLOADED FILE:",
    ]
    for index, row in enumerate(content.rows[:MAX_TABLE_ROWS], start=1):
        lines.append(f"Row {index}: {format_row(headers, row)}")
    if len(content.rows) > MAX_TABLE_ROWS:
        lines.append("")
        lines.append(f"... plus {len(content.rows) - MAX_TABLE_ROWS} more rows in source")
    lines.extend(["", _RULE, "END OF PRIMARY DATA", _RULE, ""])
    return "\n".join(lines)


def _frame_parts(content: VideoContent) -> list[ContentPart]:
    parts: list[ContentPart] = [
        TextPart(f"\n=== VIDEO CONTENT ===\nExtracted {len(content.frames)} key frames:\n")
    ]
    for index, frame in enumerate(content.frames, start=1):
        label = f"\nFrame {index} at {round(frame.timestamp)} seconds:"
        if frame.transcript:
            label += f"\nTranscript: {frame.transcript}"
        parts.append(TextPart(label))
        parts.append(InlineImagePart(data=frame.image_base64, mime_type="image/jpeg"))
    parts.append(TextPart("\n=== END VIDEO ===\n"))
    return parts

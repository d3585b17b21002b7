import pytest

from training_generator.generation.models import InlineImagePart, TextPart
from training_generator.generation.prompt_builder import PromptBuilder, build_content_preview
from training_generator.ingestion.models import (
    FileMetadata,
    ImageContent,
    PageContent,
    PagedContent,
    ParsedFile,
    SupportedFileType,
    TabularContent,
    TextContent,
    UploadedFile,
    VideoContent,
    VideoFrame,
)
from training_generator.ingestion.tabular import format_table_text, parse_csv
from training_generator.outputs.registry import OutputType, get_output_config


def _parsed(
    file_type: SupportedFileType,
    content: object,
    name: str = "source.bin",
    mime_type: str = "",
    **metadata: object,
) -> ParsedFile:
    return ParsedFile(
        original_file=UploadedFile(name=name, data=b"", mime_type=mime_type),
        type=file_type,
        mime_type=mime_type,
        content=content,  # type: ignore[arg-type]
        metadata=FileMetadata(file_name=name, file_size=0, **metadata),  # type: ignore[arg-type]
    )


def _csv_file(text: str) -> ParsedFile:
    headers, rows = parse_csv(text)
    content = TabularContent(
        headers=tuple(headers), rows=tuple(rows), text=format_table_text(headers, rows)
    )
    return _parsed(
        SupportedFileType.CSV,
        content,
        name="sales.csv",
        row_count=len(rows),
        column_count=len(headers),
    )


@pytest.fixture()
def builder() -> PromptBuilder:
    return PromptBuilder()


class TestBuild:
    def test_rejects_auto(self, builder: PromptBuilder) -> None:
        parsed = _parsed(SupportedFileType.TEXT, TextContent(text="x"))
        with pytest.raises(ValueError, match="auto"):
            builder.build(parsed, OutputType.AUTO)

    def test_system_instruction_embeds_fragment(self, builder: PromptBuilder) -> None:
        parsed = _parsed(SupportedFileType.TEXT, TextContent(text="x"))
        prompt = builder.build(parsed, OutputType.FLASHCARD_DRILL)
        fragment = get_output_config(OutputType.FLASHCARD_DRILL).prompt_fragment
        assert fragment in prompt.system_instruction
        assert "<!DOCTYPE html>" in prompt.system_instruction
        assert "window.print()" in prompt.system_instruction
        assert "{prompt_fragment}" not in prompt.system_instruction

    def test_text_file_parts(self, builder: PromptBuilder) -> None:
        parsed = _parsed(SupportedFileType.TEXT, TextContent(text="Close every deal."), name="n.txt")
        prompt = builder.build(parsed, OutputType.OBJECTION_ARENA, "Make it hard")

        assert all(isinstance(p, TextPart) for p in prompt.parts)
        assert "use ONLY the content below".lower() in prompt.parts[0].text.lower()
        assert "ADDITIONAL INSTRUCTIONS: Make it hard" in prompt.parts[0].text
        assert "PRIMARY SOURCE" in prompt.parts[1].text
        assert "File: n.txt" in prompt.parts[1].text
        assert "Close every deal." in prompt.parts[1].text

    def test_no_additional_instructions_by_default(self, builder: PromptBuilder) -> None:
        parsed = _parsed(SupportedFileType.TEXT, TextContent(text="x"))
        prompt = builder.build(parsed, OutputType.FLASHCARD_DRILL)
        assert "ADDITIONAL INSTRUCTIONS" not in prompt.text

    def test_csv_scenario(self, builder: PromptBuilder) -> None:
        parsed = _csv_file("name,signups,revenue\nAna,3,1200.5\nBo,0,0\n")
        prompt = builder.build(parsed, OutputType.COMMISSION_TYCOON)

        assert prompt.images == []
        table = prompt.parts[-1].text
        assert "PRIMARY DATA TABLE" in table
        assert "Total Rows: 2, Columns: 3" in table
        assert "Column Headers: name | signups | revenue" in table
        assert 'Row 1: name="Ana", signups="3", revenue="1200.5"' in table
        assert 'Row 2: name="Bo", signups="0", revenue="0"' in table
        assert "more rows in source" not in table

    def test_table_truncates_after_fifty_rows(self, builder: PromptBuilder) -> None:
        text = "n\n" + "\n".join(str(i) for i in range(60)) + "\n"
        prompt = builder.build(_csv_file(text), OutputType.FLASHCARD_DRILL)
        table = prompt.parts[-1].text
        assert "Row 50:" in table
        assert "Row 51:" not in table
        assert "... plus 10 more rows in source" in table

    def test_pdf_parts_limit_images_to_five_pages(self, builder: PromptBuilder) -> None:
        pages = tuple(
            PageContent(page_number=n, text=f"page {n}", image_base64=f"img{n}")
            for n in range(1, 8)
        )
        parsed = _parsed(
            SupportedFileType.PDF,
            PagedContent(pages=pages, text="[Page 1]\npage 1"),
            page_count=7,
        )
        prompt = builder.build(parsed, OutputType.FLASHCARD_DRILL)

        images = prompt.images
        assert [i.data for i in images] == ["img1", "img2", "img3", "img4", "img5"]
        assert all(i.mime_type == "image/png" for i in images)
        assert "--- PAGE 7 ---\npage 7" in prompt.text

        page_one = next(
            i for i, p in enumerate(prompt.parts)
            if isinstance(p, TextPart) and "--- PAGE 1 ---" in p.text
        )
        assert prompt.parts[page_one + 1] == InlineImagePart(data="img1", mime_type="image/png")

    def test_video_frames(self, builder: PromptBuilder) -> None:
        frames = (VideoFrame(timestamp=12.4, image_base64="f1"), VideoFrame(timestamp=24.6, image_base64="f2"))
        parsed = _parsed(
            SupportedFileType.VIDEO,
            VideoContent(frames=frames, duration=37.0, text='Video: "v.mp4"'),
        )
        prompt = builder.build(parsed, OutputType.INSPECTION_WALKTHROUGH)

        assert "Frame 1 at 12 seconds:" in prompt.text
        assert "Frame 2 at 25 seconds:" in prompt.text
        assert [(i.data, i.mime_type) for i in prompt.images] == [
            ("f1", "image/jpeg"),
            ("f2", "image/jpeg"),
        ]

    def test_image_part_uses_file_media_type(self, builder: PromptBuilder) -> None:
        parsed = _parsed(
            SupportedFileType.IMAGE,
            ImageContent(raw_base64="aW1n", mime_type="image/webp"),
            mime_type="image/webp",
        )
        prompt = builder.build(parsed, OutputType.DAMAGE_DETECTIVE)

        assert "PRIMARY SOURCE" not in prompt.text
        assert "IMAGE FILE" in prompt.text
        assert prompt.images == [InlineImagePart(data="aW1n", mime_type="image/webp")]


class TestBuildAutoSelect:
    def test_single_text_part_without_system_instruction(self, builder: PromptBuilder) -> None:
        prompt = builder.build_auto_select(_csv_file("a,b\n1,2\n"))
        assert prompt.system_instruction == ""
        assert len(prompt.parts) == 1
        for output_type in ("field-simulator", "pitch-perfector", "commission-tycoon"):
            assert output_type in prompt.text
        assert "Data rows: 1, columns: 2" in prompt.text

    def test_preview_truncates_text(self) -> None:
        parsed = _parsed(SupportedFileType.TEXT, TextContent(text="x" * 5000), name="long.txt")
        preview = build_content_preview(parsed)
        assert "x" * 1500 in preview
        assert "x" * 1501 not in preview
        assert "File type: text" in preview
        assert "File name: long.txt" in preview

    def test_preview_counts(self) -> None:
        pages = (PageContent(page_number=1, text="a"),)
        parsed = _parsed(SupportedFileType.PDF, PagedContent(pages=pages, text="a"), page_count=1)
        assert "PDF pages: 1" in build_content_preview(parsed)


class TestBuildRefinement:
    def test_embeds_current_html_and_instruction(self, builder: PromptBuilder) -> None:
        html = "<!DOCTYPE html><html><body>{not a placeholder}</body></html>"
        prompt = builder.build_refinement(html, "add a timer")

        assert html in prompt.text
        assert 'USER INSTRUCTION: "add a timer"' in prompt.text
        assert "interactive elements" in prompt.text
        assert prompt.system_instruction
        assert prompt.images == []

    def test_reference_image_is_attached(self, builder: PromptBuilder) -> None:
        image = InlineImagePart(data="cmVm", mime_type="image/jpeg")
        prompt = builder.build_refinement("<html></html>", "match this", image)
        assert prompt.parts[-1] == image

import pytest

from training_generator.ingestion.classifier import classify
from training_generator.ingestion.exceptions import UnsupportedFileTypeError
from training_generator.ingestion.models import SupportedFileType, UploadedFile


def _file(name: str, mime_type: str = "") -> UploadedFile:
    return UploadedFile(name=name, data=b"x", mime_type=mime_type)


class TestClassifyByMimeType:
    @pytest.mark.parametrize(
        ("mime_type", "expected"),
        [
            ("image/png", SupportedFileType.IMAGE),
            ("application/pdf", SupportedFileType.PDF),
            ("text/csv", SupportedFileType.CSV),
            (
                "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
                SupportedFileType.EXCEL,
            ),
            ("application/vnd.ms-excel", SupportedFileType.EXCEL),
            ("video/mp4", SupportedFileType.VIDEO),
            ("text/markdown", SupportedFileType.MARKDOWN),
            ("text/plain", SupportedFileType.TEXT),
            ("text/html", SupportedFileType.TEXT),
        ],
    )
    def test_mime_categories(self, mime_type: str, expected: SupportedFileType) -> None:
        assert classify(_file("upload", mime_type)) is expected

    def test_ignores_parameters_and_case(self) -> None:
        assert classify(_file("upload", "Text/CSV; charset=utf-8")) is SupportedFileType.CSV

    def test_mime_wins_over_extension(self) -> None:
        assert classify(_file("photo.pdf", "image/jpeg")) is SupportedFileType.IMAGE


class TestClassifyByExtension:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("photo.JPG", SupportedFileType.IMAGE),
            ("drawing.svg", SupportedFileType.IMAGE),
            ("report.pdf", SupportedFileType.PDF),
            ("sales.csv", SupportedFileType.CSV),
            ("book.xlsx", SupportedFileType.EXCEL),
            ("book.xls", SupportedFileType.EXCEL),
            ("clip.mkv", SupportedFileType.VIDEO),
            ("notes.md", SupportedFileType.MARKDOWN),
            ("notes.markdown", SupportedFileType.MARKDOWN),
            ("notes.txt", SupportedFileType.TEXT),
        ],
    )
    def test_extensions_without_mime(self, name: str, expected: SupportedFileType) -> None:
        assert classify(_file(name)) is expected

    def test_generic_mime_falls_back_to_extension(self) -> None:
        assert classify(_file("sales.csv", "application/octet-stream")) is SupportedFileType.CSV

    def test_unknown_mime_falls_back_to_extension(self) -> None:
        assert classify(_file("notes.md", "application/x-weird")) is SupportedFileType.MARKDOWN


class TestClassifyRejects:
    def test_unknown_file_lists_supported_formats(self) -> None:
        with pytest.raises(UnsupportedFileTypeError, match="Supported formats"):
            classify(_file("archive.zip", "application/zip"))

    def test_no_extension_and_no_mime(self) -> None:
        with pytest.raises(UnsupportedFileTypeError):
            classify(_file("README"))

    def test_is_deterministic(self) -> None:
        f = _file("report.pdf", "application/octet-stream")
        assert classify(f) is classify(f)

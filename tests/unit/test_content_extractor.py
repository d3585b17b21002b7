from unittest.mock import MagicMock

import pytest

from training_generator.ingestion.exceptions import ExtractionFailedError
from training_generator.ingestion.extractor import ContentExtractor
from training_generator.ingestion.models import SupportedFileType, TextContent, UploadedFile


def _adapters(**overrides: MagicMock) -> dict[SupportedFileType, MagicMock]:
    adapters = {file_type: MagicMock() for file_type in SupportedFileType}
    for name, adapter in overrides.items():
        adapters[SupportedFileType(name)] = adapter
    return adapters


class TestContentExtractor:
    def test_requires_every_file_type(self) -> None:
        adapters = _adapters()
        del adapters[SupportedFileType.VIDEO]
        with pytest.raises(ValueError, match="video"):
            ContentExtractor(adapters)

    def test_dispatches_to_adapter_for_type(self) -> None:
        text_adapter = MagicMock()
        text_adapter.extract.return_value = TextContent(text="hi")
        extractor = ContentExtractor(_adapters(text=text_adapter))
        file = UploadedFile(name="a.txt", data=b"hi")

        assert extractor.extract(file, SupportedFileType.TEXT) == TextContent(text="hi")
        text_adapter.extract.assert_called_once_with(file)

    def test_wraps_unexpected_errors(self) -> None:
        adapter = MagicMock()
        adapter.extract.side_effect = RuntimeError("boom")
        extractor = ContentExtractor(_adapters(csv=adapter))

        with pytest.raises(ExtractionFailedError, match="boom") as exc_info:
            extractor.extract(UploadedFile(name="a.csv", data=b""), SupportedFileType.CSV)
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_passes_extraction_errors_through(self) -> None:
        original = ExtractionFailedError("bad csv")
        adapter = MagicMock()
        adapter.extract.side_effect = original
        extractor = ContentExtractor(_adapters(csv=adapter))

        with pytest.raises(ExtractionFailedError) as exc_info:
            extractor.extract(UploadedFile(name="a.csv", data=b""), SupportedFileType.CSV)
        assert exc_info.value is original

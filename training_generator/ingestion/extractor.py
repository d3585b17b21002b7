from collections.abc import Mapping

from training_generator.config.settings import Settings
from training_generator.ingestion.exceptions import ExtractionFailedError
from training_generator.ingestion.extractors import (
    BaseContentExtractor,
    CsvAdapter,
    ExcelAdapter,
    ImageAdapter,
    TextAdapter,
    VideoAdapter,
)
from training_generator.ingestion.models import ExtractedContent, SupportedFileType, UploadedFile
from training_generator.logging.logger import Log
from training_generator.pdf.factory import PdfExtractorFactory


class ContentExtractor:
    """Dispatches a classified file to the adapter for its type.

    The adapter table must cover every SupportedFileType.
    """

    def __init__(self, adapters: Mapping[SupportedFileType, BaseContentExtractor]) -> None:
        missing = [t.value for t in SupportedFileType if t not in adapters]
        if missing:
            raise ValueError(f"No extractor registered for file types: {missing}")
        self._adapters = dict(adapters)

    def extract(self, file: UploadedFile, file_type: SupportedFileType) -> ExtractedContent:
        """Run the adapter for file_type.

        Raises:
            ExtractionFailedError: on malformed or unreadable input.
        """
        adapter = self._adapters[file_type]
        Log.debug(f"Extracting '{file.name}' as {file_type.value} with {type(adapter).__name__}")
        try:
            return adapter.extract(file)
        except ExtractionFailedError:
            raise
        except Exception as exc:
            raise ExtractionFailedError(
                f"Could not extract {file_type.value} content from '{file.name}': {exc}"
            ) from exc


def build_content_extractor(settings: Settings) -> ContentExtractor:
    """Build a ContentExtractor with one adapter per file type."""
    text_adapter = TextAdapter()
    return ContentExtractor({
        SupportedFileType.IMAGE: ImageAdapter(),
        SupportedFileType.PDF: PdfExtractorFactory.create(settings),
        SupportedFileType.CSV: CsvAdapter(),
        SupportedFileType.EXCEL: ExcelAdapter(),
        SupportedFileType.TEXT: text_adapter,
        SupportedFileType.MARKDOWN: text_adapter,
        SupportedFileType.VIDEO: VideoAdapter(settings.video_metadata_timeout_seconds),
    })

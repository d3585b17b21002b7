from training_generator.config.settings import Settings
from training_generator.ingestion.classifier import classify
from training_generator.ingestion.extractor import ContentExtractor, build_content_extractor
from training_generator.ingestion.models import (
    ExtractedContent,
    FileMetadata,
    PagedContent,
    ParsedFile,
    TabularContent,
    UploadedFile,
    VideoContent,
)
from training_generator.logging.logger import Log


class FileProcessor:
    """Turns an uploaded file into a ParsedFile.

    Pipeline: classify -> extract -> metadata. Any failure aborts before
    a prompt is ever built.
    """

    def __init__(self, extractor: ContentExtractor) -> None:
        self._extractor = extractor

    def process(self, file: UploadedFile) -> ParsedFile:
        """Run the ingestion pipeline for one file.

        Raises:
            UnsupportedFileTypeError: if the file cannot be classified.
            ExtractionFailedError: if its content cannot be extracted.
        """
        Log.info(f"Processing '{file.name}' ({file.size} bytes, mime '{file.mime_type}')")

        file_type = classify(file)
        Log.info(f"Classified '{file.name}' as {file_type.value}")

        content = self._extractor.extract(file, file_type)
        metadata = build_metadata(file, content)
        Log.info(f"Extracted {content.type} content from '{file.name}'")

        return ParsedFile(
            original_file=file,
            type=file_type,
            mime_type=file.mime_type,
            content=content,
            metadata=metadata,
        )


def build_metadata(file: UploadedFile, content: ExtractedContent) -> FileMetadata:
    """Derive the summary counts for a file from its content."""
    if isinstance(content, PagedContent):
        return FileMetadata(
            file_name=file.name,
            file_size=file.size,
            page_count=len(content.pages),
        )
    if isinstance(content, TabularContent):
        return FileMetadata(
            file_name=file.name,
            file_size=file.size,
            row_count=len(content.rows),
            column_count=len(content.headers),
        )
    if isinstance(content, VideoContent):
        return FileMetadata(
            file_name=file.name,
            file_size=file.size,
            duration=content.duration,
            frame_count=len(content.frames),
        )
    return FileMetadata(file_name=file.name, file_size=file.size)


def build_processor(settings: Settings) -> FileProcessor:
    """Build a FileProcessor with all extraction adapters."""
    return FileProcessor(build_content_extractor(settings))

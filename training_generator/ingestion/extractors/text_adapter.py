from training_generator.ingestion.extractors.base import BaseContentExtractor
from training_generator.ingestion.models import TextContent, UploadedFile


class TextAdapter(BaseContentExtractor):
    """Reads text and markdown files verbatim."""

    def extract(self, file: UploadedFile) -> TextContent:
        return TextContent(text=decode_text(file.data))


def decode_text(data: bytes) -> str:
    """Decode UTF-8, dropping a leading BOM and replacing invalid bytes."""
    return data.decode("utf-8-sig", errors="replace")

from training_generator.ingestion.exceptions import ExtractionFailedError
from training_generator.ingestion.extractors.base import BaseContentExtractor
from training_generator.ingestion.models import TabularContent, UploadedFile
from training_generator.ingestion.tabular import format_table_text, parse_csv


class CsvAdapter(BaseContentExtractor):
    """Parses comma-separated files into header-keyed rows."""

    def extract(self, file: UploadedFile) -> TabularContent:
        try:
            text = file.data.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise ExtractionFailedError(f"CSV file is not valid UTF-8: {exc}") from exc
        headers, rows = parse_csv(text)
        return TabularContent(
            headers=tuple(headers),
            rows=tuple(rows),
            text=format_table_text(headers, rows),
        )

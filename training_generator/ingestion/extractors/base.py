from abc import ABC, abstractmethod

from training_generator.ingestion.models import ExtractedContent, UploadedFile


class BaseContentExtractor(ABC):
    """Contract for all per-format content extraction adapters."""

    @abstractmethod
    def extract(self, file: UploadedFile) -> ExtractedContent:
        """Turn raw file bytes into a normalized content payload.

        Args:
            file: The uploaded file; never modified.

        Returns:
            The ExtractedContent variant for this adapter's file type.

        Raises:
            ExtractionFailedError: if the file is malformed or unreadable.
        """

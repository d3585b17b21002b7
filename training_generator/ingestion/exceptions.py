class IngestionError(Exception):
    """Base exception for all file ingestion errors."""


class UnsupportedFileTypeError(IngestionError):
    """Raised when a file matches no supported media type or extension."""


class ExtractionFailedError(IngestionError):
    """Raised when a file cannot be parsed or decoded by its adapter."""


class VideoLoadTimeoutError(ExtractionFailedError):
    """Raised when video metadata does not load within the configured bound."""


class FileReadError(IngestionError):
    """Raised when a file cannot be read from disk."""

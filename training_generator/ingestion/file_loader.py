from pathlib import Path

from training_generator.ingestion.exceptions import FileReadError
from training_generator.ingestion.models import UploadedFile


class FileLoader:
    """Reads a local file into an UploadedFile."""

    def load(self, path: Path, mime_type: str = "") -> UploadedFile:
        """Read file bytes from disk.

        The declared media type is passed through untouched; an empty value
        leaves classification to the file extension.

        Raises:
            FileNotFoundError: if the file does not exist.
            FileReadError: if the file exists but cannot be read.
        """
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        if not path.is_file():
            raise FileReadError(f"Not a regular file: {path}")
        try:
            data = path.read_bytes()
        except OSError as exc:
            raise FileReadError(f"Failed to read {path}: {exc}") from exc
        return UploadedFile(name=path.name, data=data, mime_type=mime_type)

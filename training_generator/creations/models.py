"""Creation records and their JSON export format.

Exports are flat camelCase objects so files written by earlier versions of
the tool import unchanged.
"""

import json
import uuid
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Any

from training_generator.creations.exceptions import CreationImportError
from training_generator.ingestion.models import FileMetadata, SupportedFileType
from training_generator.outputs.registry import OutputType

_METADATA_KEYS = (
    ("file_name", "fileName"),
    ("file_size", "fileSize"),
    ("page_count", "pageCount"),
    ("row_count", "rowCount"),
    ("column_count", "columnCount"),
    ("duration", "duration"),
    ("frame_count", "frameCount"),
)


@dataclass(frozen=True)
class Creation:
    """A generated training artifact and where it came from."""

    id: str
    name: str
    html: str
    timestamp: datetime
    original_image: str | None = None
    output_type: OutputType | None = None
    source_file_type: SupportedFileType | None = None
    metadata: FileMetadata | None = None

    def with_html(self, html: str) -> "Creation":
        """Copy with new markup and a fresh timestamp; the id is kept."""
        return replace(self, html=html, timestamp=_now())

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "html": self.html,
            "originalImage": self.original_image,
            "outputType": self.output_type.value if self.output_type else None,
            "sourceFileType": self.source_file_type.value if self.source_file_type else None,
            "metadata": _metadata_to_dict(self.metadata),
            "timestamp": self.timestamp.isoformat(),
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)

    @classmethod
    def from_dict(cls, data: Any) -> "Creation":
        """Build a creation from exported data.

        Missing id and timestamp are regenerated.

        Raises:
            CreationImportError: if html or name is missing or a field is malformed.
        """
        if not isinstance(data, dict):
            raise CreationImportError("Creation data must be a JSON object")
        html = data.get("html")
        name = data.get("name")
        if not isinstance(html, str) or not html:
            raise CreationImportError("Creation data is missing 'html'")
        if not isinstance(name, str) or not name:
            raise CreationImportError("Creation data is missing 'name'")

        original_image = data.get("originalImage")
        if original_image is not None and not isinstance(original_image, str):
            raise CreationImportError("'originalImage' must be a string or null")

        return cls(
            id=str(data.get("id") or uuid.uuid4()),
            name=name,
            html=html,
            timestamp=_parse_timestamp(data.get("timestamp")),
            original_image=original_image,
            output_type=_parse_enum(OutputType, data.get("outputType"), "outputType"),
            source_file_type=_parse_enum(
                SupportedFileType, data.get("sourceFileType"), "sourceFileType"
            ),
            metadata=_metadata_from_dict(data.get("metadata")),
        )

    @classmethod
    def from_json(cls, text: str) -> "Creation":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise CreationImportError(f"Invalid creation JSON: {exc}") from exc
        return cls.from_dict(data)


def new_creation(
    *,
    name: str,
    html: str,
    original_image: str | None = None,
    output_type: OutputType | None = None,
    source_file_type: SupportedFileType | None = None,
    metadata: FileMetadata | None = None,
) -> Creation:
    """Create a record with a random id and the current time."""
    return Creation(
        id=str(uuid.uuid4()),
        name=name,
        html=html,
        timestamp=_now(),
        original_image=original_image,
        output_type=output_type,
        source_file_type=source_file_type,
        metadata=metadata,
    )


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _parse_timestamp(raw: Any) -> datetime:
    if raw is None or raw == "":
        return _now()
    if not isinstance(raw, str):
        raise CreationImportError("'timestamp' must be an ISO-8601 string")
    value = raw[:-1] + "+00:00" if raw.endswith("Z") else raw
    try:
        return datetime.fromisoformat(value)
    except ValueError as exc:
        raise CreationImportError(f"Invalid timestamp: {raw!r}") from exc


def _parse_enum(enum_cls: type, raw: Any, field_name: str) -> Any:
    if raw is None:
        return None
    try:
        return enum_cls(raw)
    except ValueError as exc:
        raise CreationImportError(f"Unknown {field_name}: {raw!r}") from exc


def _metadata_to_dict(metadata: FileMetadata | None) -> dict[str, Any] | None:
    if metadata is None:
        return None
    return {key: getattr(metadata, attr) for attr, key in _METADATA_KEYS}


def _metadata_from_dict(raw: Any) -> FileMetadata | None:
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise CreationImportError("'metadata' must be an object or null")
    values = {attr: raw.get(key) for attr, key in _METADATA_KEYS}
    if not isinstance(values["file_name"], str):
        raise CreationImportError("'metadata.fileName' must be a string")
    if not isinstance(values["file_size"], int):
        raise CreationImportError("'metadata.fileSize' must be an integer")
    return FileMetadata(**values)

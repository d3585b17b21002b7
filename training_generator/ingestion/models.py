from dataclasses import dataclass
from enum import Enum


class SupportedFileType(str, Enum):
    """Logical file types the ingestion pipeline accepts."""

    IMAGE = "image"
    PDF = "pdf"
    CSV = "csv"
    EXCEL = "excel"
    TEXT = "text"
    MARKDOWN = "markdown"
    VIDEO = "video"


@dataclass(frozen=True)
class UploadedFile:
    """Raw source file as handed over by the caller."""

    name: str
    data: bytes
    mime_type: str = ""

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def extension(self) -> str:
        _, dot, ext = self.name.rpartition(".")
        return ext.lower() if dot else ""


CellValue = str | int | float
DataRow = dict[str, CellValue]


@dataclass(frozen=True)
class PageContent:
    """Text and rendered raster of one document page."""

    page_number: int
    text: str
    image_base64: str | None = None


@dataclass(frozen=True)
class VideoFrame:
    """A still captured from a video at a given offset."""

    timestamp: float
    image_base64: str
    transcript: str | None = None


@dataclass(frozen=True)
class TextContent:
    """Plain text or markdown, kept verbatim."""

    type: str = "text"
    text: str = ""


@dataclass(frozen=True)
class PagedContent:
    """Paginated document with per-page text and images."""

    type: str = "paged"
    pages: tuple[PageContent, ...] = ()
    text: str = ""


@dataclass(frozen=True)
class TabularContent:
    """Rows keyed by column header plus a readable summary."""

    type: str = "tabular"
    headers: tuple[str, ...] = ()
    rows: tuple[DataRow, ...] = ()
    text: str = ""


@dataclass(frozen=True)
class VideoContent:
    """Evenly spaced key frames sampled from a video."""

    type: str = "video"
    frames: tuple[VideoFrame, ...] = ()
    duration: float = 0.0
    text: str = ""


@dataclass(frozen=True)
class ImageContent:
    """A single image, base64-encoded without downscaling."""

    type: str = "image"
    raw_base64: str = ""
    mime_type: str = ""


ExtractedContent = TextContent | PagedContent | TabularContent | VideoContent | ImageContent


@dataclass(frozen=True)
class FileMetadata:
    """Summary derived once from the extracted content."""

    file_name: str
    file_size: int
    page_count: int | None = None
    row_count: int | None = None
    column_count: int | None = None
    duration: float | None = None
    frame_count: int | None = None


@dataclass(frozen=True)
class ParsedFile:
    """Canonical output of the ingestion pipeline."""

    original_file: UploadedFile
    type: SupportedFileType
    mime_type: str
    content: ExtractedContent
    metadata: FileMetadata

    @property
    def text(self) -> str:
        """Readable flattening of the content; empty for single images."""
        if isinstance(self.content, ImageContent):
            return ""
        return self.content.text

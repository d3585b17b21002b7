"""Determines the logical file type from declared media type and extension."""

from training_generator.ingestion.exceptions import UnsupportedFileTypeError
from training_generator.ingestion.models import SupportedFileType, UploadedFile

IMAGE_EXTENSIONS = frozenset({"jpg", "jpeg", "png", "gif", "webp", "svg", "bmp"})
VIDEO_EXTENSIONS = frozenset({"mp4", "webm", "mov", "avi", "mkv"})

# Checked in order; mirrors the media-type priority below.
_EXTENSION_CATEGORIES: tuple[tuple[SupportedFileType, frozenset[str]], ...] = (
    (SupportedFileType.IMAGE, IMAGE_EXTENSIONS),
    (SupportedFileType.PDF, frozenset({"pdf"})),
    (SupportedFileType.CSV, frozenset({"csv"})),
    (SupportedFileType.EXCEL, frozenset({"xlsx", "xls"})),
    (SupportedFileType.VIDEO, VIDEO_EXTENSIONS),
    (SupportedFileType.MARKDOWN, frozenset({"md", "markdown"})),
    (SupportedFileType.TEXT, frozenset({"txt"})),
)

_GENERIC_MIME_TYPES = frozenset({
    "application/octet-stream",
    "binary/octet-stream",
    "application/unknown",
})

SUPPORTED_FORMATS_MESSAGE = (
    "Supported formats: images (JPG, PNG, GIF, WEBP, SVG, BMP), PDF, CSV, "
    "Excel (XLSX, XLS), text (TXT), markdown (MD) and video (MP4, WEBM, MOV, AVI, MKV)"
)


def classify(file: UploadedFile) -> SupportedFileType:
    """Return the SupportedFileType for a file.

    The declared media type wins whenever it names a known category;
    the extension is consulted only when the media type is absent,
    generic or unrecognized.

    Raises:
        UnsupportedFileTypeError: if neither signal matches.
    """
    mime = _normalize_mime(file.mime_type)
    by_mime = _classify_mime(mime) if mime not in _GENERIC_MIME_TYPES else None
    if by_mime is not None:
        return by_mime

    by_extension = _classify_extension(file.extension)
    if by_extension is not None:
        return by_extension

    raise UnsupportedFileTypeError(
        f"Unsupported file type: {mime or file.name}. {SUPPORTED_FORMATS_MESSAGE}"
    )


def _normalize_mime(mime_type: str) -> str:
    return (mime_type or "").split(";", 1)[0].strip().lower()


def _classify_mime(mime: str) -> SupportedFileType | None:
    if not mime:
        return None
    if mime.startswith("image/"):
        return SupportedFileType.IMAGE
    if mime == "application/pdf":
        return SupportedFileType.PDF
    if mime == "text/csv":
        return SupportedFileType.CSV
    if "spreadsheet" in mime or "excel" in mime:
        return SupportedFileType.EXCEL
    if mime.startswith("video/"):
        return SupportedFileType.VIDEO
    if mime == "text/markdown":
        return SupportedFileType.MARKDOWN
    if mime.startswith("text/"):
        return SupportedFileType.TEXT
    return None


def _classify_extension(ext: str) -> SupportedFileType | None:
    if not ext:
        return None
    for file_type, extensions in _EXTENSION_CATEGORIES:
        if ext in extensions:
            return file_type
    return None

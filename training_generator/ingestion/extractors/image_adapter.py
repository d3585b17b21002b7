import base64
import io
import mimetypes

from PIL import Image, UnidentifiedImageError

from training_generator.ingestion.exceptions import ExtractionFailedError
from training_generator.ingestion.extractors.base import BaseContentExtractor
from training_generator.ingestion.models import ImageContent, UploadedFile

_GENERIC_MIME_TYPES = frozenset({"", "application/octet-stream", "binary/octet-stream"})


class ImageAdapter(BaseContentExtractor):
    """Validates an image and encodes its full bytes as base64."""

    def extract(self, file: UploadedFile) -> ImageContent:
        mime_type = _resolve_mime_type(file)
        if mime_type == "image/svg+xml":
            _verify_svg(file)
        else:
            _verify_raster(file)
        return ImageContent(
            raw_base64=base64.b64encode(file.data).decode("ascii"),
            mime_type=mime_type,
        )


def _resolve_mime_type(file: UploadedFile) -> str:
    declared = file.mime_type.split(";", 1)[0].strip().lower()
    if declared not in _GENERIC_MIME_TYPES:
        return declared
    guessed, _ = mimetypes.guess_type(file.name)
    return guessed or "image/png"


def _verify_raster(file: UploadedFile) -> None:
    if not file.data:
        raise ExtractionFailedError(f"Image '{file.name}' is empty")
    try:
        with Image.open(io.BytesIO(file.data)) as image:
            image.verify()
    except (UnidentifiedImageError, OSError, SyntaxError, ValueError) as exc:
        raise ExtractionFailedError(f"Image '{file.name}' could not be decoded: {exc}") from exc


def _verify_svg(file: UploadedFile) -> None:
    try:
        markup = file.data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise ExtractionFailedError(f"SVG '{file.name}' is not valid UTF-8: {exc}") from exc
    if "<svg" not in markup.lower():
        raise ExtractionFailedError(f"SVG '{file.name}' has no <svg> element")

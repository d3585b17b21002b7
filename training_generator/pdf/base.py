import re
from abc import abstractmethod

from training_generator.ingestion.extractors.base import BaseContentExtractor
from training_generator.ingestion.models import PageContent, PagedContent, UploadedFile

MAX_PAGES = 20
DEFAULT_RENDER_SCALE = 1.5

_WHITESPACE_RE = re.compile(r"\s+")


class BasePdfExtractor(BaseContentExtractor):
    """Contract for PDF adapters: per-page text plus a PNG render of each page.

    Only the first MAX_PAGES pages are read.
    """

    def __init__(self, render_scale: float = DEFAULT_RENDER_SCALE) -> None:
        self._render_scale = render_scale

    def extract(self, file: UploadedFile) -> PagedContent:
        pages = self.extract_pages(file.data)
        return PagedContent(pages=tuple(pages), text=join_pages(pages))

    @abstractmethod
    def extract_pages(self, pdf_bytes: bytes) -> list[PageContent]:
        """Extract text and a rendered image for each of the first pages.

        Raises:
            ExtractionFailedError: if the document cannot be opened or rendered.
        """


def collapse_whitespace(text: str | None) -> str:
    return _WHITESPACE_RE.sub(" ", text or "").strip()


def join_pages(pages: list[PageContent]) -> str:
    return "\n\n".join(f"[Page {page.page_number}]\n{page.text}" for page in pages)

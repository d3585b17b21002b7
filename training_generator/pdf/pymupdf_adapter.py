import base64

import pymupdf

from training_generator.ingestion.exceptions import ExtractionFailedError
from training_generator.ingestion.models import PageContent
from training_generator.pdf.base import MAX_PAGES, BasePdfExtractor, collapse_whitespace


class PyMuPdfAdapter(BasePdfExtractor):
    """Extracts page text and PNG renders using PyMuPDF."""

    def extract_pages(self, pdf_bytes: bytes) -> list[PageContent]:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                matrix = pymupdf.Matrix(self._render_scale, self._render_scale)
                pages: list[PageContent] = []
                for index in range(min(doc.page_count, MAX_PAGES)):
                    page = doc[index]
                    png = page.get_pixmap(matrix=matrix).tobytes("png")
                    pages.append(PageContent(
                        page_number=index + 1,
                        text=collapse_whitespace(page.get_text()),
                        image_base64=base64.b64encode(png).decode("ascii"),
                    ))
            return pages
        except ExtractionFailedError:
            raise
        except Exception as exc:
            raise ExtractionFailedError(f"pymupdf extraction failed: {exc}") from exc

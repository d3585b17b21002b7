import base64
import io

import pdfplumber

from training_generator.ingestion.exceptions import ExtractionFailedError
from training_generator.ingestion.models import PageContent
from training_generator.pdf.base import MAX_PAGES, BasePdfExtractor, collapse_whitespace

_BASE_DPI = 72


class PdfPlumberAdapter(BasePdfExtractor):
    """Extracts page text and PNG renders using pdfplumber."""

    def extract_pages(self, pdf_bytes: bytes) -> list[PageContent]:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                pages: list[PageContent] = []
                for index, page in enumerate(pdf.pages[:MAX_PAGES]):
                    rendered = page.to_image(resolution=_BASE_DPI * self._render_scale)
                    buffer = io.BytesIO()
                    rendered.original.save(buffer, format="PNG")
                    pages.append(PageContent(
                        page_number=index + 1,
                        text=collapse_whitespace(page.extract_text()),
                        image_base64=base64.b64encode(buffer.getvalue()).decode("ascii"),
                    ))
            return pages
        except ExtractionFailedError:
            raise
        except Exception as exc:
            raise ExtractionFailedError(f"pdfplumber extraction failed: {exc}") from exc

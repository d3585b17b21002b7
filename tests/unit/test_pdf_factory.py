import pytest

from training_generator.config.settings import Settings
from training_generator.pdf.factory import PdfExtractorFactory
from training_generator.pdf.pdfplumber_adapter import PdfPlumberAdapter
from training_generator.pdf.pymupdf_adapter import PyMuPdfAdapter


class TestPdfExtractorFactory:
    def test_creates_pdfplumber_adapter(self) -> None:
        adapter = PdfExtractorFactory.create(Settings(pdf_engine="pdfplumber"))
        assert isinstance(adapter, PdfPlumberAdapter)

    def test_creates_pymupdf_adapter(self) -> None:
        adapter = PdfExtractorFactory.create(Settings(pdf_engine="pymupdf"))
        assert isinstance(adapter, PyMuPdfAdapter)

    def test_is_case_insensitive(self) -> None:
        adapter = PdfExtractorFactory.create(Settings(pdf_engine="PdfPlumber"))
        assert isinstance(adapter, PdfPlumberAdapter)

    def test_raises_for_unknown_engine(self) -> None:
        with pytest.raises(ValueError, match="Unknown PDF engine"):
            PdfExtractorFactory.create(Settings(pdf_engine="unknown"))

    def test_raises_for_non_positive_scale(self) -> None:
        with pytest.raises(ValueError, match="pdf_render_scale"):
            PdfExtractorFactory.create(Settings(pdf_render_scale=0))

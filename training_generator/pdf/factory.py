from training_generator.config.settings import Settings
from training_generator.pdf.base import BasePdfExtractor
from training_generator.pdf.pdfplumber_adapter import PdfPlumberAdapter
from training_generator.pdf.pymupdf_adapter import PyMuPdfAdapter


class PdfExtractorFactory:
    """Creates the correct PDF extractor based on settings."""

    ADAPTERS: dict[str, type[BasePdfExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePdfExtractor:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        if settings.pdf_render_scale <= 0:
            raise ValueError("pdf_render_scale must be positive")
        return adapter_cls(render_scale=settings.pdf_render_scale)

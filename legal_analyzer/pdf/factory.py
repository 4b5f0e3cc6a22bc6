from collections.abc import Callable

from legal_analyzer.config.settings import Settings
from legal_analyzer.logging.logger import Log
from legal_analyzer.pdf.base import BasePdfExtractor
from legal_analyzer.pdf.pdfplumber_adapter import PdfPlumberAdapter
from legal_analyzer.pdf.pymupdf_adapter import PyMuPdfAdapter

PDF_ENGINES: dict[str, Callable[[], BasePdfExtractor]] = {
    "pdfplumber": PdfPlumberAdapter,
    "pymupdf": PyMuPdfAdapter,
}


class PdfExtractorFactory:
    """Picks the text-layer reader; pdfplumber unless ``PDF_ENGINE`` says otherwise."""

    DEFAULT_ENGINE = "pdfplumber"

    @classmethod
    def create(cls, settings: Settings) -> BasePdfExtractor:
        engine = (settings.pdf_engine or cls.DEFAULT_ENGINE).strip().lower()
        try:
            build = PDF_ENGINES[engine]
        except KeyError:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Available engines: {', '.join(sorted(PDF_ENGINES))}"
            ) from None
        Log.debug("PDF text-layer engine selected", engine=engine)
        return build()

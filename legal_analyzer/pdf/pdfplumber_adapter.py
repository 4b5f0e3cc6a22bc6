import io

import pdfplumber
from pdfminer.pdfdocument import PDFPasswordIncorrect

from legal_analyzer.pdf.base import BasePdfExtractor
from legal_analyzer.pdf.exceptions import PdfExtractionError, PdfPasswordProtectedError


class PdfPlumberAdapter(BasePdfExtractor):
    """Reads the PDF text layer with pdfplumber, one block per non-blank page."""

    def extract(self, pdf_bytes: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                pages = [(page.extract_text() or "").strip() for page in pdf.pages]
        except Exception as exc:
            if _is_password_error(exc):
                raise PdfPasswordProtectedError("PDF is password protected") from exc
            raise PdfExtractionError(f"pdfplumber extraction failed: {exc}") from exc
        return "\n".join(page for page in pages if page)


def _is_password_error(exc: Exception) -> bool:
    # pdfplumber wraps pdfminer errors in PdfminerException(original)
    candidates = (exc, exc.__cause__, *exc.args)
    return any(isinstance(candidate, PDFPasswordIncorrect) for candidate in candidates)

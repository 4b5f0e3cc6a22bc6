import pymupdf

from legal_analyzer.pdf.base import BasePdfExtractor
from legal_analyzer.pdf.exceptions import PdfExtractionError, PdfPasswordProtectedError


class PyMuPdfAdapter(BasePdfExtractor):
    """Reads the PDF text layer with PyMuPDF, blocks sorted into reading order."""

    def extract(self, pdf_bytes: bytes) -> str:
        try:
            doc = pymupdf.open(stream=pdf_bytes, filetype="pdf")  # type: ignore[no-untyped-call]
        except Exception as exc:
            raise PdfExtractionError(f"pymupdf could not open document: {exc}") from exc

        with doc:
            if doc.needs_pass:
                raise PdfPasswordProtectedError("PDF is password protected")
            try:
                pages = [page.get_text("text", sort=True).strip() for page in doc]
            except Exception as exc:
                raise PdfExtractionError(f"pymupdf text extraction failed: {exc}") from exc

        # Blank pages of scanned documents would only add separators.
        return "\n".join(page for page in pages if page)

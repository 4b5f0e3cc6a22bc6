import io

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from legal_analyzer.pdf.exceptions import PdfExtractionError, PdfPasswordProtectedError
from legal_analyzer.pdf.pymupdf_adapter import PyMuPdfAdapter


class TestPyMuPdfAdapter:
    def test_extract_returns_text(self, sample_pdf_bytes: bytes) -> None:
        assert "Hello PDF World" in PyMuPdfAdapter().extract(sample_pdf_bytes)

    def test_extract_multi_page(self, multi_page_pdf_bytes: bytes) -> None:
        result = PyMuPdfAdapter().extract(multi_page_pdf_bytes)
        assert "Page one content" in result
        assert "Page two content" in result

    def test_extract_empty_pdf_returns_empty_string(self, empty_pdf_bytes: bytes) -> None:
        assert PyMuPdfAdapter().extract(empty_pdf_bytes) == ""

    def test_extract_raises_on_invalid_bytes(self) -> None:
        with pytest.raises(PdfExtractionError):
            PyMuPdfAdapter().extract(b"not a pdf")

    def test_password_protected_pdf(self) -> None:
        buf = io.BytesIO()
        c = canvas.Canvas(buf, pagesize=letter, encrypt="secret")
        c.drawString(72, 720, "Confidential")
        c.save()
        with pytest.raises(PdfPasswordProtectedError):
            PyMuPdfAdapter().extract(buf.getvalue())

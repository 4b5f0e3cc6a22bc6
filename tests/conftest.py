import io

import docx
import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

LEASE_LINES = (
    "RESIDENTIAL LEASE AGREEMENT",
    "This lease agreement is made between the Landlord and the Tenant.",
    "The Tenant shall pay monthly rent of 1,200 dollars on the first day of each month.",
    "A late fee of 50 dollars applies to payments received after the fifth day.",
    "Either party may terminate this lease with sixty days written notice.",
)


def _pdf_with_lines(pages: list[list[str]]) -> bytes:
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    for lines in pages:
        y = 720
        for line in lines:
            c.drawString(72, y, line)
            y -= 18
        c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    return _pdf_with_lines([["Hello PDF World"]])


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    return _pdf_with_lines([["Page one content"], ["Page two content"]])


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def lease_pdf_bytes() -> bytes:
    """A text-layer PDF long enough for a realistic analysis request."""
    return _pdf_with_lines([list(LEASE_LINES)])


@pytest.fixture()
def numeric_pdf_bytes() -> bytes:
    """A PDF whose text layer is only digits and punctuation."""
    return _pdf_with_lines([["1234 5678 9012 3456", "$$$ ### %%% 000-111-222"]])


@pytest.fixture()
def docx_bytes() -> bytes:
    """A Word document with two paragraphs and a small table."""
    document = docx.Document()
    document.add_paragraph("Employment Agreement")
    document.add_paragraph("The Employee agrees to keep company information confidential.")
    table = document.add_table(rows=1, cols=2)
    table.rows[0].cells[0].text = "Salary"
    table.rows[0].cells[1].text = "Paid monthly"
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


@pytest.fixture()
def empty_docx_bytes() -> bytes:
    """A valid Word document without any text."""
    buf = io.BytesIO()
    docx.Document().save(buf)
    return buf.getvalue()

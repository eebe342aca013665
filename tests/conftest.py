import io

import docx
import openpyxl
import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Hello PDF World")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def docx_bytes() -> bytes:
    """Word document with two paragraphs and a small table."""
    document = docx.Document()
    document.add_paragraph("Meeting notes from Tuesday")
    document.add_paragraph("We agreed on the spring budget.")
    table = document.add_table(rows=2, cols=2)
    table.cell(0, 0).text = "Item"
    table.cell(0, 1).text = "Cost"
    table.cell(1, 0).text = "Venue"
    table.cell(1, 1).text = "400"
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


@pytest.fixture()
def checklist_docx_bytes() -> bytes:
    """Word document that is a task list."""
    document = docx.Document()
    for line in ("[ ] Call the plumber", "[ ] Book flights", "[x] Renew passport"):
        document.add_paragraph(line)
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


@pytest.fixture()
def xlsx_bytes() -> bytes:
    """Workbook with one sheet of expenses."""
    workbook = openpyxl.Workbook()
    sheet = workbook.active
    sheet.title = "Expenses"
    sheet.append(["Date", "Item", "Amount"])
    sheet.append(["2025-01-10", "Groceries", 42.5])
    buf = io.BytesIO()
    workbook.save(buf)
    return buf.getvalue()


@pytest.fixture()
def png_bytes() -> bytes:
    """PNG signature plus filler; images are only forwarded, never decoded locally."""
    return b"\x89PNG\r\n\x1a\n" + b"\x00" * 32

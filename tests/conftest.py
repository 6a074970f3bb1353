import io

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from vectorizer.catalog.models import CatalogRecord
from vectorizer.storage.models import StorageObject

LONG_LINE = "Informe anual sobre desarrollo sostenible en America Latina"


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a single-page PDF whose text passes the acceptance threshold."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, LONG_LINE)
    c.drawString(72, 700, "Segunda linea del documento de prueba")
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
def short_pdf_bytes() -> bytes:
    """Generate a PDF whose text is below the acceptance threshold."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Short")
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
def storage_object() -> StorageObject:
    return StorageObject(
        id="obj-1",
        name="informe-2020.pdf",
        size_bytes=2048,
        created_at="2024-05-01T10:00:00.000Z",
    )


@pytest.fixture()
def catalog_record() -> CatalogRecord:
    return CatalogRecord(
        document_key="informe-2020",
        title="Informe 2020",
        source_url="https://publications.iadb.org/informe-2020",
    )

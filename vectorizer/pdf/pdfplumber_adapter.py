import io

import pdfplumber

from vectorizer.pdf.base import PAGE_SEPARATOR, BasePdfExtractor
from vectorizer.pdf.exceptions import PdfExtractionError


class PdfPlumberAdapter(BasePdfExtractor):
    """In-process extraction with pdfplumber, for hosts without poppler."""

    def extract(self, pdf_bytes: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                return PAGE_SEPARATOR.join(page.extract_text() or "" for page in pdf.pages)
        except Exception as exc:
            raise PdfExtractionError(f"pdfplumber extraction failed: {exc}") from exc

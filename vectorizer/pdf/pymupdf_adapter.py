import pymupdf

from vectorizer.pdf.base import PAGE_SEPARATOR, BasePdfExtractor
from vectorizer.pdf.exceptions import PdfExtractionError


class PyMuPdfAdapter(BasePdfExtractor):
    """In-process extraction with PyMuPDF."""

    def extract(self, pdf_bytes: bytes) -> str:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                return PAGE_SEPARATOR.join(page.get_text() for page in doc)
        except Exception as exc:
            raise PdfExtractionError(f"pymupdf extraction failed: {exc}") from exc

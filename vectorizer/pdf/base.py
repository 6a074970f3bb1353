from abc import ABC, abstractmethod

# pdftotext separates pages with a form feed; in-process engines do the same.
PAGE_SEPARATOR = "\f"


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction adapters."""

    @abstractmethod
    def extract(self, pdf_bytes: bytes) -> str:
        """Extract raw text from PDF bytes.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            The engine's text output, pages separated by PAGE_SEPARATOR.
            No whitespace cleanup is applied here.

        Raises:
            PdfExtractionError: if extraction fails for any reason.
        """

from vectorizer.config.settings import Settings
from vectorizer.pdf.base import BasePdfExtractor
from vectorizer.pdf.pdfplumber_adapter import PdfPlumberAdapter
from vectorizer.pdf.pdftotext_adapter import PdftotextAdapter
from vectorizer.pdf.pymupdf_adapter import PyMuPdfAdapter


class PdfExtractorFactory:
    """Creates the correct PDF extractor based on settings."""

    ENGINES = ("pdftotext", "pdfplumber", "pymupdf")

    @classmethod
    def create(cls, settings: Settings) -> BasePdfExtractor:
        engine = settings.pdf_engine.lower()
        if engine == "pdftotext":
            return PdftotextAdapter(
                binary=settings.pdftotext_binary,
                timeout_seconds=settings.pdftotext_timeout_seconds,
            )
        if engine == "pdfplumber":
            return PdfPlumberAdapter()
        if engine == "pymupdf":
            return PyMuPdfAdapter()
        raise ValueError(f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ENGINES)}")

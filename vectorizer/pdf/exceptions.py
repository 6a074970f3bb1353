class PdfExtractionError(Exception):
    """Raised when a PDF engine cannot produce text for a document."""

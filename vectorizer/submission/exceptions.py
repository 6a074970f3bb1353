class SubmissionError(Exception):
    """Base exception for vectorization API submissions."""


class SubmissionTransportError(SubmissionError):
    """Raised on connection failures and non-2xx HTTP responses."""


class SubmissionRejected(SubmissionError):
    """Raised when the API answers 2xx but reports the document as failed."""

from abc import ABC, abstractmethod

from vectorizer.payload.models import SubmissionPayload
from vectorizer.submission.models import SubmissionOutcome


class BaseSubmissionClient(ABC):
    """Contract for vectorization API clients."""

    @abstractmethod
    def submit(self, payload: SubmissionPayload) -> SubmissionOutcome:
        """Send one document, exactly once.

        Raises:
            SubmissionTransportError: on transport failure or non-2xx status.
            SubmissionRejected: when the API reports an application failure.
        """

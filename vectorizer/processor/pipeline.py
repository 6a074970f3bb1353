from abc import ABC, abstractmethod
from dataclasses import dataclass

from vectorizer.catalog.models import CatalogRecord
from vectorizer.extraction.models import ExtractedText
from vectorizer.payload.models import SubmissionPayload
from vectorizer.storage.models import StorageObject
from vectorizer.submission.models import SubmissionOutcome


@dataclass(slots=True)
class PipelineContext:
    """Per-job state; each step fills in the next field."""

    job: StorageObject
    record: CatalogRecord | None = None
    raw_bytes: bytes = b""
    extracted: ExtractedText | None = None
    payload: SubmissionPayload | None = None
    outcome: SubmissionOutcome | None = None


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError

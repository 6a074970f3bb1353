from dataclasses import dataclass
from typing import Any

from vectorizer.extraction.models import ExtractedText


@dataclass(frozen=True)
class ItemResult:
    """Final result for one job, as stored in the run report."""

    file_id: str
    file_name: str
    success: bool
    skipped: bool = False
    chunks: int = 0
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "fileId": self.file_id,
            "fileName": self.file_name,
            "success": self.success,
            "skipped": self.skipped,
            "chunks": self.chunks,
            "error": self.error,
        }


@dataclass(frozen=True)
class JobOutcome:
    """An ItemResult plus the extraction outcome, if extraction was reached."""

    result: ItemResult
    extraction: ExtractedText | None = None

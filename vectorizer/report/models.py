from dataclasses import dataclass
from datetime import datetime
from typing import Any

from vectorizer.processor.models import ItemResult
from vectorizer.report.statistics import RunStatistics


@dataclass(frozen=True)
class RunReport:
    """Terminal artifact of a run, written once."""

    statistics: RunStatistics
    results: list[ItemResult]
    generated_at: datetime

    def to_dict(self) -> dict[str, Any]:
        stats = self.statistics
        return {
            "summary": {
                "totalFiles": stats.processed,
                "successful": stats.successful,
                "errors": stats.errors,
                "skipped": stats.skipped,
                "chunksCreated": stats.chunks_created,
                "successRate": stats.success_rate,
            },
            "textExtraction": {
                "successful": stats.extraction.successful,
                "failed": stats.extraction.failed,
                "totalCharacters": stats.extraction.total_characters,
                "averageCharacters": stats.extraction.average_characters,
                "successRate": stats.extraction_success_rate,
            },
            "results": [r.to_dict() for r in self.results],
            "generatedAt": self.generated_at.isoformat(),
        }


@dataclass(frozen=True)
class ErrorSample:
    examples: list[ItemResult]
    remaining: int

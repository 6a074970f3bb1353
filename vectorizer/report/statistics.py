import math
from dataclasses import dataclass, field, replace

from vectorizer.extraction.models import ExtractedText
from vectorizer.processor.models import JobOutcome


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def format_rate(numerator: int, denominator: int) -> str:
    """Percentage with two decimals; "0.00" when nothing was processed."""
    if denominator == 0:
        return "0.00"
    return f"{numerator / denominator * 100:.2f}"


@dataclass(frozen=True)
class ExtractionStatistics:
    successful: int = 0
    failed: int = 0
    total_characters: int = 0

    @property
    def average_characters(self) -> int:
        if self.successful == 0:
            return 0
        return round_half_up(self.total_characters / self.successful)

    def record(self, extracted: ExtractedText | None) -> "ExtractionStatistics":
        if extracted is None:
            return self
        if extracted.accepted:
            return replace(
                self,
                successful=self.successful + 1,
                total_characters=self.total_characters + extracted.characters,
            )
        return replace(self, failed=self.failed + 1)


@dataclass(frozen=True)
class RunStatistics:
    """Counters for a run. ``record`` returns a new value per finished job."""

    processed: int = 0
    successful: int = 0
    errors: int = 0
    skipped: int = 0
    chunks_created: int = 0
    extraction: ExtractionStatistics = field(default_factory=ExtractionStatistics)

    def record(self, outcome: JobOutcome) -> "RunStatistics":
        result = outcome.result
        return replace(
            self,
            processed=self.processed + 1,
            successful=self.successful + (1 if result.success else 0),
            errors=self.errors + (0 if result.success else 1),
            skipped=self.skipped + (1 if result.success and result.skipped else 0),
            chunks_created=self.chunks_created + (0 if result.skipped else result.chunks),
            extraction=self.extraction.record(outcome.extraction),
        )

    @property
    def success_rate(self) -> str:
        return format_rate(self.successful, self.processed)

    @property
    def extraction_success_rate(self) -> str:
        return format_rate(self.extraction.successful, self.processed)

from dataclasses import dataclass, field

from vectorizer.processor.models import ItemResult
from vectorizer.report.statistics import RunStatistics


@dataclass
class RunResult:
    """What the worker loop hands to the report aggregator."""

    statistics: RunStatistics = field(default_factory=RunStatistics)
    results: list[ItemResult] = field(default_factory=list)

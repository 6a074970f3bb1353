import json
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path

from vectorizer.logging.logger import Log
from vectorizer.processor.models import ItemResult
from vectorizer.report.models import ErrorSample, RunReport
from vectorizer.report.statistics import RunStatistics

ERROR_SAMPLE_SIZE = 5


def error_sample(results: Sequence[ItemResult], limit: int = ERROR_SAMPLE_SIZE) -> ErrorSample:
    """First ``limit`` failed results and how many more failures exist."""
    failed = [r for r in results if not r.success]
    return ErrorSample(examples=failed[:limit], remaining=max(0, len(failed) - limit))


class ReportAggregator:
    """Builds, logs and persists the final run report."""

    def build(
        self,
        statistics: RunStatistics,
        results: Sequence[ItemResult],
        generated_at: datetime,
    ) -> RunReport:
        if statistics.processed != len(results):
            raise ValueError(
                f"Statistics cover {statistics.processed} jobs but "
                f"{len(results)} results were collected"
            )
        return RunReport(statistics=statistics, results=list(results), generated_at=generated_at)

    def write(self, report: RunReport, path: Path) -> None:
        path.write_text(
            json.dumps(report.to_dict(), indent=2, ensure_ascii=False),
            encoding="utf-8",
        )
        Log.info(f"Report written to {path}")

    def log_summary(self, report: RunReport) -> None:
        stats = report.statistics
        extraction = stats.extraction
        Log.info(
            f"Run finished: {stats.processed} processed, {stats.successful} successful "
            f"({stats.skipped} already indexed), {stats.errors} errors, "
            f"success rate {stats.success_rate}%"
        )
        Log.info(
            f"Text extraction: {extraction.successful} successful, {extraction.failed} failed, "
            f"{extraction.total_characters:,} chars total, "
            f"{extraction.average_characters:,} chars average, "
            f"success rate {stats.extraction_success_rate}%"
        )
        sample = error_sample(report.results)
        for index, result in enumerate(sample.examples, start=1):
            Log.warning(f"  {index}. {result.file_name}: {result.error}")
        if sample.remaining:
            Log.warning(f"  ... and {sample.remaining} more errors")

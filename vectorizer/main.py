import time
from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path

from pydantic import ValidationError

from vectorizer.catalog.exceptions import CatalogLoadError
from vectorizer.catalog.loader import load_catalog, load_target_ids
from vectorizer.config.exceptions import ConfigurationError
from vectorizer.config.settings import Settings
from vectorizer.config.validation import require_credentials
from vectorizer.logging.logger import Log
from vectorizer.matching.matcher import match_jobs
from vectorizer.processor.processor import build_processor
from vectorizer.report.aggregator import ReportAggregator
from vectorizer.storage.base import BaseStorageClient
from vectorizer.storage.exceptions import ListingFetchError
from vectorizer.storage.supabase_adapter import SupabaseStorageAdapter
from vectorizer.submission.base import BaseSubmissionClient
from vectorizer.submission.client import HttpSubmissionClient
from vectorizer.worker.job_runner import JobRunner
from vectorizer.worker.worker import Worker

_FATAL_ERRORS = (ConfigurationError, CatalogLoadError, ListingFetchError)


def run(
    settings: Settings,
    *,
    storage: BaseStorageClient | None = None,
    submission_client: BaseSubmissionClient | None = None,
    sleep: Callable[[float], None] | None = None,
) -> int:
    """Run one vectorization batch and return the process exit code.

    Pre-run failures return 1 and write no report. Per-job failures are
    reported and still return 0.
    """
    try:
        require_credentials(settings)
        target_ids = load_target_ids(Path(settings.target_ids_path))
        Log.info(f"Loaded {len(target_ids)} target ids")
        catalog = load_catalog(Path(settings.catalog_path))
        Log.info(f"Loaded {len(catalog)} catalog records")
        if storage is None:
            storage = SupabaseStorageAdapter.from_settings(settings)
        listing = storage.list_objects()
        Log.info(f"Found {len(listing)} objects in storage")
    except _FATAL_ERRORS as exc:
        Log.error(f"Aborting before any work: {exc}")
        return 1

    jobs = match_jobs(target_ids, listing)
    Log.info(f"Files to process: {len(jobs)} of {len(target_ids)}")
    if not jobs:
        Log.warning("No files found to process")
        return 0

    owned_client: HttpSubmissionClient | None = None
    if submission_client is None:
        owned_client = HttpSubmissionClient(
            api_url=settings.vectorize_api_url,
            timeout_seconds=settings.vectorize_timeout_seconds,
        )
        submission_client = owned_client

    try:
        try:
            processor = build_processor(
                settings,
                catalog=catalog,
                storage=storage,
                submission_client=submission_client,
            )
        except ValueError as exc:
            Log.error(f"Aborting before any work: {exc}")
            return 1
        worker = Worker(JobRunner(processor), settings, sleep=sleep or time.sleep)
        result = worker.run(jobs)
    finally:
        if owned_client is not None:
            owned_client.close()

    aggregator = ReportAggregator()
    report = aggregator.build(result.statistics, result.results, datetime.now(UTC))
    aggregator.log_summary(report)
    try:
        aggregator.write(report, Path(settings.report_path))
    except OSError as exc:
        Log.error(f"Failed to write report to {settings.report_path}: {exc}")
        return 1
    return 0


def main() -> None:
    """Entry point: settings -> logging -> batch run."""
    try:
        settings = Settings()
    except ValidationError as exc:
        Log.configure("INFO")
        Log.error(f"Invalid configuration: {exc}")
        raise SystemExit(1) from exc
    Log.configure(settings.log_level)
    raise SystemExit(run(settings))


if __name__ == "__main__":
    main()

import time
from collections.abc import Callable, Sequence

from vectorizer.config.settings import Settings
from vectorizer.logging.logger import Log
from vectorizer.storage.models import StorageObject
from vectorizer.worker.job_runner import JobRunner
from vectorizer.worker.models import RunResult


class Worker:
    """Sequential loop: run one job -> record -> progress -> throttle."""

    def __init__(
        self,
        job_runner: JobRunner,
        settings: Settings,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._job_runner = job_runner
        self._settings = settings
        self._sleep = sleep

    def run(self, jobs: Sequence[StorageObject]) -> RunResult:
        """Process every job in order, one at a time.

        Exactly one result is collected per job; a job never starts before the
        previous job's result exists.
        """
        total = len(jobs)
        run = RunResult()
        Log.info(f"Starting sequential processing of {total} files")
        for position, job in enumerate(jobs, start=1):
            Log.info(
                f"Processing {job.name} ({position}/{total}), id {job.id}, "
                f"size {job.size_bytes if job.size_bytes is not None else 'N/A'} bytes"
            )
            outcome = self._job_runner.run(job)
            run.results.append(outcome.result)
            run.statistics = run.statistics.record(outcome)
            self._report_progress(run, total)
            self._sleep(self._settings.inter_job_delay_ms / 1000)
        return run

    def _report_progress(self, run: RunResult, total: int) -> None:
        stats = run.statistics
        every = self._settings.progress_every
        if every > 0 and stats.processed % every == 0:
            Log.info(
                f"Progress: {stats.processed}/{total} processed "
                f"({stats.successful} successful, {stats.errors} errors)"
            )

from vectorizer.logging.logger import Log
from vectorizer.processor.exceptions import ProcessorError
from vectorizer.processor.models import ItemResult, JobOutcome
from vectorizer.processor.pipeline import PipelineContext
from vectorizer.processor.processor import Processor
from vectorizer.storage.exceptions import StorageError
from vectorizer.storage.models import StorageObject
from vectorizer.submission.exceptions import SubmissionError

_EXPECTED_ERRORS = (ProcessorError, StorageError, SubmissionError)


class JobRunner:
    """Run one job and turn any failure into a failed ItemResult."""

    def __init__(self, processor: Processor) -> None:
        self._processor = processor

    def run(self, job: StorageObject) -> JobOutcome:
        """Execute a single job; never raises for per-job errors."""
        context = PipelineContext(job=job)
        try:
            context = self._processor.process(context)
            outcome = context.outcome
            if outcome is None:
                raise RuntimeError("Processor finished without a submission outcome")
        except _EXPECTED_ERRORS as exc:
            Log.error(f"Job {job.id} ({job.name}) failed: {exc}")
            return self._failed(context, str(exc))
        except Exception as exc:
            Log.exception(f"Job {job.id} ({job.name}) failed unexpectedly: {exc}")
            return self._failed(context, str(exc))

        Log.info(f"Job {job.id} ({job.name}) completed successfully")
        return JobOutcome(
            result=ItemResult(
                file_id=job.id,
                file_name=job.name,
                success=True,
                skipped=outcome.skipped,
                chunks=outcome.chunks,
            ),
            extraction=context.extracted,
        )

    @staticmethod
    def _failed(context: PipelineContext, error: str) -> JobOutcome:
        return JobOutcome(
            result=ItemResult(
                file_id=context.job.id,
                file_name=context.job.name,
                success=False,
                error=error,
            ),
            extraction=context.extracted,
        )

from collections.abc import Callable, Mapping, Sequence
from datetime import UTC, datetime

from vectorizer.catalog.models import CatalogRecord
from vectorizer.config.settings import Settings
from vectorizer.extraction.text_extractor import TextExtractor
from vectorizer.pdf.factory import PdfExtractorFactory
from vectorizer.payload.builder import PayloadBuilder
from vectorizer.processor.pipeline import PipelineContext, PipelineStep
from vectorizer.processor.steps import (
    BuildPayloadStep,
    DownloadStep,
    ExtractTextStep,
    ResolveCatalogStep,
    SubmitStep,
)
from vectorizer.storage.base import BaseStorageClient
from vectorizer.submission.base import BaseSubmissionClient


def _now() -> datetime:
    return datetime.now(UTC)


class Processor:
    """Drives one job through its steps.

    Pipeline: resolve catalog -> download -> extract -> build payload -> submit.
    Errors propagate to the caller; the context keeps whatever earlier steps
    produced.
    """

    def __init__(self, steps: Sequence[PipelineStep]) -> None:
        self._steps = list(steps)

    def process(self, context: PipelineContext) -> PipelineContext:
        for step in self._steps:
            context = step.run(context)
        return context


def build_processor(
    settings: Settings,
    *,
    catalog: Mapping[str, CatalogRecord],
    storage: BaseStorageClient,
    submission_client: BaseSubmissionClient,
    clock: Callable[[], datetime] = _now,
) -> Processor:
    """Build a Processor with all required adapters."""
    text_extractor = TextExtractor(
        PdfExtractorFactory.create(settings),
        min_length=settings.min_text_length,
    )
    builder = PayloadBuilder(
        settings.public_url_base,
        namespace=settings.vectorize_namespace,
        flow=settings.vectorize_flow,
    )
    return Processor(
        steps=[
            ResolveCatalogStep(catalog),
            DownloadStep(storage),
            ExtractTextStep(text_extractor),
            BuildPayloadStep(builder, clock),
            SubmitStep(submission_client),
        ]
    )

from collections.abc import Callable, Mapping
from datetime import datetime

from vectorizer.catalog.loader import normalize_document_name
from vectorizer.catalog.models import CatalogRecord
from vectorizer.extraction.text_extractor import TextExtractor
from vectorizer.logging.logger import Log
from vectorizer.payload.builder import PayloadBuilder
from vectorizer.processor.exceptions import CATALOG_MISS_MESSAGE, CatalogMissError
from vectorizer.processor.pipeline import PipelineContext, PipelineStep
from vectorizer.storage.base import BaseStorageClient
from vectorizer.submission.base import BaseSubmissionClient


class ResolveCatalogStep(PipelineStep):
    def __init__(self, catalog: Mapping[str, CatalogRecord]) -> None:
        self._catalog = catalog

    def run(self, context: PipelineContext) -> PipelineContext:
        record = self._catalog.get(normalize_document_name(context.job.name))
        if record is None:
            raise CatalogMissError(CATALOG_MISS_MESSAGE)
        context.record = record
        return context


class DownloadStep(PipelineStep):
    def __init__(self, storage: BaseStorageClient) -> None:
        self._storage = storage

    def run(self, context: PipelineContext) -> PipelineContext:
        context.raw_bytes = self._storage.download(context.job.name)
        Log.info(f"Downloaded {len(context.raw_bytes)} bytes for {context.job.name}")
        return context


class ExtractTextStep(PipelineStep):
    def __init__(self, text_extractor: TextExtractor) -> None:
        self._text_extractor = text_extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        context.extracted = self._text_extractor.extract(context.raw_bytes, context.job.name)
        return context


class BuildPayloadStep(PipelineStep):
    def __init__(
        self,
        builder: PayloadBuilder,
        clock: Callable[[], datetime],
    ) -> None:
        self._builder = builder
        self._clock = clock

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.record is None or context.extracted is None:
            raise ValueError("PipelineContext.record and extracted must be set before payload build")
        context.payload = self._builder.build(
            storage_object=context.job,
            record=context.record,
            extracted=context.extracted,
            raw_size_bytes=len(context.raw_bytes),
            processed_at=self._clock(),
        )
        return context


class SubmitStep(PipelineStep):
    def __init__(self, client: BaseSubmissionClient) -> None:
        self._client = client

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.payload is None:
            raise ValueError("PipelineContext.payload must be set before submission")
        outcome = self._client.submit(context.payload)
        context.outcome = outcome
        if outcome.skipped:
            Log.info(
                f"Document {context.job.name} already indexed: "
                f"{outcome.existing_chunks} existing chunks"
            )
        else:
            Log.info(
                f"Submitted {context.job.name}: {outcome.chunks} chunks created, "
                f"{len(context.payload.content)} chars sent"
            )
        return context

from datetime import UTC, datetime
from unittest.mock import MagicMock

import pytest

from vectorizer.catalog.models import CatalogRecord
from vectorizer.extraction.models import ExtractedText
from vectorizer.extraction.text_extractor import TextExtractor
from vectorizer.payload.builder import PayloadBuilder
from vectorizer.processor.exceptions import CatalogMissError
from vectorizer.processor.pipeline import PipelineContext
from vectorizer.processor.processor import Processor
from vectorizer.processor.steps import (
    BuildPayloadStep,
    DownloadStep,
    ExtractTextStep,
    ResolveCatalogStep,
    SubmitStep,
)
from vectorizer.storage.base import BaseStorageClient
from vectorizer.storage.exceptions import DownloadError
from vectorizer.storage.models import StorageObject
from vectorizer.submission.base import BaseSubmissionClient
from vectorizer.submission.models import SubmissionOutcome

PROCESSED_AT = datetime(2024, 6, 1, tzinfo=UTC)


def _make_pipeline(
    catalog: dict[str, CatalogRecord],
) -> tuple[Processor, MagicMock, MagicMock, MagicMock]:
    storage = MagicMock(spec=BaseStorageClient)
    text_extractor = MagicMock(spec=TextExtractor)
    client = MagicMock(spec=BaseSubmissionClient)

    storage.download.return_value = b"%PDF-fake"
    text_extractor.extract.return_value = ExtractedText(
        content="x" * 80, accepted=True, characters=80
    )
    client.submit.return_value = SubmissionOutcome(chunks=3)

    steps = [
        ResolveCatalogStep(catalog),
        DownloadStep(storage),
        ExtractTextStep(text_extractor),
        BuildPayloadStep(PayloadBuilder("https://s/public"), lambda: PROCESSED_AT),
        SubmitStep(client),
    ]
    return Processor(steps), storage, text_extractor, client


class TestProcessorPipeline:
    def test_runs_all_steps(
        self, storage_object: StorageObject, catalog_record: CatalogRecord
    ) -> None:
        processor, storage, text_extractor, client = _make_pipeline(
            {"informe-2020": catalog_record}
        )

        context = processor.process(PipelineContext(job=storage_object))

        storage.download.assert_called_once_with("informe-2020.pdf")
        text_extractor.extract.assert_called_once_with(b"%PDF-fake", "informe-2020.pdf")
        client.submit.assert_called_once_with(context.payload)
        assert context.record == catalog_record
        assert context.outcome == SubmissionOutcome(chunks=3)

    def test_payload_carries_extracted_text(
        self, storage_object: StorageObject, catalog_record: CatalogRecord
    ) -> None:
        processor, *_ = _make_pipeline({"informe-2020": catalog_record})

        context = processor.process(PipelineContext(job=storage_object))

        assert context.payload is not None
        assert context.payload.content.endswith("CONTENIDO:\n" + "x" * 80)
        assert "TAMAÑO: 9 bytes" in context.payload.content

    def test_catalog_miss_stops_before_download(self, storage_object: StorageObject) -> None:
        processor, storage, text_extractor, client = _make_pipeline({})

        with pytest.raises(CatalogMissError, match="No se encontró información del IADB"):
            processor.process(PipelineContext(job=storage_object))

        storage.download.assert_not_called()
        text_extractor.extract.assert_not_called()
        client.submit.assert_not_called()

    def test_download_error_stops_before_extraction(
        self, storage_object: StorageObject, catalog_record: CatalogRecord
    ) -> None:
        processor, storage, text_extractor, client = _make_pipeline(
            {"informe-2020": catalog_record}
        )
        storage.download.side_effect = DownloadError("Error descargando: 404")

        with pytest.raises(DownloadError):
            processor.process(PipelineContext(job=storage_object))

        text_extractor.extract.assert_not_called()
        client.submit.assert_not_called()

    def test_placeholder_is_still_submitted(
        self, storage_object: StorageObject, catalog_record: CatalogRecord
    ) -> None:
        processor, _storage, text_extractor, client = _make_pipeline(
            {"informe-2020": catalog_record}
        )
        text_extractor.extract.return_value = ExtractedText(
            content="[placeholder]", accepted=False, characters=40
        )

        context = processor.process(PipelineContext(job=storage_object))

        client.submit.assert_called_once()
        assert context.payload is not None
        assert context.payload.content.endswith("CONTENIDO:\n[placeholder]")

    def test_context_keeps_extraction_when_submission_fails(
        self, storage_object: StorageObject, catalog_record: CatalogRecord
    ) -> None:
        processor, _storage, _extractor, client = _make_pipeline(
            {"informe-2020": catalog_record}
        )
        client.submit.side_effect = RuntimeError("boom")
        context = PipelineContext(job=storage_object)

        with pytest.raises(RuntimeError):
            processor.process(context)

        assert context.extracted is not None
        assert context.extracted.accepted is True


class TestStepPreconditions:
    def test_build_payload_requires_record(self, storage_object: StorageObject) -> None:
        step = BuildPayloadStep(PayloadBuilder("https://s"), lambda: PROCESSED_AT)
        with pytest.raises(ValueError, match="record and extracted"):
            step.run(PipelineContext(job=storage_object))

    def test_submit_requires_payload(self, storage_object: StorageObject) -> None:
        step = SubmitStep(MagicMock(spec=BaseSubmissionClient))
        with pytest.raises(ValueError, match="payload must be set"):
            step.run(PipelineContext(job=storage_object))

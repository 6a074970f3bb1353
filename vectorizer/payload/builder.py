from datetime import datetime

from vectorizer.catalog.models import CatalogRecord
from vectorizer.extraction.models import ExtractedText
from vectorizer.payload.models import SubmissionPayload
from vectorizer.storage.models import StorageObject

DEFAULT_NAMESPACE = "*"
DEFAULT_FLOW = "@"


class PayloadBuilder:
    """Composes the metadata header, body and routing tags for one document."""

    def __init__(
        self,
        public_url_base: str,
        namespace: str = DEFAULT_NAMESPACE,
        flow: str = DEFAULT_FLOW,
    ) -> None:
        self._public_url_base = public_url_base.rstrip("/")
        self._namespace = namespace
        self._flow = flow

    def build(
        self,
        *,
        storage_object: StorageObject,
        record: CatalogRecord,
        extracted: ExtractedText,
        raw_size_bytes: int,
        processed_at: datetime,
    ) -> SubmissionPayload:
        return SubmissionPayload(
            name=storage_object.name,
            id=storage_object.id,
            title=record.title,
            content=self.build_content(
                file_name=storage_object.name,
                record=record,
                body=extracted.content,
                raw_size_bytes=raw_size_bytes,
                processed_at=processed_at,
            ),
            size_bytes=storage_object.size_bytes or 0,
            created_at=storage_object.created_at,
            namespace=self._namespace,
            flow=self._flow,
        )

    def build_content(
        self,
        *,
        file_name: str,
        record: CatalogRecord,
        body: str,
        raw_size_bytes: int,
        processed_at: datetime,
    ) -> str:
        lines = [
            f"TÍTULO: {record.title}",
            f"DOCUMENTO: {file_name}",
            f"URL_IADB: {record.source_url}",
            f"URL_SUPABASE: {self.public_url(file_name)}",
            f"TAMAÑO: {raw_size_bytes} bytes",
            f"FECHA_PROCESAMIENTO: {processed_at.isoformat()}",
            "",
            "CONTENIDO:",
            body,
        ]
        return "\n".join(lines)

    def public_url(self, file_name: str) -> str:
        return f"{self._public_url_base}/{file_name}"

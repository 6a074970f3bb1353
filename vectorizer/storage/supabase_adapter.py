from typing import Any

from supabase import Client, create_client

from vectorizer.config.exceptions import ConfigurationError
from vectorizer.config.settings import Settings
from vectorizer.storage.base import BaseStorageClient
from vectorizer.storage.exceptions import DownloadError, ListingFetchError
from vectorizer.storage.models import StorageObject


class SupabaseStorageAdapter(BaseStorageClient):
    """Lists and downloads objects from one Supabase Storage bucket folder."""

    def __init__(
        self,
        *,
        client: Client,
        bucket: str,
        prefix: str,
        list_limit: int,
    ) -> None:
        self._client = client
        self._bucket = bucket
        self._prefix = prefix.strip("/")
        self._list_limit = list_limit

    @classmethod
    def from_settings(cls, settings: Settings) -> "SupabaseStorageAdapter":
        try:
            client = create_client(settings.supabase_url, settings.supabase_key)
        except Exception as exc:
            raise ConfigurationError(f"Invalid Supabase configuration: {exc}") from exc
        return cls(
            client=client,
            bucket=settings.storage_bucket,
            prefix=settings.storage_prefix,
            list_limit=settings.storage_list_limit,
        )

    def list_objects(self) -> dict[str, StorageObject]:
        try:
            entries = self._client.storage.from_(self._bucket).list(
                self._prefix,
                {"limit": self._list_limit, "offset": 0},
            )
        except Exception as exc:
            raise ListingFetchError(
                f"Failed to list {self._bucket}/{self._prefix}: {exc}"
            ) from exc

        objects: dict[str, StorageObject] = {}
        for entry in entries or []:
            obj = _to_storage_object(entry)
            # folder placeholders come back without an id
            if obj is not None:
                objects[obj.id] = obj
        return objects

    def download(self, name: str) -> bytes:
        path = f"{self._prefix}/{name}" if self._prefix else name
        try:
            return self._client.storage.from_(self._bucket).download(path)
        except Exception as exc:
            raise DownloadError(f"Error descargando: {exc}") from exc


def _to_storage_object(entry: dict[str, Any]) -> StorageObject | None:
    object_id = entry.get("id")
    if not object_id:
        return None
    metadata = entry.get("metadata") or {}
    size = metadata.get("size")
    return StorageObject(
        id=str(object_id),
        name=str(entry.get("name", "")),
        size_bytes=int(size) if isinstance(size, (int, float)) else None,
        created_at=entry.get("created_at"),
    )

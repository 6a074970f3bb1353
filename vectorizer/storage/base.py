from abc import ABC, abstractmethod

from vectorizer.storage.models import StorageObject


class BaseStorageClient(ABC):
    """Contract for object storage adapters."""

    @abstractmethod
    def list_objects(self) -> dict[str, StorageObject]:
        """List the configured folder.

        Returns:
            Objects keyed by storage object id.

        Raises:
            ListingFetchError: if the listing call fails.
        """

    @abstractmethod
    def download(self, name: str) -> bytes:
        """Fetch raw bytes for an object in the configured folder.

        Raises:
            DownloadError: if the object cannot be fetched.
        """

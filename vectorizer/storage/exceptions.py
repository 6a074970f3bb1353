class StorageError(Exception):
    """Base exception for object storage failures."""


class ListingFetchError(StorageError):
    """Raised when the storage folder cannot be enumerated."""


class DownloadError(StorageError):
    """Raised when an object's bytes cannot be fetched."""

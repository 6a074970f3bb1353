from dataclasses import dataclass


@dataclass(frozen=True)
class StorageObject:
    """One object present in the storage folder at listing time."""

    id: str
    name: str
    size_bytes: int | None = None
    created_at: str | None = None

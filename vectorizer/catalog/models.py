from dataclasses import dataclass


@dataclass(frozen=True)
class CatalogRecord:
    """Catalog metadata for one source document."""

    document_key: str
    title: str
    source_url: str

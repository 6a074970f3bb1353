class ProcessorError(Exception):
    """Base exception for per-job pipeline errors."""


class CatalogMissError(ProcessorError):
    """Raised when a job's document has no catalog entry."""


CATALOG_MISS_MESSAGE = "No se encontró información del IADB"

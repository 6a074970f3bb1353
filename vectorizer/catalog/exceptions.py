class CatalogLoadError(Exception):
    """Raised when the catalog or target-ID file cannot be read or parsed."""

import json
from pathlib import Path
from typing import Any

from vectorizer.catalog.exceptions import CatalogLoadError
from vectorizer.catalog.models import CatalogRecord

_PDF_SUFFIX = ".pdf"


def normalize_document_name(file_name: str) -> str:
    """Strip a trailing .pdf extension: the key shared by storage and catalog."""
    if file_name.lower().endswith(_PDF_SUFFIX):
        return file_name[: -len(_PDF_SUFFIX)]
    return file_name


def load_target_ids(path: Path) -> list[str]:
    """Load the ordered list of storage object ids selected for this run.

    Raises:
        CatalogLoadError: if the file is unreadable or not a JSON array of strings.
    """
    data = _read_json(path)
    if not isinstance(data, list) or not all(isinstance(i, str) for i in data):
        raise CatalogLoadError(f"{path}: expected a JSON array of id strings")
    return data


def load_catalog(path: Path) -> dict[str, CatalogRecord]:
    """Load catalog records keyed by normalized document name.

    Expects ``{"documents": [{"originalName", "cleanName", "url"}, ...]}``.
    When two entries normalize to the same key the last one wins.

    Raises:
        CatalogLoadError: if the file is unreadable or malformed.
    """
    data = _read_json(path)
    if not isinstance(data, dict) or not isinstance(data.get("documents"), list):
        raise CatalogLoadError(f"{path}: expected an object with a 'documents' list")

    catalog: dict[str, CatalogRecord] = {}
    for index, raw in enumerate(data["documents"]):
        record = _build_record(raw, index, path)
        catalog[record.document_key] = record
    return catalog


def _build_record(raw: Any, index: int, path: Path) -> CatalogRecord:
    if not isinstance(raw, dict):
        raise CatalogLoadError(f"{path}: document at index {index} must be an object")
    original_name = raw.get("originalName")
    if not original_name or not isinstance(original_name, str):
        raise CatalogLoadError(
            f"{path}: document at index {index}: 'originalName' must be a non-empty string"
        )
    return CatalogRecord(
        document_key=normalize_document_name(original_name),
        title=str(raw.get("cleanName") or ""),
        source_url=str(raw.get("url") or ""),
    )


def _read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise CatalogLoadError(f"Failed to read {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise CatalogLoadError(f"Invalid JSON in {path}: {exc}") from exc

from collections.abc import Iterable, Mapping

from vectorizer.storage.models import StorageObject


def match_jobs(
    target_ids: Iterable[str],
    listing: Mapping[str, StorageObject],
) -> list[StorageObject]:
    """Return the listed objects for the target ids, in target-id order.

    Ids missing from the live listing are dropped; listing order is irrelevant.
    """
    return [listing[object_id] for object_id in target_ids if object_id in listing]

# =============================================================================
# core/services/identification.py - Latest Identification Resolver
# =============================================================================
# Picks the identification new trees are attributed to: the one created
# last. Identifications carry no ordering column, only created_at.
# =============================================================================

from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Any, TypeVar

T = TypeVar("T")


def _as_utc(value: datetime) -> datetime:
    """Read naive datetimes as UTC so they compare with aware ones."""
    # Aware values compare across offsets as-is; converting can overflow
    # near datetime.min/max
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _sort_key(identification: Any) -> tuple[datetime, int, int]:
    # Equal timestamps: a stored record beats an unsaved one, then higher id wins
    record_id = getattr(identification, "id", None)
    if isinstance(record_id, int):
        return (_as_utc(identification.created_at), 1, record_id)
    return (_as_utc(identification.created_at), 0, 0)


def latest_identification(identifications: Iterable[T] | None) -> T | None:
    """
    Return the identification with the greatest created_at.

    Identifications without a created_at (or with a value that is not a
    datetime) are ignored. Returns None for an empty or None collection, or
    when nothing is comparable.

    Args:
        identifications: Any iterable of objects with a created_at attribute

    Returns:
        The latest identification, or None
    """
    if not identifications:
        return None

    candidates = [
        identification
        for identification in identifications
        if isinstance(getattr(identification, "created_at", None), datetime)
    ]
    if not candidates:
        return None

    return max(candidates, key=_sort_key)

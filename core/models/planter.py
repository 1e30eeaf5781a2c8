# =============================================================================
# core/models/planter.py - Planter Capability and In-Memory Planter
# =============================================================================
# Planter describes what any planter representation exposes. Two variants
# satisfy it:
# - PlanterDetail (core/models/records.py): stored in the record store
# - PlanterProfile (below): a detached, in-memory copy, e.g. parsed from a
#   sync payload or a signup form
#
# Only PlanterDetail can own tree captures. Services narrow a Planter to it
# and raise PlanterError for anything else.
# =============================================================================

from collections.abc import Iterable
from datetime import datetime
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, Field


@runtime_checkable
class Planter(Protocol):
    """Identity, consent and verification state of a planter."""

    created_at: datetime | None
    email: str | None
    first_name: str | None
    last_name: str | None
    identifier: str | None
    organization: str | None
    phone_number: str | None
    uploaded: bool
    accepted_terms: bool
    identifications: Iterable[Any]


class IdentificationSnapshot(BaseModel):
    """In-memory identification record (not stored)."""

    created_at: datetime | None = None
    local_photo_path: str | None = None


class PlanterProfile(BaseModel):
    """
    In-memory planter representation.

    Mirrors the stored planter's fields but is not attached to any database
    session, so it cannot own tree captures.

    Example:
        {
            "identifier": "planter@example.com",
            "first_name": "Ada",
            "last_name": "Okafor",
            "accepted_terms": true
        }
    """

    identifier: str | None = Field(
        default=None,
        description="Unique planter identifier (email or phone number)"
    )
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone_number: str | None = None
    organization: str | None = None
    uploaded: bool = False
    accepted_terms: bool = False
    created_at: datetime | None = None
    identifications: list[IdentificationSnapshot] = Field(default_factory=list)

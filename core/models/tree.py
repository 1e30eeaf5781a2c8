# =============================================================================
# core/models/tree.py - Tree Capture Schemas
# =============================================================================
# These models define the contract for saving trees:
# - Location: where the tree was captured, with GPS accuracy
# - TreeServiceData: photo bytes + location handed to TreeService.save_tree
# - TreeCaptureResponse: a stored tree returned to API clients
# =============================================================================

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class Location(BaseModel):
    """
    A GPS fix.

    Example:
        {"latitude": 1.0, "longitude": 2.0, "horizontal_accuracy": 5.0}
    """

    latitude: float = Field(
        ...,
        ge=-90.0,
        le=90.0,
        description="Latitude in decimal degrees"
    )

    longitude: float = Field(
        ...,
        ge=-180.0,
        le=180.0,
        description="Longitude in decimal degrees"
    )

    # Radius of uncertainty in meters, as reported by the device
    horizontal_accuracy: float = Field(
        ...,
        ge=0.0,
        description="Horizontal accuracy in meters"
    )


class TreeServiceData(BaseModel):
    """Captured photo and location; consumed by a single save."""

    png_data: bytes = Field(
        ...,
        min_length=1,
        description="Encoded photo bytes"
    )

    location: Location


class TreeCaptureResponse(BaseModel):
    """
    Schema for returning a stored tree to clients.

    Example:
        {
            "uuid": "2f1c6a9e-...",
            "identification_id": 7,
            "latitude": 1.0,
            "longitude": 2.0,
            "horizontal_accuracy": 5.0,
            "local_photo_path": "documents/2f1c6a9e-....png",
            "uploaded": false,
            "created_at": "2026-10-19T10:30:00Z"
        }
    """

    model_config = ConfigDict(from_attributes=True)

    uuid: str
    identification_id: int
    latitude: float
    longitude: float
    horizontal_accuracy: float
    local_photo_path: str
    uploaded: bool
    created_at: datetime

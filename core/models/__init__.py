# =============================================================================
# core/models/ - Data Models
# =============================================================================
# This package contains:
# - records.py: SQLAlchemy records (PlanterDetail, PlanterIdentification, TreeCapture)
# - planter.py: Planter capability protocol and the in-memory PlanterProfile
# - tree.py: Pydantic schemas for capture input and API responses
# =============================================================================

# -----------------------------------------------------------------------------
# Stored records
# -----------------------------------------------------------------------------
from .records import (
    PlanterDetail,
    PlanterIdentification,
    TreeCapture,
)

# -----------------------------------------------------------------------------
# Planter capability
# -----------------------------------------------------------------------------
from .planter import (
    IdentificationSnapshot,
    Planter,
    PlanterProfile,
)

# -----------------------------------------------------------------------------
# Tree schemas
# -----------------------------------------------------------------------------
from .tree import (
    Location,
    TreeCaptureResponse,
    TreeServiceData,
)

__all__ = [
    # Records
    "PlanterDetail",
    "PlanterIdentification",
    "TreeCapture",
    # Planter
    "IdentificationSnapshot",
    "Planter",
    "PlanterProfile",
    # Tree
    "Location",
    "TreeCaptureResponse",
    "TreeServiceData",
]

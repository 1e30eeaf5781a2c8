# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - trees.py: Tree capture endpoints
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import trees

__all__ = [
    "health",
    "trees",
]

# =============================================================================
# core/services/planter_service.py - Planter Lookups
# =============================================================================

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.exceptions import PlanterNotFoundError
from core.models.records import PlanterDetail

logger = logging.getLogger(__name__)


class PlanterService:
    """Read access to stored planters."""

    @staticmethod
    def get_planter(db: Session, identifier: str) -> PlanterDetail:
        """
        Get a planter by identifier.

        Raises:
            PlanterNotFoundError: If no planter has this identifier
        """
        planter = db.scalars(
            select(PlanterDetail).where(PlanterDetail.identifier == identifier)
        ).first()

        if planter is None:
            raise PlanterNotFoundError(identifier)

        logger.debug(f"Loaded planter {identifier}")
        return planter

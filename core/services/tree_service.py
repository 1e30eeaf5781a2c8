# =============================================================================
# core/services/tree_service.py - Save Tree Workflow
# =============================================================================
# Saves a captured tree: the photo goes to the document store, the metadata
# goes to the record store, linked to the planter's latest identification.
#
# The photo write and the commit are not coordinated. If the commit fails
# after the photo was stored, the photo is left behind unless
# cleanup_orphaned_photos is enabled.
# =============================================================================

import logging
from uuid import uuid4

from sqlalchemy import inspect
from sqlalchemy.orm import Session

from app.exceptions import DocumentStorageError, IdentificationError, PlanterError
from core.models.planter import Planter
from core.models.records import PlanterDetail, TreeCapture, utcnow
from core.models.tree import TreeServiceData
from core.services.identification import latest_identification
from core.services.storage_service import DocumentStore

logger = logging.getLogger(__name__)


def new_tree_id() -> str:
    """Generate the identifier shared by a tree record and its photo."""
    return str(uuid4())


class TreeService:
    """
    Service for saving tree captures.

    Bound to one database session (the unit of work) and one document
    store. The session must not be shared with other threads while a save
    is running.
    """

    def __init__(
        self,
        db: Session,
        document_store: DocumentStore,
        cleanup_orphaned_photos: bool = False,
    ):
        self.db = db
        self.document_store = document_store
        self.cleanup_orphaned_photos = cleanup_orphaned_photos

    def _resolve_planter(self, planter: Planter) -> PlanterDetail:
        """Narrow a planter to a PlanterDetail persisted in this session."""
        if not isinstance(planter, PlanterDetail):
            raise PlanterError(getattr(planter, "identifier", None))

        if not inspect(planter).persistent or planter not in self.db:
            raise PlanterError(planter.identifier)

        return planter

    def save_tree(self, tree_data: TreeServiceData, planter: Planter) -> TreeCapture:
        """
        Store the photo and create a tree under the planter's latest identification.

        Args:
            tree_data: Photo bytes and capture location
            planter: Planter the tree is captured for

        Returns:
            The committed TreeCapture

        Raises:
            PlanterError: If the planter is not a stored planter of this session
            IdentificationError: If the planter has no usable identification
            DocumentStorageError: If the photo could not be stored
            Exception: Whatever the session raises on commit, unchanged
        """
        planter = self._resolve_planter(planter)

        identification = latest_identification(planter.identifications)
        if identification is None:
            raise IdentificationError(planter.identifier)

        tree_id = new_tree_id()

        try:
            photo_path = self.document_store.store(tree_data.png_data, tree_id)
        except Exception as e:
            raise DocumentStorageError(tree_id, str(e)) from e

        location = tree_data.location
        tree = TreeCapture(
            uuid=tree_id,
            created_at=utcnow(),
            latitude=location.latitude,
            longitude=location.longitude,
            horizontal_accuracy=location.horizontal_accuracy,
            uploaded=False,
            local_photo_path=photo_path,
        )

        identification.trees.append(tree)

        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            if self.cleanup_orphaned_photos:
                self._discard_photo(photo_path)
            raise

        logger.info(
            f"Saved tree {tree_id} for planter {planter.identifier} "
            f"(identification {identification.id})"
        )
        return tree

    def _discard_photo(self, photo_path: str) -> None:
        """Best-effort removal of a photo whose tree was never committed."""
        try:
            removed = self.document_store.delete(photo_path)
        except Exception:
            # The commit error is the one the caller sees
            logger.warning(f"Could not remove orphaned photo: {photo_path}", exc_info=True)
            return

        if removed:
            logger.info(f"Removed orphaned photo: {photo_path}")
        else:
            logger.warning(f"Could not remove orphaned photo: {photo_path}")

# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from app.config import settings
from core.database import get_db_session
from core.services.storage_service import DocumentStore, create_document_store
from core.services.tree_service import TreeService


def get_document_store() -> DocumentStore:
    """Build the configured document store."""
    return create_document_store()


# Type aliases for dependency injection
DbSessionDep = Annotated[Session, Depends(get_db_session)]
DocumentStoreDep = Annotated[DocumentStore, Depends(get_document_store)]


def get_tree_service(db: DbSessionDep, document_store: DocumentStoreDep) -> TreeService:
    """
    Get a TreeService bound to the request's database session.

    One session per request keeps each unit of work on a single thread.
    """
    return TreeService(
        db=db,
        document_store=document_store,
        cleanup_orphaned_photos=settings.CLEANUP_ORPHANED_PHOTOS,
    )


TreeServiceDep = Annotated[TreeService, Depends(get_tree_service)]

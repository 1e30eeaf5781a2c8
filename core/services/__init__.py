# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .identification import latest_identification
from .planter_service import PlanterService
from .storage_service import (
    DocumentStore,
    LocalDocumentStore,
    SupabaseDocumentStore,
    create_document_store,
)
from .tree_service import TreeService, new_tree_id

__all__ = [
    "latest_identification",
    "PlanterService",
    "DocumentStore",
    "LocalDocumentStore",
    "SupabaseDocumentStore",
    "create_document_store",
    "TreeService",
    "new_tree_id",
]

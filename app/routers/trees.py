# =============================================================================
# app/routers/trees.py - Tree Capture Endpoints
# =============================================================================
# Accepts a captured tree photo with its GPS fix and saves it for a planter.
# =============================================================================

import logging
from typing import Annotated

from fastapi import APIRouter, File, Form, Path, UploadFile, status
from fastapi.concurrency import run_in_threadpool

from app.config import settings
from app.dependencies import DbSessionDep, TreeServiceDep
from app.exceptions import FileTooLargeError, InvalidFileTypeError
from core.models.tree import Location, TreeCaptureResponse, TreeServiceData
from core.services.planter_service import PlanterService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/{planter_identifier}/trees",
    response_model=TreeCaptureResponse,
    status_code=status.HTTP_201_CREATED,
)
async def capture_tree(
    planter_identifier: Annotated[str, Path(description="Planter identifier")],
    photo: Annotated[UploadFile, File(description="Tree photo")],
    latitude: Annotated[float, Form(ge=-90.0, le=90.0)],
    longitude: Annotated[float, Form(ge=-180.0, le=180.0)],
    horizontal_accuracy: Annotated[float, Form(ge=0.0)],
    db: DbSessionDep,
    tree_service: TreeServiceDep,
):
    """
    Save a tree for a planter.

    This endpoint:
    1. Validates the photo (content type, size)
    2. Loads the planter
    3. Stores the photo and the tree record, linked to the planter's
       latest identification

    Returns the stored tree.
    """
    allowed = settings.allowed_photo_types_list
    content_type = (photo.content_type or "").lower()
    if content_type not in allowed:
        raise InvalidFileTypeError(photo.content_type, allowed)

    content = await photo.read()
    size_bytes = len(content)
    if size_bytes > settings.max_upload_size_bytes:
        raise FileTooLargeError(size_bytes / (1024 * 1024), settings.MAX_UPLOAD_SIZE_MB)

    tree_data = TreeServiceData(
        png_data=content,
        location=Location(
            latitude=latitude,
            longitude=longitude,
            horizontal_accuracy=horizontal_accuracy,
        ),
    )

    logger.info(f"Capturing tree for planter {planter_identifier} ({size_bytes} bytes)")

    # Storage calls block; keep them off the event loop
    planter = await run_in_threadpool(PlanterService.get_planter, db, planter_identifier)
    tree = await run_in_threadpool(tree_service.save_tree, tree_data, planter)

    return TreeCaptureResponse.model_validate(tree)

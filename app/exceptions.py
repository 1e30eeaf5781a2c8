# =============================================================================
# app/exceptions.py - Custom Exceptions and Handlers
# =============================================================================
# Centralized exception types for the tree capture workflow and the API.
# Every error carries a machine-readable code and a suggestion on how to fix it.
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse


class TreeTrackerException(Exception):
    """
    Base exception for TreeTracker.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "TREETRACKER_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Tree Service Exceptions
# =============================================================================

class TreeServiceError(TreeTrackerException):
    """Base class for failures of the save-tree workflow."""


class PlanterError(TreeServiceError):
    """Raised when the planter is not a persisted planter of this session."""

    def __init__(self, identifier: str | None):
        super().__init__(
            message=f"Planter is not a stored planter record: {identifier}",
            code="PLANTER_ERROR",
            status_code=422,
            suggestion="Load the planter from the database session used to save the tree",
            details={"planter_identifier": identifier}
        )


class IdentificationError(TreeServiceError):
    """Raised when a planter has no identification to attach a tree to."""

    def __init__(self, identifier: str | None):
        super().__init__(
            message=f"Planter has no identification: {identifier}",
            code="IDENTIFICATION_ERROR",
            status_code=409,
            suggestion="Complete planter identification before capturing trees",
            details={"planter_identifier": identifier}
        )


class DocumentStorageError(TreeServiceError):
    """Raised when the tree photo could not be written to the document store."""

    def __init__(self, tree_id: str, error: str):
        super().__init__(
            message=f"Failed to store tree photo: {error}",
            code="DOCUMENT_STORAGE_ERROR",
            status_code=500,
            suggestion="Check free space and permissions of the document store",
            details={"tree_id": tree_id, "error": error}
        )


# =============================================================================
# Planter Exceptions
# =============================================================================

class PlanterNotFoundError(TreeTrackerException):
    """Raised when a planter identifier doesn't exist."""

    def __init__(self, identifier: str):
        super().__init__(
            message=f"Planter not found: {identifier}",
            code="PLANTER_NOT_FOUND",
            status_code=404,
            suggestion="Check that the planter identifier is correct",
            details={"planter_identifier": identifier}
        )


# =============================================================================
# Upload / Storage Exceptions
# =============================================================================

class InvalidFileTypeError(TreeTrackerException):
    """Raised when uploaded photo type is not allowed."""

    def __init__(self, content_type: str | None, allowed: list[str]):
        super().__init__(
            message=f"Invalid photo type: {content_type}",
            code="INVALID_FILE_TYPE",
            status_code=400,
            suggestion=f"Only these photo types are supported: {', '.join(allowed)}",
            details={"content_type": content_type, "allowed_types": allowed}
        )


class FileTooLargeError(TreeTrackerException):
    """Raised when uploaded photo exceeds size limit."""

    def __init__(self, size_mb: float, max_mb: int):
        super().__init__(
            message=f"Photo too large: {size_mb:.1f}MB (max: {max_mb}MB)",
            code="FILE_TOO_LARGE",
            status_code=413,
            suggestion=f"Upload a photo smaller than {max_mb}MB",
            details={"size_mb": size_mb, "max_mb": max_mb}
        )


class StorageUploadError(TreeTrackerException):
    """Raised when a write to the document store fails."""

    def __init__(self, error: str):
        super().__init__(
            message=f"Failed to upload file to storage: {error}",
            code="STORAGE_UPLOAD_ERROR",
            status_code=500,
            suggestion="Try again later or contact support if the issue persists",
            details={"error": error}
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def treetracker_exception_handler(
    request: Request,
    exc: TreeTrackerException
) -> JSONResponse:
    """
    Convert TreeTrackerException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle Pydantic validation errors.

    Converts validation errors to user-friendly messages.
    """
    return JSONResponse(
        status_code=422,
        content={
            "detail": "Validation error",
            "code": "VALIDATION_ERROR",
            "errors": str(exc)
        }
    )

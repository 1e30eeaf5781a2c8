# =============================================================================
# core/services/storage_service.py - Tree Photo Storage
# =============================================================================
# Document stores write photo bytes under a caller-chosen key and return a
# reference (path) to where they landed:
# - LocalDocumentStore: files under a local documents directory
# - SupabaseDocumentStore: objects in a Supabase Storage bucket
#
# Both raise StorageUploadError when a write fails.
# =============================================================================

import logging
from pathlib import Path
from typing import Protocol

from app.config import settings
from app.exceptions import StorageUploadError
from lib.supabase_client import SupabaseClient

logger = logging.getLogger(__name__)

# Content types by photo extension
CONTENT_TYPES = {
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
}


class DocumentStore(Protocol):
    """Binary storage addressed by filename."""

    def store(self, data: bytes, filename: str) -> str:
        """Persist data under filename and return its location reference."""
        ...

    def delete(self, path: str) -> bool:
        """Remove a stored document; True if it was removed."""
        ...


def _check_filename(filename: str) -> None:
    """Keys must be plain names: no directories, no traversal."""
    if not filename or "/" in filename or "\\" in filename or filename in (".", ".."):
        raise StorageUploadError(f"Invalid document name: {filename!r}")


class LocalDocumentStore:
    """
    Stores documents as files in a directory.

    Example:
        store = LocalDocumentStore("./documents")
        path = store.store(png_bytes, "2f1c6a9e-...")
        # -> "documents/2f1c6a9e-....png"
    """

    def __init__(self, root: str | Path, extension: str = ".png"):
        self.root = Path(root)
        self.extension = extension

    def store(self, data: bytes, filename: str) -> str:
        """
        Write data to <root>/<filename><extension>.

        Args:
            data: Document bytes
            filename: Key for the document (no directory parts)

        Returns:
            Path of the written file

        Raises:
            StorageUploadError: If the file cannot be written
        """
        _check_filename(filename)
        path = self.root / f"{filename}{self.extension}"

        try:
            self.root.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
        except OSError as e:
            logger.error(f"Local document write failed: {e}")
            raise StorageUploadError(str(e)) from e

        logger.debug(f"Stored document: {path} ({len(data)} bytes)")
        return str(path)

    def delete(self, path: str) -> bool:
        """Delete a previously stored file."""
        try:
            Path(path).unlink()
            logger.info(f"Deleted document: {path}")
            return True
        except FileNotFoundError:
            return False
        except OSError as e:
            logger.error(f"Failed to delete document: {e}")
            return False


class SupabaseDocumentStore:
    """
    Stores documents in a Supabase Storage bucket.

    Objects are written to <folder>/<filename><extension> with upsert so an
    external retry with the same key overwrites rather than fails.
    """

    def __init__(
        self,
        bucket: str | None = None,
        folder: str = "trees",
        extension: str = ".png",
    ):
        self.bucket = bucket or settings.STORAGE_BUCKET
        self.folder = folder
        self.extension = extension

    def _path(self, filename: str) -> str:
        return f"{self.folder}/{filename}{self.extension}"

    def store(self, data: bytes, filename: str) -> str:
        """
        Upload data to storage.

        Args:
            data: Document bytes
            filename: Key for the document (no directory parts)

        Returns:
            Storage path where the document was uploaded

        Raises:
            StorageUploadError: If upload fails
        """
        _check_filename(filename)
        path = self._path(filename)
        content_type = CONTENT_TYPES.get(self.extension.lower(), "application/octet-stream")

        try:
            client = SupabaseClient.get_client()
            client.storage.from_(self.bucket).upload(
                path=path,
                file=data,
                file_options={"content-type": content_type, "upsert": "true"}
            )
        except Exception as e:
            logger.error(f"Storage upload failed: {e}")
            raise StorageUploadError(str(e)) from e

        logger.info(f"Uploaded document to storage: {path}")
        return path

    def delete(self, path: str) -> bool:
        """Delete an object from the bucket."""
        try:
            client = SupabaseClient.get_client()
            client.storage.from_(self.bucket).remove([path])
            logger.info(f"Deleted document from storage: {path}")
            return True

        except Exception as e:
            logger.error(f"Failed to delete document: {e}")
            return False


def create_document_store() -> DocumentStore:
    """Build the document store selected by settings.DOCUMENT_STORE."""
    if settings.DOCUMENT_STORE == "supabase":
        return SupabaseDocumentStore(
            bucket=settings.STORAGE_BUCKET,
            extension=settings.PHOTO_EXTENSION,
        )
    return LocalDocumentStore(settings.DOCUMENTS_DIR, extension=settings.PHOTO_EXTENSION)

# =============================================================================
# lib/supabase_client.py - Supabase Client Wrapper
# =============================================================================
# Provides a single shared Supabase client, used for photo storage when
# DOCUMENT_STORE=supabase.
#
# Usage:
#   from lib.supabase_client import SupabaseClient
#   client = SupabaseClient.get_client()
#   client.storage.from_("tree-photos").upload(...)
# =============================================================================

from __future__ import annotations

import logging
from typing import Any

from supabase import create_client, Client

from app.config import settings

# Set up logging for this module
logger = logging.getLogger(__name__)


class SupabaseClientError(Exception):
    """
    Error during Supabase operations.

    Carries a code and a suggestion on how to fix the problem.
    """

    def __init__(
        self,
        message: str,
        code: str = "SUPABASE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


class SupabaseClient:
    """
    Holder for the shared Supabase client.

    One client instance is created lazily and reused across the
    application.
    """

    _instance: Client | None = None

    @classmethod
    def get_client(cls) -> Client:
        """
        Get or create the singleton Supabase client.

        Uses the service_role key, which is appropriate for server-side
        storage writes.

        Returns:
            Client: Supabase client instance

        Raises:
            SupabaseClientError: If credentials are missing or creation fails
        """
        if cls._instance is None:
            if not settings.SUPABASE_URL or not settings.SUPABASE_SERVICE_KEY:
                raise SupabaseClientError(
                    message="Supabase credentials are not configured",
                    code="CLIENT_NOT_CONFIGURED",
                    suggestion="Set SUPABASE_URL and SUPABASE_SERVICE_KEY in your .env file"
                )
            try:
                cls._instance = create_client(
                    settings.SUPABASE_URL,
                    settings.SUPABASE_SERVICE_KEY
                )
                logger.info("Supabase client initialized successfully")
            except Exception as e:
                raise SupabaseClientError(
                    message=f"Failed to create Supabase client: {e}",
                    code="CLIENT_INIT_FAILED",
                    suggestion="Check SUPABASE_URL and SUPABASE_SERVICE_KEY in your .env file"
                ) from e
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the cached client (used by tests and after key rotation)."""
        cls._instance = None

# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.DATABASE_URL)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every value has a development default so the service starts against a
    local SQLite database and a local documents directory. Supabase
    credentials are only required when photos go to Supabase Storage.
    """

    # -------------------------------------------------------------------------
    # Record Store (SQLAlchemy)
    # -------------------------------------------------------------------------

    DATABASE_URL: str = Field(
        default="sqlite:///./treetracker.db",
        description="SQLAlchemy database URL for planters, identifications and trees"
    )

    DATABASE_ECHO: bool = Field(
        default=False,
        description="Echo SQL statements (debugging only)"
    )

    # -------------------------------------------------------------------------
    # Blob Store (tree photos)
    # -------------------------------------------------------------------------

    DOCUMENT_STORE: Literal["local", "supabase"] = Field(
        default="local",
        description="Where tree photos are written"
    )

    DOCUMENTS_DIR: str = Field(
        default="./documents",
        description="Root directory for the local document store"
    )

    PHOTO_EXTENSION: str = Field(
        default=".png",
        description="Extension appended to the photo key when storing"
    )

    STORAGE_BUCKET: str = Field(
        default="tree-photos",
        description="Supabase Storage bucket for tree photos"
    )

    SUPABASE_URL: str | None = Field(
        default=None,
        description="Supabase project URL (e.g., https://xxx.supabase.co)"
    )

    SUPABASE_SERVICE_KEY: str | None = Field(
        default=None,
        description="Supabase service_role key (bypasses RLS)"
    )

    # Off by default: a failed commit leaves the already written photo behind
    CLEANUP_ORPHANED_PHOTOS: bool = Field(
        default=False,
        description="Delete the stored photo when the tree record fails to commit"
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging)"
    )

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to"
    )

    API_PORT: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    # CORS origins (comma-separated string that gets parsed)
    CORS_ORIGINS: str = Field(
        default="http://localhost:3000",
        description="Allowed CORS origins (comma-separated)"
    )

    # -------------------------------------------------------------------------
    # Photo Upload Settings
    # -------------------------------------------------------------------------

    MAX_UPLOAD_SIZE_MB: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Maximum photo upload size in MB"
    )

    ALLOWED_PHOTO_TYPES: str = Field(
        default="image/png,image/jpeg",
        description="Accepted photo content types (comma-separated)"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )

    @model_validator(mode="after")
    def check_supabase_credentials(self) -> "Settings":
        """Supabase storage cannot be selected without credentials."""
        if self.DOCUMENT_STORE == "supabase" and not (
            self.SUPABASE_URL and self.SUPABASE_SERVICE_KEY
        ):
            raise ValueError(
                "DOCUMENT_STORE=supabase requires SUPABASE_URL and SUPABASE_SERVICE_KEY"
            )
        return self

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse CORS_ORIGINS string into a list.

        Example: "http://localhost:3000, https://myapp.com" -> ["http://localhost:3000", "https://myapp.com"]
        """
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    @property
    def allowed_photo_types_list(self) -> list[str]:
        """
        Parse ALLOWED_PHOTO_TYPES string into a list.

        Example: "image/png, image/jpeg" -> ["image/png", "image/jpeg"]
        """
        return [kind.strip().lower() for kind in self.ALLOWED_PHOTO_TYPES.split(",")]

    @property
    def max_upload_size_bytes(self) -> int:
        """Convert MB to bytes for file size validation."""
        return self.MAX_UPLOAD_SIZE_MB * 1024 * 1024

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.

    Returns:
        Settings: The application settings instance
    """
    return Settings()


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()

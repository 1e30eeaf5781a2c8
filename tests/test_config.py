# =============================================================================
# tests/test_config.py - Settings Tests
# =============================================================================

import pytest
from pydantic import ValidationError

from app.config import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("SUPABASE_URL", "SUPABASE_SERVICE_KEY", "DOCUMENT_STORE", "CORS_ORIGINS"):
        monkeypatch.delenv(name, raising=False)


def make_settings(**values) -> Settings:
    return Settings(_env_file=None, **values)


class TestSettings:
    """Tests for Settings validation and computed properties."""

    def test_defaults(self):
        settings = make_settings()

        assert settings.DOCUMENT_STORE == "local"
        assert settings.CLEANUP_ORPHANED_PHOTOS is False
        assert settings.PHOTO_EXTENSION == ".png"

    def test_supabase_requires_credentials(self):
        with pytest.raises(ValidationError):
            make_settings(DOCUMENT_STORE="supabase")

    def test_supabase_with_credentials(self):
        settings = make_settings(
            DOCUMENT_STORE="supabase",
            SUPABASE_URL="https://test-project.supabase.co",
            SUPABASE_SERVICE_KEY="test-service-key",
        )

        assert settings.DOCUMENT_STORE == "supabase"

    def test_unknown_document_store(self):
        with pytest.raises(ValidationError):
            make_settings(DOCUMENT_STORE="s3")

    def test_list_properties(self):
        settings = make_settings(
            CORS_ORIGINS="http://localhost:3000, https://treetracker.org",
            ALLOWED_PHOTO_TYPES="image/PNG, image/jpeg",
        )

        assert settings.cors_origins_list == ["http://localhost:3000", "https://treetracker.org"]
        assert settings.allowed_photo_types_list == ["image/png", "image/jpeg"]

    def test_upload_size_in_bytes(self):
        assert make_settings(MAX_UPLOAD_SIZE_MB=2).max_upload_size_bytes == 2 * 1024 * 1024

# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - In-memory SQLite record store, rebuilt per test
# - Local document store under pytest's tmp_path
# =============================================================================

import os
from datetime import datetime, timezone

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("DOCUMENT_STORE", "local")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from core.database import init_db
from core.models import PlanterDetail, PlanterIdentification
from core.services.storage_service import LocalDocumentStore


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def engine():
    """Fresh in-memory database with all tables."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    assert init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    """Session factory configured like core.database.SessionLocal."""
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db_session(session_factory):
    """A unit of work for one test."""
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def documents_dir(tmp_path):
    return tmp_path / "documents"


@pytest.fixture
def document_store(documents_dir):
    """Document store writing into a temporary directory."""
    return LocalDocumentStore(documents_dir)


@pytest.fixture
def day():
    """Build a UTC timestamp for a day of October 2026."""
    def _day(number: int) -> datetime:
        return datetime(2026, 10, number, 9, 0, tzinfo=timezone.utc)
    return _day


@pytest.fixture
def make_planter(db_session):
    """Create and commit a planter with identifications created at the given times."""
    def _make_planter(
        identifier: str = "planter@example.com",
        identification_dates=(),
    ) -> PlanterDetail:
        planter = PlanterDetail(
            identifier=identifier,
            first_name="Ada",
            last_name="Okafor",
            email=identifier,
            organization="Greenstand",
            accepted_terms=True,
        )
        for created_at in identification_dates:
            planter.identifications.append(
                PlanterIdentification(
                    created_at=created_at,
                    local_photo_path=f"selfies/{identifier}.png",
                )
            )
        db_session.add(planter)
        db_session.commit()
        return planter
    return _make_planter

# =============================================================================
# core/database.py - Record Store (SQLAlchemy)
# =============================================================================
# Engine, session factory and declarative base for the structured records
# (planters, identifications, tree captures).
#
# A Session is the unit of work: pending creations are written atomically by
# a single commit(). Sessions are not thread-safe; give each request or
# worker its own session.
#
# Usage:
#   from core.database import get_db
#   with get_db() as db:
#       planter = db.query(PlanterDetail).first()
# =============================================================================

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from app.config import settings

logger = logging.getLogger(__name__)


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Create an engine with options suited to the backend.

    SQLite gets check_same_thread disabled because the API hands sessions to
    a threadpool; server databases get a connection pool.
    """
    if database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            echo=echo,
        )

    return create_engine(
        database_url,
        pool_pre_ping=True,  # Verify connections before using
        pool_size=10,
        max_overflow=20,
        pool_recycle=3600,
        echo=echo,
    )


engine = build_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)


@event.listens_for(engine, "connect")
def receive_connect(dbapi_conn, connection_record):
    logger.debug("Database connection established")


# Create session factory
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
    expire_on_commit=False,
)

# Base class for declarative models
Base = declarative_base()


def init_db(bind: Engine | None = None) -> bool:
    """
    Initialize database tables.

    Creates all tables defined in core.models.records.
    """
    try:
        # Import models so they are registered on Base.metadata
        from core.models import records  # noqa: F401

        Base.metadata.create_all(bind=bind or engine)
        logger.info("Database tables created/verified successfully")
        return True

    except Exception as e:
        logger.error(f"Error creating database tables: {e}")
        return False


@contextmanager
def get_db() -> Iterator[Session]:
    """
    Context manager for database sessions.

    Commits on success, rolls back on error, always closes.
    """
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception as e:
        db.rollback()
        logger.error(f"Database transaction error: {e}")
        raise
    finally:
        db.close()


def get_db_session() -> Iterator[Session]:
    """
    Get database session for dependency injection.

    The caller owns the transaction; this only guarantees the session is
    closed when the request finishes.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def check_db_connection(db: Session | None = None) -> bool:
    """Check if the database answers a trivial query."""
    try:
        if db is not None:
            db.execute(text("SELECT 1"))
        else:
            with get_db() as session:
                session.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        return False

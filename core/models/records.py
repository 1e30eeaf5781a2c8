# =============================================================================
# core/models/records.py - Persisted Records (SQLAlchemy ORM)
# =============================================================================
# The structured side of a tree capture:
# - PlanterDetail: the stored planter (the only persisted Planter variant)
# - PlanterIdentification: a verification record owned by one planter
# - TreeCapture: one planting event (photo reference + location)
#
# Relationships are foreign-key based:
#   PlanterDetail 1 --- * PlanterIdentification 1 --- * TreeCapture
# A tree points at its identification through identification_id; the
# identification owns the collection of its trees.
# =============================================================================

from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from core.database import Base


def utcnow() -> datetime:
    """Timezone-aware current time in UTC."""
    return datetime.now(timezone.utc)


class PlanterDetail(Base):
    """A planter stored in the record store."""
    __tablename__ = "planter_details"

    id = Column(Integer, primary_key=True, autoincrement=True)
    identifier = Column(String(255), nullable=False, unique=True, index=True)

    first_name = Column(String(255), nullable=True)
    last_name = Column(String(255), nullable=True)
    email = Column(String(255), nullable=True)
    phone_number = Column(String(64), nullable=True)
    organization = Column(String(255), nullable=True)

    uploaded = Column(Boolean, default=False, nullable=False)
    accepted_terms = Column(Boolean, default=False, nullable=False)

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=True)

    identifications = relationship(
        "PlanterIdentification",
        back_populates="planter",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<PlanterDetail identifier={self.identifier!r}>"


class PlanterIdentification(Base):
    """A verification record; new trees are attributed to the latest one."""
    __tablename__ = "planter_identifications"

    id = Column(Integer, primary_key=True, autoincrement=True)
    planter_id = Column(
        Integer,
        ForeignKey("planter_details.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Selfie taken when the planter was verified
    local_photo_path = Column(Text, nullable=True)
    uploaded = Column(Boolean, default=False, nullable=False)

    # Nullable on purpose: legacy rows may lack it and never count as latest
    created_at = Column(DateTime(timezone=True), nullable=True)

    planter = relationship("PlanterDetail", back_populates="identifications")
    trees = relationship(
        "TreeCapture",
        back_populates="identification",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<PlanterIdentification id={self.id} created_at={self.created_at}>"


class TreeCapture(Base):
    """A captured tree: photo reference, location and upload state."""
    __tablename__ = "tree_captures"

    id = Column(Integer, primary_key=True, autoincrement=True)

    # Also the key of the photo in the document store
    uuid = Column(String(36), nullable=False, unique=True, index=True)

    identification_id = Column(
        Integer,
        ForeignKey("planter_identifications.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    horizontal_accuracy = Column(Float, nullable=False)

    local_photo_path = Column(Text, nullable=False)

    # Flipped to True by the sync process once uploaded
    uploaded = Column(Boolean, default=False, nullable=False)

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    identification = relationship("PlanterIdentification", back_populates="trees")

    def __repr__(self) -> str:
        return f"<TreeCapture uuid={self.uuid!r}>"

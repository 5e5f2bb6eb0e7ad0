"""Leads table.

Email and phone are UNIQUE: the intake route looks up duplicates first for a
readable error, the constraint catches submissions racing past that lookup.
Multiple NULL phones are allowed by both Postgres and SQLite.
"""
import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base, utcnow


def new_candidate_id() -> str:
    return str(uuid.uuid4())


class Candidate(Base):
    """Candidates table."""
    __tablename__ = "candidates"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_candidate_id)
    full_name: Mapped[str] = mapped_column(String(150), nullable=False)
    service_type: Mapped[str] = mapped_column(String(32), nullable=False)
    budget: Mapped[str] = mapped_column(String(32), nullable=False)
    study_level: Mapped[str] = mapped_column(String(32), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    phone: Mapped[Optional[str]] = mapped_column(String(32), unique=True)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(String(32), nullable=False, default="pending")
    notes: Mapped[Optional[str]] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        onupdate=utcnow,
        nullable=False,
    )

    __table_args__ = (
        Index("ix_candidates_created_at", "created_at"),
        Index("ix_candidates_status", "status"),
    )

    def __repr__(self) -> str:
        return f"<Candidate {self.id} {self.email} {self.status}>"

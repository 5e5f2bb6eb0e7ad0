"""
Candidate Service - all reads and writes of the candidates table.

Used by:
- the public lead intake route (landing page form)
- the admin candidate routes (dashboard)

Duplicate policy: a lead is rejected when its email or phone is already
used by another candidate. The lookup gives a readable error; the UNIQUE
constraints on the table reject whatever slips between lookup and insert.
"""

import logging
from functools import lru_cache
from typing import Dict, List, Optional, Tuple

from sqlalchemy import func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.db.postgres import get_db_session, execute_raw_sql
from app.models import Candidate
from app.models.base import utcnow
from app.schemas.schemas import (
    CandidateCreate, CandidateStatus, CandidateUpdate, LeadCreate
)

logger = logging.getLogger(__name__)

# Columns an edit may explicitly set to null
NULLABLE_FIELDS = {"phone", "notes"}

# Statuses that occupy one of the limited places of a service
ACTIVE_STATUSES = (CandidateStatus.in_progress.value, CandidateStatus.completed.value)


class CandidateNotFoundError(Exception):
    """No candidate with the requested id."""

    def __init__(self, candidate_id: str):
        self.candidate_id = candidate_id
        super().__init__(f"Candidate {candidate_id} not found")


class DuplicateCandidateError(Exception):
    """Email or phone already belongs to another candidate."""

    MESSAGES = {
        "email": "This email is already used for a request",
        "phone": "This phone number is already used for a request",
    }

    def __init__(self, field: str):
        self.field = field
        super().__init__(self.MESSAGES.get(field, f"Duplicate {field}"))


PHONE_CONFLICT_MARKERS = ("candidates.phone", "candidates_phone_key", "key (phone)")


def _conflict_field(error: IntegrityError) -> str:
    """
    Name the column behind a unique violation from the constraint or column
    name only: Postgres also echoes the offending value in its DETAIL line.
    """
    text = str(error.orig).lower()
    return "phone" if any(marker in text for marker in PHONE_CONFLICT_MARKERS) else "email"


class CandidateService:
    """
    CRUD over candidates.

    Every public method opens its own session; returned Candidate objects are
    detached but fully loaded (sessions do not expire on commit).
    """

    # ------------------------------------------------------------
    # Duplicate detection
    # ------------------------------------------------------------

    def find_duplicate(
        self,
        db: Session,
        email: Optional[str],
        phone: Optional[str],
        exclude_id: Optional[str] = None
    ) -> Optional[str]:
        """
        Return "email" or "phone" when another candidate already uses it.
        Email wins when both collide.
        """
        conditions = []
        if email:
            conditions.append(Candidate.email == email)
        if phone:
            conditions.append(Candidate.phone == phone)
        if not conditions:
            return None

        stmt = select(Candidate.email, Candidate.phone).where(or_(*conditions))
        if exclude_id is not None:
            stmt = stmt.where(Candidate.id != exclude_id)

        rows = db.execute(stmt).all()
        if not rows:
            return None
        if email and any(row.email == email for row in rows):
            return "email"
        return "phone"

    def _insert(self, values: dict) -> Candidate:
        with get_db_session() as db:
            field = self.find_duplicate(db, values["email"], values.get("phone"))
            if field:
                raise DuplicateCandidateError(field)

            candidate = Candidate(**values)
            db.add(candidate)
            try:
                db.flush()
            except IntegrityError as e:
                raise DuplicateCandidateError(_conflict_field(e)) from e
        return candidate

    # ------------------------------------------------------------
    # Create
    # ------------------------------------------------------------

    def submit_lead(self, lead: LeadCreate) -> Candidate:
        """Insert a landing page submission. Status is always pending."""
        values = lead.model_dump(mode="json")
        values["status"] = CandidateStatus.pending.value
        values["notes"] = None
        try:
            candidate = self._insert(values)
        except DuplicateCandidateError as e:
            logger.warning("Lead rejected, duplicate %s: %s", e.field, values[e.field])
            raise
        logger.info("New lead %s (%s, %s)", candidate.id, candidate.service_type, candidate.email)
        return candidate

    def create(self, data: CandidateCreate) -> Candidate:
        """Admin-side insert, may carry status and notes."""
        candidate = self._insert(data.model_dump(mode="json"))
        logger.info("Admin created candidate %s", candidate.id)
        return candidate

    # ------------------------------------------------------------
    # Read
    # ------------------------------------------------------------

    def get(self, candidate_id: str) -> Candidate:
        with get_db_session() as db:
            candidate = db.get(Candidate, candidate_id)
        if candidate is None:
            raise CandidateNotFoundError(candidate_id)
        return candidate

    def list_candidates(
        self,
        search: Optional[str] = None,
        status: Optional[str] = None,
        page: int = 1,
        page_size: int = 50
    ) -> Tuple[List[Candidate], int]:
        """
        Newest first. `search` matches name, email and message ignoring case,
        and the phone number as typed. `status` "all" or None disables the filter.
        """
        stmt = select(Candidate)

        if status and status != "all":
            stmt = stmt.where(Candidate.status == status)

        term = (search or "").strip()
        if term:
            stmt = stmt.where(or_(
                Candidate.full_name.icontains(term, autoescape=True),
                Candidate.email.icontains(term, autoescape=True),
                Candidate.message.icontains(term, autoescape=True),
                Candidate.phone.contains(term, autoescape=True),
            ))

        offset = (page - 1) * page_size
        with get_db_session() as db:
            total = db.scalar(select(func.count()).select_from(stmt.subquery()))
            candidates = db.scalars(
                stmt.order_by(Candidate.created_at.desc()).offset(offset).limit(page_size)
            ).all()
        return list(candidates), total or 0

    def stats(self) -> Dict[str, int]:
        """Count of candidates per status plus the overall total."""
        counts = {status.value: 0 for status in CandidateStatus}
        rows = execute_raw_sql("SELECT status, COUNT(*) AS count FROM candidates GROUP BY status")
        for row in rows:
            if row["status"] in counts:
                counts[row["status"]] = int(row["count"])
        counts["total"] = sum(int(row["count"]) for row in rows)
        return counts

    def active_per_service(self) -> Dict[str, int]:
        """Candidates holding a place (in progress or completed), per service type."""
        rows = execute_raw_sql(
            """
            SELECT service_type, COUNT(*) AS count FROM candidates
            WHERE status IN (:in_progress, :completed)
            GROUP BY service_type
            """,
            {"in_progress": ACTIVE_STATUSES[0], "completed": ACTIVE_STATUSES[1]}
        )
        return {row["service_type"]: int(row["count"]) for row in rows}

    # ------------------------------------------------------------
    # Update
    # ------------------------------------------------------------

    def update(self, candidate_id: str, data: CandidateUpdate) -> Candidate:
        """
        Apply the fields present in `data`. Explicit nulls only clear the
        nullable columns; a null for a required column is ignored.
        """
        changes = {
            key: value for key, value in data.model_dump(exclude_unset=True, mode="json").items()
            if value is not None or key in NULLABLE_FIELDS
        }

        with get_db_session() as db:
            candidate = db.get(Candidate, candidate_id)
            if candidate is None:
                raise CandidateNotFoundError(candidate_id)
            if not changes:
                return candidate

            field = self.find_duplicate(db, changes.get("email"), changes.get("phone"), exclude_id=candidate_id)
            if field:
                raise DuplicateCandidateError(field)

            for key, value in changes.items():
                setattr(candidate, key, value)
            candidate.updated_at = utcnow()
            try:
                db.flush()
            except IntegrityError as e:
                raise DuplicateCandidateError(_conflict_field(e)) from e

        logger.info("Candidate %s updated: %s", candidate_id, ", ".join(sorted(changes)))
        return candidate

    def set_status(self, candidate_id: str, status: CandidateStatus) -> Candidate:
        with get_db_session() as db:
            candidate = db.get(Candidate, candidate_id)
            if candidate is None:
                raise CandidateNotFoundError(candidate_id)
            previous = candidate.status
            candidate.status = status.value
            candidate.updated_at = utcnow()

        logger.info("Candidate %s status %s -> %s", candidate_id, previous, status.value)
        return candidate

    # ------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------

    def delete(self, candidate_id: str) -> None:
        with get_db_session() as db:
            candidate = db.get(Candidate, candidate_id)
            if candidate is None:
                raise CandidateNotFoundError(candidate_id)
            db.delete(candidate)
        logger.info("Candidate %s deleted", candidate_id)


@lru_cache()
def get_candidate_service() -> CandidateService:
    """Get the shared CandidateService instance."""
    return CandidateService()

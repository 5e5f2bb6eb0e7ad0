import pytest
from sqlalchemy.exc import IntegrityError

from app.db.postgres import get_db_session
from app.schemas.schemas import CandidateStatus, LeadCreate
from app.services.candidate_service import (
    CandidateNotFoundError, CandidateService, DuplicateCandidateError, _conflict_field,
    get_candidate_service,
)
from tests.conftest import LEAD


@pytest.fixture
def service(client):
    return get_candidate_service()


def test_find_duplicate(service):
    service.submit_lead(LeadCreate(**LEAD))

    with get_db_session() as db:
        assert service.find_duplicate(db, LEAD["email"], None) == "email"
        assert service.find_duplicate(db, "new@mail.dz", LEAD["phone"]) == "phone"
        assert service.find_duplicate(db, LEAD["email"], LEAD["phone"]) == "email"
        assert service.find_duplicate(db, "new@mail.dz", "0000 00 00 00") is None
        assert service.find_duplicate(db, None, None) is None


def test_find_duplicate_excludes_self(service):
    candidate = service.submit_lead(LeadCreate(**LEAD))

    with get_db_session() as db:
        assert service.find_duplicate(db, LEAD["email"], LEAD["phone"], exclude_id=candidate.id) is None


def test_unique_constraint_catches_race(service, monkeypatch):
    service.submit_lead(LeadCreate(**LEAD))

    # A concurrent submission that passed the lookup before the first insert landed
    monkeypatch.setattr(CandidateService, "find_duplicate", lambda self, *args, **kwargs: None)

    with pytest.raises(DuplicateCandidateError) as exc:
        service.submit_lead(LeadCreate(**{**LEAD, "email": "other@mail.dz"}))
    assert exc.value.field == "phone"

    with pytest.raises(DuplicateCandidateError) as exc:
        service.submit_lead(LeadCreate(**{**LEAD, "phone": "0770 00 00 00"}))
    assert exc.value.field == "email"

    assert service.stats()["total"] == 1


def test_set_status_and_stats(service):
    candidate = service.submit_lead(LeadCreate(**LEAD))
    updated = service.set_status(candidate.id, CandidateStatus.in_progress)

    assert updated.status == "in_progress"
    assert updated.updated_at >= candidate.updated_at
    assert service.stats()["in_progress"] == 1
    assert service.active_per_service() == {"web": 1}


def test_missing_candidate(service):
    with pytest.raises(CandidateNotFoundError):
        service.get("missing")
    with pytest.raises(CandidateNotFoundError):
        service.set_status("missing", CandidateStatus.contacted)
    with pytest.raises(CandidateNotFoundError):
        service.delete("missing")


@pytest.mark.parametrize("driver_message, field", [
    ("UNIQUE constraint failed: candidates.phone", "phone"),
    ("UNIQUE constraint failed: candidates.email", "email"),
    ('duplicate key value violates unique constraint "candidates_phone_key"\n'
     "DETAIL:  Key (phone)=(0555 12 34 56) already exists.", "phone"),
    ('duplicate key value violates unique constraint "candidates_email_key"\n'
     "DETAIL:  Key (email)=(phone.shop@mail.dz) already exists.", "email"),
])
def test_conflict_field_from_driver_message(driver_message, field):
    error = IntegrityError("INSERT INTO candidates ...", {}, Exception(driver_message))
    assert _conflict_field(error) == field

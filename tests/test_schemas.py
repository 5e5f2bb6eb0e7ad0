import pytest
from pydantic import ValidationError

from app.schemas.schemas import BudgetTier, CandidateCreate, CandidateUpdate, LeadCreate
from tests.conftest import LEAD


def test_lead_budget_derived_from_service():
    assert LeadCreate(**LEAD).budget == BudgetTier.high
    assert LeadCreate(**{**LEAD, "service_type": "writing"}).budget == BudgetTier.low


def test_lead_normalizes_email_and_phone():
    lead = LeadCreate(**{**LEAD, "email": "Amina.Benali@Univ-Alger.DZ", "phone": "  0555 12 34 56  "})
    assert lead.email == "amina.benali@univ-alger.dz"
    assert lead.phone == "0555 12 34 56"


@pytest.mark.parametrize("phone", ["abc", "12 34", "+213 555 12 34 56 ext. 2"])
def test_lead_rejects_bad_phone(phone):
    with pytest.raises(ValidationError):
        LeadCreate(**{**LEAD, "phone": phone})


def test_admin_create_defaults():
    candidate = CandidateCreate(
        full_name="Karim Haddad", service_type="writing", budget="5000-10000", study_level="licence",
        email="karim@mail.dz", message="Mémoire", phone="  "
    )
    assert candidate.status.value == "pending"
    assert candidate.phone is None
    assert candidate.notes is None


def test_update_tracks_provided_fields():
    update = CandidateUpdate(notes="", status="contacted")
    assert update.model_fields_set == {"notes", "status"}
    assert update.notes is None


@pytest.mark.parametrize("missing", ["service_type", "budget", "study_level"])
def test_admin_create_requires_offer_fields(missing):
    payload = {
        "full_name": "Karim Haddad", "service_type": "writing", "budget": "5000-10000",
        "study_level": "licence", "email": "karim@mail.dz", "message": "Mémoire",
    }
    del payload[missing]
    with pytest.raises(ValidationError):
        CandidateCreate(**payload)

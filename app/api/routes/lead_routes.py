"""
Lead Routes (public)

POST /leads - Submit the landing page form
"""

from fastapi import APIRouter, HTTPException

from app.services.candidate_service import get_candidate_service, DuplicateCandidateError
from app.schemas.schemas import LeadCreate, LeadSubmitResponse

router = APIRouter(prefix="/leads", tags=["Leads"])


@router.post("", response_model=LeadSubmitResponse, status_code=201)
async def submit_lead(lead: LeadCreate):
    """
    Submit an assistance request from the landing page.

    The budget follows the chosen service when omitted. A request reusing
    an email or phone number already on file is refused with 409.
    """
    try:
        candidate = get_candidate_service().submit_lead(lead)
    except DuplicateCandidateError as e:
        raise HTTPException(status_code=409, detail={"field": e.field, "message": str(e)})

    return LeadSubmitResponse(
        message="Request received. We will get back to you within 48 hours.",
        candidate_id=candidate.id
    )

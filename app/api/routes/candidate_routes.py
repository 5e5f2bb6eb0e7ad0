"""
Candidate Routes (admin only)

GET /candidates - List candidates with search, status filter and pagination
GET /candidates/stats - Count per status
GET /candidates/{candidate_id} - View one candidate
POST /candidates - Create a candidate by hand
PUT /candidates/{candidate_id} - Edit a candidate
PUT /candidates/{candidate_id}/status - Change status
DELETE /candidates/{candidate_id} - Delete a candidate
"""

from fastapi import APIRouter, HTTPException, Depends, Query
from typing import Optional

from app.core.auth import get_current_admin
from app.services.candidate_service import (
    get_candidate_service, CandidateNotFoundError, DuplicateCandidateError
)
from app.schemas.schemas import (
    CandidateStatus, CandidateCreate, CandidateUpdate, CandidateStatusUpdate,
    CandidateResponse, CandidateListResponse, CandidateStatsResponse, MessageResponse
)

router = APIRouter(
    prefix="/candidates",
    tags=["Candidates"],
    dependencies=[Depends(get_current_admin)]
)

STATUS_FILTER_PATTERN = "^(all|" + "|".join(s.value for s in CandidateStatus) + ")$"


def _not_found(candidate_id: str) -> HTTPException:
    return HTTPException(status_code=404, detail=f"Candidate {candidate_id} not found")


def _conflict(error: DuplicateCandidateError) -> HTTPException:
    return HTTPException(status_code=409, detail={"field": error.field, "message": str(error)})


@router.get("", response_model=CandidateListResponse)
async def list_candidates(
    search: Optional[str] = Query(None, description="Search in name, email, message and phone"),
    status: str = Query("all", pattern=STATUS_FILTER_PATTERN),
    page: int = Query(1, ge=1),
    page_size: int = Query(50, ge=1, le=100)
):
    """List candidates, newest first."""
    candidates, total = get_candidate_service().list_candidates(
        search=search, status=status, page=page, page_size=page_size
    )
    return CandidateListResponse(
        candidates=[CandidateResponse.model_validate(c) for c in candidates],
        total=total,
        page=page,
        page_size=page_size
    )


@router.get("/stats", response_model=CandidateStatsResponse)
async def candidate_stats():
    """Totals shown on the dashboard cards."""
    return CandidateStatsResponse(**get_candidate_service().stats())


@router.get("/{candidate_id}", response_model=CandidateResponse)
async def get_candidate(candidate_id: str):
    try:
        candidate = get_candidate_service().get(candidate_id)
    except CandidateNotFoundError:
        raise _not_found(candidate_id)
    return CandidateResponse.model_validate(candidate)


@router.post("", response_model=CandidateResponse, status_code=201)
async def create_candidate(data: CandidateCreate):
    """Create a candidate from the dashboard. Status defaults to pending."""
    try:
        candidate = get_candidate_service().create(data)
    except DuplicateCandidateError as e:
        raise _conflict(e)
    return CandidateResponse.model_validate(candidate)


@router.put("/{candidate_id}", response_model=CandidateResponse)
async def update_candidate(candidate_id: str, data: CandidateUpdate):
    """Update a candidate. Only provided fields are updated."""
    if not data.model_fields_set:
        raise HTTPException(status_code=400, detail="No fields to update")

    try:
        candidate = get_candidate_service().update(candidate_id, data)
    except CandidateNotFoundError:
        raise _not_found(candidate_id)
    except DuplicateCandidateError as e:
        raise _conflict(e)
    return CandidateResponse.model_validate(candidate)


@router.put("/{candidate_id}/status", response_model=CandidateResponse)
async def update_candidate_status(candidate_id: str, update: CandidateStatusUpdate):
    try:
        candidate = get_candidate_service().set_status(candidate_id, update.status)
    except CandidateNotFoundError:
        raise _not_found(candidate_id)
    return CandidateResponse.model_validate(candidate)


@router.delete("/{candidate_id}", response_model=MessageResponse)
async def delete_candidate(candidate_id: str):
    try:
        get_candidate_service().delete(candidate_id)
    except CandidateNotFoundError:
        raise _not_found(candidate_id)
    return MessageResponse(message="Candidate deleted successfully")

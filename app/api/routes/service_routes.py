"""
Service Catalog Routes (public)

GET /services - Offerings with budget and remaining places
GET /services/labels - Display labels for statuses, services, budgets, study levels
"""

from fastapi import APIRouter
from typing import List

from app.services.catalog_service import list_offerings, get_labels
from app.schemas.schemas import ServiceOffering, LabelsResponse

router = APIRouter(prefix="/services", tags=["Services"])


@router.get("", response_model=List[ServiceOffering])
async def services():
    return list_offerings()


@router.get("/labels", response_model=LabelsResponse)
async def labels():
    return get_labels()

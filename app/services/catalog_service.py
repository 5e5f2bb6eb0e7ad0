"""
Service catalog - what the landing page sells and how many places are left.

Each service has a fixed budget tier and a seasonal capacity. Places are
informational: intake never refuses a lead because a service is full.
"""

from typing import List

from app.core.config import get_settings
from app.schemas.schemas import (
    BUDGET_LABELS, SERVICE_BUDGETS, SERVICE_LABELS, STATUS_LABELS, STUDY_LEVEL_LABELS,
    LabelsResponse, ServiceOffering, ServiceType
)
from app.services.candidate_service import get_candidate_service

SERVICE_DESCRIPTIONS = {
    ServiceType.web: "Accompagnement complet pour votre projet web ou mobile",
    ServiceType.writing: "Rédaction et accompagnement académique personnalisé",
}


def list_offerings() -> List[ServiceOffering]:
    capacity = get_settings().service_capacity
    taken = get_candidate_service().active_per_service()

    offerings = []
    for service in ServiceType:
        budget = SERVICE_BUDGETS[service]
        offerings.append(ServiceOffering(
            service_type=service,
            label=SERVICE_LABELS[service.value],
            description=SERVICE_DESCRIPTIONS[service],
            budget=budget,
            budget_label=BUDGET_LABELS[budget.value],
            capacity=capacity,
            places_remaining=max(capacity - taken.get(service.value, 0), 0),
        ))
    return offerings


def get_labels() -> LabelsResponse:
    return LabelsResponse(
        status=STATUS_LABELS,
        service_type=SERVICE_LABELS,
        budget=BUDGET_LABELS,
        study_level=STUDY_LEVEL_LABELS,
    )

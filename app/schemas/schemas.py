"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator, model_validator
from typing import Optional, List, Dict
from datetime import datetime, timezone
from enum import Enum


# ============================================================
# ENUMS
# ============================================================

class CandidateStatus(str, Enum):
    pending = "pending"
    contacted = "contacted"
    in_progress = "in_progress"
    completed = "completed"
    rejected = "rejected"


class ServiceType(str, Enum):
    web = "web"
    writing = "writing"


class BudgetTier(str, Enum):
    low = "5000-10000"
    high = "25000-50000"


class StudyLevel(str, Enum):
    licence = "licence"
    master = "master"


# ============================================================
# DISPLAY LABELS
# ============================================================

STATUS_LABELS: Dict[str, str] = {
    CandidateStatus.pending.value: "En attente",
    CandidateStatus.contacted.value: "Contacté",
    CandidateStatus.in_progress.value: "En cours",
    CandidateStatus.completed.value: "Terminé",
    CandidateStatus.rejected.value: "Rejeté",
}

SERVICE_LABELS: Dict[str, str] = {
    ServiceType.web.value: "Développement Web / Mobile",
    ServiceType.writing.value: "Rédaction académique",
}

BUDGET_LABELS: Dict[str, str] = {
    BudgetTier.low.value: "5 000 – 10 000 DA",
    BudgetTier.high.value: "25 000 – 50 000 DA",
}

STUDY_LEVEL_LABELS: Dict[str, str] = {
    StudyLevel.licence.value: "Licence",
    StudyLevel.master.value: "Master",
}

# Each service is sold at a fixed budget tier
SERVICE_BUDGETS: Dict[ServiceType, BudgetTier] = {
    ServiceType.web: BudgetTier.high,
    ServiceType.writing: BudgetTier.low,
}

PHONE_ALLOWED_CHARS = set("0123456789+-() ")


def _clean_phone(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    if not value:
        return None
    if not set(value) <= PHONE_ALLOWED_CHARS or sum(c.isdigit() for c in value) < 6:
        raise ValueError("Invalid phone number")
    return value


# ============================================================
# AUTH SCHEMAS
# ============================================================

class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)

class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    admin_id: int
    email: str

class AdminResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    is_active: bool
    created_at: datetime


# ============================================================
# LEAD / CANDIDATE SCHEMAS
# ============================================================

class LeadCreate(BaseModel):
    """Public landing page form. Every field is required except budget."""
    model_config = ConfigDict(str_strip_whitespace=True)

    full_name: str = Field(..., min_length=2, max_length=150)
    service_type: ServiceType
    budget: Optional[BudgetTier] = None
    study_level: StudyLevel
    email: EmailStr
    phone: str = Field(..., min_length=1, max_length=32)
    message: str = Field(..., min_length=1, max_length=5000)

    @field_validator("email")
    @classmethod
    def lower_email(cls, v: str) -> str:
        return v.lower()

    @field_validator("phone")
    @classmethod
    def check_phone(cls, v: str) -> str:
        cleaned = _clean_phone(v)
        if cleaned is None:
            raise ValueError("Phone number is required")
        return cleaned

    @model_validator(mode="after")
    def derive_budget(self):
        if self.budget is None:
            self.budget = SERVICE_BUDGETS[self.service_type]
        return self

class CandidateCreate(BaseModel):
    """Admin-side creation, may set status and notes directly."""
    model_config = ConfigDict(str_strip_whitespace=True)

    full_name: str = Field(..., min_length=2, max_length=150)
    service_type: ServiceType
    budget: BudgetTier
    study_level: StudyLevel
    email: EmailStr
    phone: Optional[str] = Field(None, max_length=32)
    message: str = Field(..., min_length=1, max_length=5000)
    status: CandidateStatus = CandidateStatus.pending
    notes: Optional[str] = None

    @field_validator("email")
    @classmethod
    def lower_email(cls, v: str) -> str:
        return v.lower()

    @field_validator("phone")
    @classmethod
    def check_phone(cls, v: Optional[str]) -> Optional[str]:
        return _clean_phone(v)

    @field_validator("notes")
    @classmethod
    def empty_notes(cls, v: Optional[str]) -> Optional[str]:
        return v or None

class CandidateUpdate(BaseModel):
    """Partial edit. Only fields present in the request body are applied."""
    model_config = ConfigDict(str_strip_whitespace=True)

    full_name: Optional[str] = Field(None, min_length=2, max_length=150)
    service_type: Optional[ServiceType] = None
    budget: Optional[BudgetTier] = None
    study_level: Optional[StudyLevel] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=32)
    message: Optional[str] = Field(None, min_length=1, max_length=5000)
    status: Optional[CandidateStatus] = None
    notes: Optional[str] = None

    @field_validator("email")
    @classmethod
    def lower_email(cls, v: Optional[str]) -> Optional[str]:
        return v.lower() if v else v

    @field_validator("phone")
    @classmethod
    def check_phone(cls, v: Optional[str]) -> Optional[str]:
        return _clean_phone(v)

    @field_validator("notes")
    @classmethod
    def empty_notes(cls, v: Optional[str]) -> Optional[str]:
        return v or None

class CandidateStatusUpdate(BaseModel):
    status: CandidateStatus

class CandidateResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    full_name: str
    service_type: str
    budget: str
    study_level: str
    email: str
    phone: Optional[str] = None
    message: str
    status: CandidateStatus
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        # SQLite hands back naive datetimes; everything is stored in UTC
        return v.replace(tzinfo=timezone.utc) if v.tzinfo is None else v

class CandidateListResponse(BaseModel):
    candidates: List[CandidateResponse]
    total: int
    page: int
    page_size: int

class CandidateStatsResponse(BaseModel):
    total: int = 0
    pending: int = 0
    contacted: int = 0
    in_progress: int = 0
    completed: int = 0
    rejected: int = 0

class LeadSubmitResponse(BaseModel):
    message: str
    success: bool = True
    candidate_id: str


# ============================================================
# SERVICE CATALOG SCHEMAS
# ============================================================

class ServiceOffering(BaseModel):
    service_type: ServiceType
    label: str
    description: str
    budget: BudgetTier
    budget_label: str
    capacity: int
    places_remaining: int

class LabelsResponse(BaseModel):
    status: Dict[str, str]
    service_type: Dict[str, str]
    budget: Dict[str, str]
    study_level: Dict[str, str]


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class MessageResponse(BaseModel):
    message: str
    success: bool = True

class ErrorResponse(BaseModel):
    detail: str

"""Organization schemas for registration, status checks and admin review."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr

from backend.app.schemas.choices import GradeLevel, OrganizationStatus


class OrganizationCreate(BaseModel):
    org_name: str
    org_type: str
    contact_person_name: str
    contact_email: EmailStr
    contact_phone: str
    city: str
    state: str
    description: str
    services_offered: str
    business_id: str
    grades_served: list[GradeLevel] = []
    website_url: Optional[str] = None


class OrganizationRead(BaseModel):
    id: int
    user_id: int
    org_name: str
    org_type: str
    business_id: str
    description: str
    services_offered: Optional[str] = None
    contact_person_name: str
    contact_email: str
    contact_phone: str
    website_url: Optional[str] = None
    city: str
    state: str
    grades_served: Optional[list[str]] = None
    status: OrganizationStatus
    approved: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class OrganizationStatusRead(BaseModel):
    exists: bool = True
    id: int
    org_name: str
    status: OrganizationStatus
    approved: bool
    created_at: datetime
    status_message: str


class AdminOrganizationList(BaseModel):
    pending: list[OrganizationRead]
    approved: list[OrganizationRead]
    total: int


class AdminOrganizationDecision(BaseModel):
    approved: bool


class AdminOrganizationDecisionResult(BaseModel):
    message: str
    organization: OrganizationRead

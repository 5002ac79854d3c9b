"""Opportunity schemas for posting, editing and discovery responses."""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from backend.app.schemas.choices import Category, GradeLevel, LocationType, OpportunityType


class OpportunityBase(BaseModel):
    opportunity_name: str
    brief_description: str
    category: Category
    opportunity_type: OpportunityType
    location_type: LocationType
    application_deadline: date
    application_url: str
    contact_info: str

    start_date: Optional[date] = None
    end_date: Optional[date] = None
    location_address: Optional[str] = None
    location_state: Optional[str] = None
    min_gpa: Optional[float] = Field(default=None, ge=0, le=5.0)
    min_age: Optional[int] = Field(default=None, ge=0, le=100)
    max_age: Optional[int] = Field(default=None, ge=0, le=100)
    grade_levels: Optional[list[GradeLevel]] = None
    requirements_other: Optional[str] = None
    cost: float = Field(default=0, ge=0)
    has_stipend: bool = False


class OpportunityCreate(OpportunityBase):
    """Schema for posting a new opportunity."""


class OpportunityUpdate(BaseModel):
    """Schema for owner edits with partial fields."""

    opportunity_name: Optional[str] = None
    brief_description: Optional[str] = None
    category: Optional[Category] = None
    opportunity_type: Optional[OpportunityType] = None
    location_type: Optional[LocationType] = None
    application_deadline: Optional[date] = None
    application_url: Optional[str] = None
    contact_info: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    location_address: Optional[str] = None
    location_state: Optional[str] = None
    min_gpa: Optional[float] = Field(default=None, ge=0, le=5.0)
    min_age: Optional[int] = Field(default=None, ge=0, le=100)
    max_age: Optional[int] = Field(default=None, ge=0, le=100)
    grade_levels: Optional[list[GradeLevel]] = None
    requirements_other: Optional[str] = None
    cost: Optional[float] = Field(default=None, ge=0)
    has_stipend: Optional[bool] = None


class OpportunityRead(BaseModel):
    id: int
    organization_id: Optional[int] = None
    opportunity_name: str
    brief_description: str
    category: str
    opportunity_type: str
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    location_type: str
    location_address: Optional[str] = None
    location_state: Optional[str] = None
    min_gpa: Optional[float] = None
    min_age: Optional[int] = None
    max_age: Optional[int] = None
    grade_levels: Optional[list[str]] = None
    requirements_other: Optional[str] = None
    cost: float = 0
    has_stipend: bool = False
    application_deadline: Optional[date] = None
    application_url: Optional[str] = None
    contact_info: Optional[str] = None
    is_active: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class OpportunityCreated(BaseModel):
    message: str
    opportunity_id: int
    opportunity_name: str
    is_active: bool
    created_at: datetime


class OpportunityDeleted(BaseModel):
    message: str
    deleted_by: str


class OpportunityListResponse(BaseModel):
    opportunities: list[OpportunityRead]
    count: int


class CategoriesResponse(BaseModel):
    categories: list[str]

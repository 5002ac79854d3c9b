"""Response shapes for the student feed, explore and detail card endpoints."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class OpportunitySummary(BaseModel):
    id: int
    opportunity_name: str
    brief_description: str
    category: str
    opportunity_type: str
    application_deadline: Optional[date] = None
    organization_id: Optional[int] = None
    org_name: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class FeedPreferences(BaseModel):
    categories: list[str]
    preference_types: list[str]


class ExploreResponse(BaseModel):
    data: list[OpportunitySummary]
    page: int
    page_size: int = Field(alias="pageSize")
    has_more: bool = Field(alias="hasMore")

    model_config = ConfigDict(populate_by_name=True)


class StudentFeedResponse(ExploreResponse):
    preferences: FeedPreferences


class OpportunityCardDetail(BaseModel):
    id: int
    min_age: Optional[int] = None
    max_age: Optional[int] = None
    min_gpa: Optional[float] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    requirements_other: Optional[str] = None
    grade_levels: Optional[list[str]] = None
    location_type: str
    location_address: Optional[str] = None
    location_state: Optional[str] = None
    cost: float = 0
    has_stipend: bool = False
    application_url: Optional[str] = None
    contact_info: Optional[str] = None
    is_active: bool

    model_config = ConfigDict(from_attributes=True)


class OpportunityCardResponse(BaseModel):
    data: OpportunityCardDetail

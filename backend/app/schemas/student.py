"""Student schemas for onboarding, profile edits and saved interests."""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from backend.app.schemas.choices import Category, GradeLevel, PreferenceType


class StudentProfileBase(BaseModel):
    first_name: str
    last_name: str
    date_of_birth: date
    school: str
    grade_level: GradeLevel
    gpa: Optional[float] = Field(default=None, ge=0, le=5.0)


class StudentProfileCreate(StudentProfileBase):
    age_verified: bool


class StudentProfileUpdate(BaseModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    school: Optional[str] = None
    grade_level: Optional[GradeLevel] = None
    gpa: Optional[float] = Field(default=None, ge=0, le=5.0)


class StudentProfileRead(StudentProfileBase):
    id: int
    age_verified: bool
    onboarding_completed: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class InterestIn(BaseModel):
    category: Category
    is_priority: bool = False


class OpportunityPreferenceIn(BaseModel):
    preference_type: PreferenceType
    other_description: Optional[str] = None


class StudentInterestsUpdate(BaseModel):
    interests: list[InterestIn]
    opportunity_preferences: list[OpportunityPreferenceIn]


class InterestRead(BaseModel):
    id: int
    category: str
    is_priority: bool

    model_config = ConfigDict(from_attributes=True)


class OpportunityPreferenceRead(BaseModel):
    id: int
    preference_type: str
    other_description: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class StudentInterestsRead(BaseModel):
    interests: list[InterestRead]
    opportunity_preferences: list[OpportunityPreferenceRead]
    onboarding_completed: bool

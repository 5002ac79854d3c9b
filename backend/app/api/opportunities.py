"""Opportunity endpoints.

Endpoints:
- GET    /opportunities/student-feed      personalized feed for the calling student
- GET    /opportunities/student-explore   search / category browsing for any signed-in user
- GET    /opportunities/opportunity-card  extended detail for one opportunity
- GET    /opportunities/categories        categories currently in use
- GET    /opportunities/mine              the calling organization's postings
- GET    /opportunities                   filterable listing of open opportunities
- POST   /opportunities                   post a new opportunity (approved organizations)
- PUT    /opportunities/{id}              owner edit
- DELETE /opportunities/{id}              soft delete by owner or admin
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from backend.app.core.errors import ValidationFailed
from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_org_user, get_current_student, get_current_user
from backend.app.models.user import User
from backend.app.schemas.choices import Category, CostFilter, LocationType, OpportunityType
from backend.app.schemas.discovery import ExploreResponse, OpportunityCardResponse, StudentFeedResponse
from backend.app.schemas.opportunity import (
    CategoriesResponse,
    OpportunityCreate,
    OpportunityCreated,
    OpportunityDeleted,
    OpportunityListResponse,
    OpportunityRead,
    OpportunityUpdate,
)
from backend.app.services import opportunity_discovery, opportunity_service
from backend.app.services.opportunity_filters import ListingFilters

router = APIRouter(prefix="/opportunities", tags=["opportunities"])


# ── Discovery ────────────────────────────────────────────────────────

@router.get("/student-feed", response_model=StudentFeedResponse)
def student_feed(
    page: Optional[int] = Query(None),
    page_size: Optional[int] = Query(None, alias="pageSize"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_student),
):
    """Opportunities matching the caller's own saved interests; never another student's."""
    return opportunity_discovery.student_feed(db, student_id=current_user.id, page=page, page_size=page_size)


@router.get("/student-explore", response_model=ExploreResponse)
def student_explore(
    page: Optional[int] = Query(None),
    page_size: Optional[int] = Query(None, alias="pageSize"),
    search: Optional[str] = None,
    category: Optional[str] = None,
    location: Optional[str] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return opportunity_discovery.student_explore(
        db,
        page=page,
        page_size=page_size,
        search=search,
        category=category,
        location=location,
    )


@router.get("/opportunity-card", response_model=OpportunityCardResponse)
def opportunity_card(
    id: Optional[int] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    if id is None:
        raise ValidationFailed("Missing id", ["id"])
    return OpportunityCardResponse(data=opportunity_discovery.opportunity_card(db, id))


@router.get("/categories", response_model=CategoriesResponse)
def list_categories(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return CategoriesResponse(categories=opportunity_service.list_categories(db))


# ── Listing ──────────────────────────────────────────────────────────

@router.get("/mine", response_model=list[OpportunityRead])
def list_my_opportunities(db: Session = Depends(get_db), current_user: User = Depends(get_current_org_user)):
    return opportunity_service.list_for_owner(db, current_user)


@router.get("", response_model=OpportunityListResponse)
def list_opportunities(
    category: Optional[Category] = None,
    type: Optional[OpportunityType] = None,
    location_type: Optional[LocationType] = None,
    state: Optional[str] = None,
    cost: Optional[CostFilter] = None,
    search: Optional[str] = None,
    location: Optional[str] = None,
    has_link: bool = False,
    has_contact: bool = False,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    filters = ListingFilters(
        category=category,
        opportunity_type=type,
        location_type=location_type,
        state=state,
        cost=cost,
        search=search,
        location=location,
        has_link=has_link,
        has_contact=has_contact,
    )
    opportunities = opportunity_service.list_opportunities(db, filters)
    return OpportunityListResponse(opportunities=opportunities, count=len(opportunities))


# ── Management ───────────────────────────────────────────────────────

@router.post("", response_model=OpportunityCreated, status_code=status.HTTP_201_CREATED)
def create_opportunity(
    opportunity_in: OpportunityCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_org_user),
):
    opportunity = opportunity_service.create_opportunity(db, current_user, opportunity_in)
    return OpportunityCreated(
        message="Opportunity posted successfully! Students can now discover and apply.",
        opportunity_id=opportunity.id,
        opportunity_name=opportunity.opportunity_name,
        is_active=opportunity.is_active,
        created_at=opportunity.created_at,
    )


@router.put("/{opportunity_id}", response_model=OpportunityRead)
def update_opportunity(
    opportunity_id: int,
    opportunity_in: OpportunityUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_org_user),
):
    return opportunity_service.update_opportunity(db, current_user, opportunity_id, opportunity_in)


@router.delete("/{opportunity_id}", response_model=OpportunityDeleted)
def delete_opportunity(
    opportunity_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    deleted_by = opportunity_service.soft_delete_opportunity(db, current_user, opportunity_id)
    return OpportunityDeleted(message="Opportunity deleted successfully", deleted_by=deleted_by)

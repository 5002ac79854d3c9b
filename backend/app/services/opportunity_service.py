"""Posting, editing, soft-deleting and listing opportunities."""

from datetime import date
from typing import Optional

import structlog
from sqlalchemy.orm import Session

from backend.app.core.errors import NotFound, PermissionDenied, ValidationFailed
from backend.app.core.time import utc_now, utc_today
from backend.app.models.opportunity import Opportunity
from backend.app.models.organization import Organization
from backend.app.models.user import User
from backend.app.schemas.opportunity import OpportunityCreate, OpportunityUpdate
from backend.app.services.opportunity_filters import (
    ListingFilters,
    active_clause,
    canonical_order,
    drop_expired,
    listing_clauses,
)
from backend.app.services.opportunity_validation import check_opportunity_rules, normalize_opportunity_values

logger = structlog.get_logger(__name__)

# Columns an edit may change but never clear
NON_NULLABLE_FIELDS = (
    "opportunity_name",
    "brief_description",
    "category",
    "opportunity_type",
    "location_type",
    "application_deadline",
    "application_url",
    "contact_info",
    "cost",
    "has_stipend",
)


def get_posting_organization(db: Session, user: User) -> Organization:
    organization = db.query(Organization).filter(Organization.user_id == user.id).first()
    if organization is None:
        raise PermissionDenied("No organization found for this account.")
    if not organization.approved:
        raise PermissionDenied("Your organization must be approved before posting opportunities.")
    return organization


def _get_opportunity(db: Session, opportunity_id: int) -> Opportunity:
    opportunity = db.query(Opportunity).filter(Opportunity.id == opportunity_id).first()
    if opportunity is None:
        raise NotFound("Opportunity not found")
    return opportunity


def create_opportunity(db: Session, user: User, payload: OpportunityCreate, today: Optional[date] = None) -> Opportunity:
    organization = get_posting_organization(db, user)
    values = payload.model_dump()
    check_opportunity_rules(values, today or utc_today())
    values = normalize_opportunity_values(values)

    opportunity = Opportunity(
        organization_id=organization.id,
        created_by=user.id,
        is_active=True,
        **values,
    )
    db.add(opportunity)
    db.commit()
    db.refresh(opportunity)
    logger.info(
        "opportunity_created",
        opportunity_id=opportunity.id,
        organization_id=organization.id,
        category=opportunity.category,
        opportunity_type=opportunity.opportunity_type,
    )
    return opportunity


def update_opportunity(
    db: Session,
    user: User,
    opportunity_id: int,
    payload: OpportunityUpdate,
    today: Optional[date] = None,
) -> Opportunity:
    opportunity = _get_opportunity(db, opportunity_id)
    if opportunity.created_by != user.id:
        raise PermissionDenied("You don't have permission to edit this opportunity")

    changes = payload.model_dump(exclude_unset=True)
    cleared = [name for name in NON_NULLABLE_FIELDS if name in changes and changes[name] is None]
    if cleared:
        raise ValidationFailed(f"Fields cannot be null: {', '.join(cleared)}", cleared)
    merged = {column: getattr(opportunity, column) for column in OpportunityCreate.model_fields}
    merged.update(changes)
    changed_dates = {name for name in ("application_deadline", "start_date") if name in changes}
    check_opportunity_rules(merged, today or utc_today(), check_dates=changed_dates)

    for field, value in normalize_opportunity_values(changes).items():
        setattr(opportunity, field, value)
    db.commit()
    db.refresh(opportunity)
    logger.info("opportunity_updated", opportunity_id=opportunity.id, fields=sorted(changes))
    return opportunity


def soft_delete_opportunity(db: Session, user: User, opportunity_id: int) -> str:
    """Deactivate instead of deleting; returns who performed it."""
    opportunity = _get_opportunity(db, opportunity_id)
    if not user.is_admin and opportunity.created_by != user.id:
        raise PermissionDenied("You don't have permission to delete this opportunity")

    opportunity.is_active = False
    opportunity.deleted_by = user.id
    opportunity.deleted_at = utc_now()
    db.commit()
    deleted_by = "admin" if user.is_admin else "organization"
    logger.info("opportunity_deleted", opportunity_id=opportunity_id, deleted_by=deleted_by)
    return deleted_by


def list_opportunities(db: Session, filters: ListingFilters, today: Optional[date] = None) -> list[Opportunity]:
    """Unpaginated listing; the deadline clamp runs on the fetched rows."""
    rows = (
        db.query(Opportunity)
        .filter(active_clause(), *listing_clauses(filters))
        .order_by(*canonical_order())
        .all()
    )
    return drop_expired(rows, today or utc_today())


def list_for_owner(db: Session, user: User) -> list[Opportunity]:
    return (
        db.query(Opportunity)
        .filter(Opportunity.created_by == user.id)
        .order_by(Opportunity.created_at.desc(), Opportunity.id.desc())
        .all()
    )


def list_categories(db: Session) -> list[str]:
    rows = db.query(Opportunity.category).filter(Opportunity.category.is_not(None)).distinct().all()
    categories = {(row[0] or "").strip() for row in rows}
    return sorted(category for category in categories if category)

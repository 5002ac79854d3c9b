"""Admin review of organization applications."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_admin
from backend.app.models.user import User
from backend.app.schemas.organization import (
    AdminOrganizationDecision,
    AdminOrganizationDecisionResult,
    AdminOrganizationList,
)
from backend.app.services.organization_service import decide_organization, list_for_review

router = APIRouter(prefix="/admin/organizations", tags=["admin"])


@router.get("", response_model=AdminOrganizationList)
def list_organizations(db: Session = Depends(get_db), current_admin: User = Depends(get_current_admin)):
    return list_for_review(db)


@router.patch("/{organization_id}", response_model=AdminOrganizationDecisionResult)
def review_organization(
    organization_id: int,
    decision: AdminOrganizationDecision,
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin),
):
    organization = decide_organization(db, organization_id, decision.approved)
    verb = "approved" if decision.approved else "unapproved"
    return AdminOrganizationDecisionResult(message=f"Organization {verb} successfully", organization=organization)

"""Organization registration, status reporting and admin review."""

import structlog
from sqlalchemy.orm import Session

from backend.app.core.errors import Conflict, NotFound, ValidationFailed, missing_fields_error
from backend.app.models.organization import Organization
from backend.app.models.user import User
from backend.app.schemas.choices import US_STATES
from backend.app.schemas.organization import OrganizationCreate, OrganizationStatusRead

logger = structlog.get_logger(__name__)

REQUIRED_FIELDS = (
    "org_name",
    "org_type",
    "contact_person_name",
    "contact_email",
    "contact_phone",
    "city",
    "state",
    "description",
    "services_offered",
    "business_id",
)

STATUS_MESSAGES = {
    "approved": "Your organization is approved and active",
    "email_verified": "Email verified. Your application is under review by admins.",
    "pending": "Please verify your email to continue",
    "rejected": "Your application was not approved",
}

APPROVABLE_STATUSES = {"email_verified", "approved"}


def register_organization(db: Session, user: User, payload: OrganizationCreate) -> Organization:
    if db.query(Organization).filter(Organization.user_id == user.id).first():
        raise Conflict("An organization is already registered for this account")

    values = payload.model_dump()
    missing = [name for name in REQUIRED_FIELDS if not str(values.get(name) or "").strip()]
    if missing:
        raise missing_fields_error(missing)
    if not values["grades_served"]:
        raise ValidationFailed("Please select at least one grade level served", ["grades_served"])
    if len(values["business_id"].strip()) < 3:
        raise ValidationFailed("Business ID must be at least 3 characters long", ["business_id"])
    state = values["state"].strip().upper()
    if state not in US_STATES:
        raise ValidationFailed(f"Invalid US state code: {values['state']}", ["state"])

    organization = Organization(
        user_id=user.id,
        org_name=values["org_name"].strip(),
        org_type=values["org_type"].strip(),
        business_id=values["business_id"].strip(),
        description=values["description"].strip(),
        services_offered=values["services_offered"].strip(),
        contact_person_name=values["contact_person_name"].strip(),
        contact_email=values["contact_email"],
        contact_phone=values["contact_phone"].strip(),
        website_url=(values.get("website_url") or "").strip() or None,
        city=values["city"].strip(),
        state=state,
        grades_served=values["grades_served"],
        status="pending",
    )
    db.add(organization)
    db.commit()
    db.refresh(organization)
    logger.info("organization_registered", organization_id=organization.id, user_id=user.id)
    return organization


def get_organization_for_user(db: Session, user_id: int) -> Organization | None:
    return db.query(Organization).filter(Organization.user_id == user_id).first()


def organization_status(db: Session, user: User) -> OrganizationStatusRead:
    organization = get_organization_for_user(db, user.id)
    if organization is None:
        raise NotFound("No organization found for this user")
    return OrganizationStatusRead(
        id=organization.id,
        org_name=organization.org_name,
        status=organization.status,
        approved=organization.approved,
        created_at=organization.created_at,
        status_message=STATUS_MESSAGES.get(organization.status, ""),
    )


def mark_email_verified(db: Session, user: User, email: str) -> Organization | None:
    """Advance a pending organization once its own contact or account email is confirmed."""
    organization = get_organization_for_user(db, user.id)
    if organization is None or organization.status != "pending":
        return organization
    owned = {organization.contact_email.strip().lower(), user.email.strip().lower()}
    if email.strip().lower() not in owned:
        logger.info("organization_email_unrelated", organization_id=organization.id)
        return organization
    organization.status = "email_verified"
    db.commit()
    db.refresh(organization)
    logger.info("organization_email_verified", organization_id=organization.id)
    return organization


def list_for_review(db: Session) -> dict:
    organizations = db.query(Organization).order_by(Organization.created_at.desc(), Organization.id.desc()).all()
    return {
        "pending": [org for org in organizations if not org.approved],
        "approved": [org for org in organizations if org.approved],
        "total": len(organizations),
    }


def decide_organization(db: Session, organization_id: int, approved: bool) -> Organization:
    organization = db.query(Organization).filter(Organization.id == organization_id).first()
    if organization is None:
        raise NotFound("Organization not found")
    if approved and organization.status not in APPROVABLE_STATUSES:
        raise ValidationFailed(
            "Cannot approve organization: Email not yet verified. "
            "Please ensure the organization has verified their email before approving.",
            ["approved"],
        )
    organization.status = "approved" if approved else "rejected"
    db.commit()
    db.refresh(organization)
    logger.info("organization_reviewed", organization_id=organization.id, status=organization.status)
    return organization

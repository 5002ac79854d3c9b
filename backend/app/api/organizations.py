"""Organization registration and status endpoints."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_org_user
from backend.app.models.user import User
from backend.app.schemas.organization import OrganizationCreate, OrganizationRead, OrganizationStatusRead
from backend.app.services.organization_service import organization_status, register_organization

router = APIRouter(prefix="/organizations", tags=["organizations"])


@router.post("", response_model=OrganizationRead, status_code=status.HTTP_201_CREATED)
def register(
    organization_in: OrganizationCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_org_user),
):
    return register_organization(db, current_user, organization_in)


@router.get("/me/status", response_model=OrganizationStatusRead)
def my_status(db: Session = Depends(get_db), current_user: User = Depends(get_current_org_user)):
    return organization_status(db, current_user)

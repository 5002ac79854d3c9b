"""Authentication dependencies for retrieving the current user and gating roles."""

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from backend.app.core.errors import AuthenticationRequired, PermissionDenied
from backend.app.core.security import decode_access_token
from backend.app.db.session import get_db
from backend.app.models.user import User


def get_current_user(db: Session = Depends(get_db), authorization: str | None = Header(default=None)) -> User:
    # Expect Authorization: Bearer <token>
    if not authorization or not authorization.startswith("Bearer "):
        raise AuthenticationRequired()
    token = authorization.split(" ", 1)[1]
    try:
        payload = decode_access_token(token)
    except ValueError:
        raise AuthenticationRequired()

    user_id = payload.get("sub")
    try:
        user_id_int = int(user_id)
    except (TypeError, ValueError):
        raise AuthenticationRequired()

    user = db.query(User).filter(User.id == user_id_int).first()
    if not user or not user.is_active:
        raise AuthenticationRequired()
    return user


def get_current_student(current_user: User = Depends(get_current_user)) -> User:
    if current_user.role != "student":
        raise PermissionDenied("Student access required")
    return current_user


def get_current_org_user(current_user: User = Depends(get_current_user)) -> User:
    if current_user.role != "org":
        raise PermissionDenied("Organization access required")
    return current_user


def get_current_admin(current_user: User = Depends(get_current_user)) -> User:
    if not current_user.is_admin:
        raise PermissionDenied("Admin access required")
    return current_user

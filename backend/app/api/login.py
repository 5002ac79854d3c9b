"""Login endpoint issuing bearer tokens."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from backend.app.core.errors import ValidationFailed
from backend.app.core.security import create_access_token, verify_password
from backend.app.core.time import utc_now
from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_user
from backend.app.models.user import User
from backend.app.schemas.user import LoginRequest, TokenResponse, UserRead

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=TokenResponse)
def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    user = db.query(User).filter(User.email == credentials.email).first()
    if not user or not user.hashed_password:
        raise ValidationFailed("Invalid credentials")
    if not user.is_active:
        raise ValidationFailed("User is inactive")
    if not verify_password(credentials.password, user.hashed_password):
        raise ValidationFailed("Invalid credentials")

    user.last_login = utc_now()
    db.commit()
    token = create_access_token(user_id=user.id, role=user.role)
    return TokenResponse(access_token=token)


@router.get("/me", response_model=UserRead)
def read_me(current_user: User = Depends(get_current_user)):
    return current_user

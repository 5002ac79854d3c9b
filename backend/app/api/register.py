"""Handles account registration for students and organizations."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from backend.app.core.errors import ValidationFailed
from backend.app.core.security import get_password_hash
from backend.app.db.session import get_db
from backend.app.models.user import User
from backend.app.schemas.user import UserCreate, UserRead

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register_user(user_in: UserCreate, db: Session = Depends(get_db)):
    existing = db.query(User).filter(User.email == user_in.email).first()
    if existing:
        raise ValidationFailed("Email already registered", ["email"])
    if not user_in.password:
        raise ValidationFailed("Password is required", ["password"])
    hashed_password = get_password_hash(user_in.password)  # Hash password before storing
    user = User(email=user_in.email, hashed_password=hashed_password, role=user_in.role)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user

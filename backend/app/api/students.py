"""Student profile and interest endpoints for Berry."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_student
from backend.app.models.user import User
from backend.app.schemas.student import (
    StudentInterestsRead,
    StudentInterestsUpdate,
    StudentProfileCreate,
    StudentProfileRead,
    StudentProfileUpdate,
)
from backend.app.services import student_service

router = APIRouter(prefix="/students", tags=["students"])


@router.post("/profile", response_model=StudentProfileRead, status_code=status.HTTP_201_CREATED)
def create_profile(
    profile_in: StudentProfileCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_student),
):
    return student_service.create_profile(db, current_user, profile_in)


@router.get("/profile", response_model=StudentProfileRead)
def get_profile(db: Session = Depends(get_db), current_user: User = Depends(get_current_student)):
    return student_service.get_profile(db, current_user.id)


@router.put("/profile", response_model=StudentProfileRead)
def update_profile(
    profile_in: StudentProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_student),
):
    return student_service.update_profile(db, current_user, profile_in)


@router.put("/interests", response_model=StudentInterestsRead)
def save_interests(
    interests_in: StudentInterestsUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_student),
):
    student_service.save_interests(db, current_user, interests_in)
    return student_service.get_interests(db, current_user)


@router.get("/interests", response_model=StudentInterestsRead)
def get_interests(db: Session = Depends(get_db), current_user: User = Depends(get_current_student)):
    return student_service.get_interests(db, current_user)

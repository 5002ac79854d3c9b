"""Student onboarding: profile and saved interests."""

import structlog
from sqlalchemy.orm import Session

from backend.app.core.errors import Conflict, NotFound, ValidationFailed, missing_fields_error
from backend.app.models.student import Student
from backend.app.models.student_interest import StudentInterest
from backend.app.models.student_preference import StudentOpportunityPreference
from backend.app.models.user import User
from backend.app.schemas.student import StudentInterestsUpdate, StudentProfileCreate, StudentProfileUpdate

logger = structlog.get_logger(__name__)

MIN_INTERESTS = 5
MAX_INTERESTS = 7
MIN_PRIORITY = 3
MAX_PRIORITY = 5


def get_profile(db: Session, student_id: int) -> Student:
    student = db.query(Student).filter(Student.id == student_id).first()
    if not student:
        raise NotFound("Student profile not found. Please complete your profile first.")
    return student


def create_profile(db: Session, user: User, payload: StudentProfileCreate) -> Student:
    if not payload.age_verified:
        raise ValidationFailed("You must be at least 13 years old to use this platform", ["age_verified"])
    blank = [name for name in ("first_name", "last_name", "school") if not getattr(payload, name).strip()]
    if blank:
        raise missing_fields_error(blank)
    if db.query(Student).filter(Student.id == user.id).first():
        raise Conflict("Student profile already exists")

    student = Student(
        id=user.id,
        first_name=payload.first_name.strip(),
        last_name=payload.last_name.strip(),
        date_of_birth=payload.date_of_birth,
        school=payload.school.strip(),
        grade_level=payload.grade_level,
        gpa=payload.gpa,
        age_verified=payload.age_verified,
        onboarding_completed=False,
    )
    db.add(student)
    db.commit()
    db.refresh(student)
    logger.info("student_profile_created", student_id=student.id, grade_level=student.grade_level)
    return student


def update_profile(db: Session, user: User, payload: StudentProfileUpdate) -> Student:
    student = get_profile(db, user.id)
    update_fields = {
        "first_name": payload.first_name,
        "last_name": payload.last_name,
        "school": payload.school,
        "grade_level": payload.grade_level,
        "gpa": payload.gpa,
    }
    for field, value in update_fields.items():
        if value is not None:
            setattr(student, field, value)
    db.commit()
    db.refresh(student)
    return student


def _check_interests(payload: StudentInterestsUpdate) -> None:
    categories = [interest.category for interest in payload.interests]
    if len(set(categories)) != len(categories):
        raise ValidationFailed("Each interest category may only be selected once", ["interests"])
    if not MIN_INTERESTS <= len(categories) <= MAX_INTERESTS:
        raise ValidationFailed(
            f"Please select between {MIN_INTERESTS}-{MAX_INTERESTS} interest categories", ["interests"]
        )
    priority = sum(1 for interest in payload.interests if interest.is_priority)
    if not MIN_PRIORITY <= priority <= MAX_PRIORITY:
        raise ValidationFailed(
            f"Please select between {MIN_PRIORITY}-{MAX_PRIORITY} priority interests", ["interests"]
        )
    if not payload.opportunity_preferences:
        raise ValidationFailed("Please select at least one opportunity type", ["opportunity_preferences"])
    types = [pref.preference_type for pref in payload.opportunity_preferences]
    if len(set(types)) != len(types):
        raise ValidationFailed("Each opportunity type may only be selected once", ["opportunity_preferences"])


def save_interests(db: Session, user: User, payload: StudentInterestsUpdate) -> Student:
    """Replace the student's interests and preferences wholesale."""
    _check_interests(payload)
    student = get_profile(db, user.id)

    db.query(StudentInterest).filter(StudentInterest.student_id == student.id).delete()
    db.query(StudentOpportunityPreference).filter(StudentOpportunityPreference.student_id == student.id).delete()
    for interest in payload.interests:
        db.add(StudentInterest(student_id=student.id, category=interest.category, is_priority=interest.is_priority))
    for pref in payload.opportunity_preferences:
        description = (pref.other_description or "").strip() or None
        db.add(
            StudentOpportunityPreference(
                student_id=student.id,
                preference_type=pref.preference_type,
                other_description=description if pref.preference_type == "other" else None,
            )
        )
    student.onboarding_completed = True
    db.commit()
    db.refresh(student)
    logger.info(
        "student_interests_saved",
        student_id=student.id,
        interests=len(payload.interests),
        preferences=len(payload.opportunity_preferences),
    )
    return student


def get_interests(db: Session, user: User) -> dict:
    student = get_profile(db, user.id)
    interests = (
        db.query(StudentInterest)
        .filter(StudentInterest.student_id == student.id)
        .order_by(StudentInterest.id.asc())
        .all()
    )
    preferences = (
        db.query(StudentOpportunityPreference)
        .filter(StudentOpportunityPreference.student_id == student.id)
        .order_by(StudentOpportunityPreference.id.asc())
        .all()
    )
    return {
        "interests": interests,
        "opportunity_preferences": preferences,
        "onboarding_completed": student.onboarding_completed,
    }

"""Load a student's saved interest categories and opportunity-type preferences."""

from dataclasses import dataclass, field

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from backend.app.core.errors import UpstreamQueryFailure
from backend.app.models.student_interest import StudentInterest
from backend.app.models.student_preference import StudentOpportunityPreference

logger = structlog.get_logger(__name__)


@dataclass
class StudentPreferences:
    categories: list[str] = field(default_factory=list)
    preference_types: list[str] = field(default_factory=list)


def _distinct(values) -> list[str]:
    seen: list[str] = []
    for value in values:
        if value and value not in seen:
            seen.append(value)
    return seen


def load_preferences(db: Session, student_id: int) -> StudentPreferences:
    try:
        categories = (
            db.query(StudentInterest.category)
            .filter(StudentInterest.student_id == student_id)
            .order_by(StudentInterest.id.asc())
            .all()
        )
        preference_types = (
            db.query(StudentOpportunityPreference.preference_type)
            .filter(StudentOpportunityPreference.student_id == student_id)
            .order_by(StudentOpportunityPreference.id.asc())
            .all()
        )
    except SQLAlchemyError as exc:
        logger.error("preferences_query_failed", student_id=student_id, error=str(exc))
        raise UpstreamQueryFailure("Failed to load preferences") from exc

    return StudentPreferences(
        categories=_distinct(row[0] for row in categories),
        preference_types=_distinct(row[0] for row in preference_types),
    )

"""Student-facing opportunity discovery: the personalized feed, explore and detail card.

Each call is a stateless computation against the database. Filters are
ANDed, expired deadlines are clamped before pagination, and organization
names are attached with one batch lookup per page.
"""

from datetime import date
from typing import Optional

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from backend.app.core.errors import NotFound, UpstreamQueryFailure
from backend.app.core.time import utc_today
from backend.app.models.opportunity import Opportunity
from backend.app.schemas.discovery import (
    ExploreResponse,
    FeedPreferences,
    OpportunityCardDetail,
    StudentFeedResponse,
)
from backend.app.services.opportunity_filters import (
    active_clause,
    canonical_order,
    deadline_open_clause,
    explore_clauses,
    feed_clauses,
)
from backend.app.services.org_names import attach_org_names
from backend.app.services.pagination import EXPLORE_LIMITS, FEED_LIMITS, PageWindow, apply_window, page_window
from backend.app.services.preference_loader import load_preferences

logger = structlog.get_logger(__name__)


def _fetch_page(db: Session, clauses: list, window: PageWindow, today: date):
    try:
        query = (
            db.query(Opportunity)
            .filter(active_clause(), deadline_open_clause(today), *clauses)
            .order_by(*canonical_order())
        )
        rows = apply_window(query, window).all()
        return attach_org_names(db, rows)
    except SQLAlchemyError as exc:
        logger.error("opportunities_query_failed", page=window.page, page_size=window.page_size, error=str(exc))
        raise UpstreamQueryFailure("Failed to load opportunities") from exc


def student_feed(
    db: Session,
    *,
    student_id: int,
    page: Optional[int] = None,
    page_size: Optional[int] = None,
    today: Optional[date] = None,
) -> StudentFeedResponse:
    today = today or utc_today()
    preferences = load_preferences(db, student_id)
    window = page_window(page, page_size, FEED_LIMITS)
    data = _fetch_page(db, feed_clauses(preferences.categories, preferences.preference_types), window, today)
    logger.info("student_feed_served", student_id=student_id, returned=len(data), page=window.page)
    return StudentFeedResponse(
        data=data,
        preferences=FeedPreferences(
            categories=preferences.categories,
            preference_types=preferences.preference_types,
        ),
        page=window.page,
        page_size=window.page_size,
        has_more=window.has_more(len(data)),
    )


def student_explore(
    db: Session,
    *,
    page: Optional[int] = None,
    page_size: Optional[int] = None,
    search: Optional[str] = None,
    category: Optional[str] = None,
    location: Optional[str] = None,
    today: Optional[date] = None,
) -> ExploreResponse:
    today = today or utc_today()
    window = page_window(page, page_size, EXPLORE_LIMITS)
    data = _fetch_page(db, explore_clauses(category=category, search=search, location=location), window, today)
    logger.info("student_explore_served", returned=len(data), page=window.page, page_size=window.page_size)
    return ExploreResponse(
        data=data,
        page=window.page,
        page_size=window.page_size,
        has_more=window.has_more(len(data)),
    )


def opportunity_card(db: Session, opportunity_id: int) -> OpportunityCardDetail:
    """Extended detail for one opportunity, active or not."""
    try:
        opportunity = db.query(Opportunity).filter(Opportunity.id == opportunity_id).first()
    except SQLAlchemyError as exc:
        logger.error("opportunity_card_query_failed", opportunity_id=opportunity_id, error=str(exc))
        raise UpstreamQueryFailure("Failed to load opportunity") from exc
    if opportunity is None:
        raise NotFound("Opportunity not found")
    return OpportunityCardDetail.model_validate(opportunity)

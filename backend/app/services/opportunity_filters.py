"""Predicate builders for opportunity queries.

Every builder returns a list of SQLAlchemy clauses meant to be ANDed
together with ``query.filter(*clauses)``. An empty preference set means
"no restriction", never "match nothing".
"""

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from sqlalchemy import and_, or_

from backend.app.models.opportunity import Opportunity

LIKE_ESCAPE = "\\"


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so user input only ever matches literally."""
    return (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def contains_pattern(value: str) -> str:
    return f"%{escape_like(value)}%"


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def active_clause():
    return Opportunity.is_active.is_(True)


def deadline_open_clause(today: date):
    """SQL form of the deadline clamp: null deadlines stay, past ones go."""
    return or_(Opportunity.application_deadline.is_(None), Opportunity.application_deadline >= today)


def is_expired(deadline: Optional[date], today: date) -> bool:
    return deadline is not None and deadline < today


def drop_expired(opportunities: Iterable[Opportunity], today: date) -> list[Opportunity]:
    """In-memory form of the deadline clamp, identical to ``deadline_open_clause``."""
    return [opp for opp in opportunities if not is_expired(opp.application_deadline, today)]


def search_clause(search: str):
    pattern = contains_pattern(search)
    return or_(
        Opportunity.opportunity_name.ilike(pattern, escape=LIKE_ESCAPE),
        Opportunity.brief_description.ilike(pattern, escape=LIKE_ESCAPE),
    )


def location_clause(location: str):
    pattern = contains_pattern(location)
    return or_(
        Opportunity.location_address.ilike(pattern, escape=LIKE_ESCAPE),
        Opportunity.location_state.ilike(pattern, escape=LIKE_ESCAPE),
    )


def not_blank_clause(column):
    return and_(column.is_not(None), column != "")


def feed_clauses(categories: list[str], preference_types: list[str]) -> list:
    clauses = []
    if categories:
        clauses.append(Opportunity.category.in_(categories))
    if preference_types:
        clauses.append(Opportunity.opportunity_type.in_(preference_types))
    return clauses


def explore_clauses(
    category: Optional[str] = None,
    search: Optional[str] = None,
    location: Optional[str] = None,
) -> list:
    clauses = []
    category = _clean(category)
    search = _clean(search)
    location = _clean(location)
    if category:
        clauses.append(Opportunity.category == category)
    if search:
        clauses.append(search_clause(search))
    if location:
        clauses.append(location_clause(location))
    return clauses


@dataclass
class ListingFilters:
    category: Optional[str] = None
    opportunity_type: Optional[str] = None
    location_type: Optional[str] = None
    state: Optional[str] = None
    cost: Optional[str] = None
    search: Optional[str] = None
    location: Optional[str] = None
    has_link: bool = False
    has_contact: bool = False


def listing_clauses(filters: ListingFilters) -> list:
    clauses = explore_clauses(filters.category, filters.search, filters.location)
    if filters.opportunity_type:
        clauses.append(Opportunity.opportunity_type == filters.opportunity_type)
    if filters.location_type:
        clauses.append(Opportunity.location_type == filters.location_type)
    if filters.state:
        clauses.append(Opportunity.location_state == filters.state.upper())
    if filters.cost == "free":
        clauses.append(Opportunity.cost == 0)
    elif filters.cost == "paid":
        clauses.append(Opportunity.cost > 0)
    elif filters.cost == "stipend":
        clauses.append(Opportunity.has_stipend.is_(True))
    if filters.has_link:
        clauses.append(not_blank_clause(Opportunity.application_url))
    if filters.has_contact:
        clauses.append(not_blank_clause(Opportunity.contact_info))
    return clauses


def canonical_order():
    """Soonest deadline first; open-ended opportunities last."""
    return [Opportunity.application_deadline.asc().nulls_last(), Opportunity.id.asc()]

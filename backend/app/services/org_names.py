"""Resolve organization display names for a page of opportunities."""

from typing import Iterable

from sqlalchemy.orm import Session

from backend.app.models.opportunity import Opportunity
from backend.app.models.organization import Organization
from backend.app.schemas.discovery import OpportunitySummary


def lookup_org_names(db: Session, organization_ids: Iterable[int | None]) -> dict[int, str | None]:
    ids = sorted({org_id for org_id in organization_ids if org_id is not None})
    if not ids:
        return {}
    rows = db.query(Organization.id, Organization.org_name).filter(Organization.id.in_(ids)).all()
    return {org_id: name for org_id, name in rows}


def attach_org_names(db: Session, opportunities: list[Opportunity]) -> list[OpportunitySummary]:
    """One batch lookup per page; unknown organizations resolve to ``None``."""
    names = lookup_org_names(db, (opp.organization_id for opp in opportunities))
    summaries = []
    for opp in opportunities:
        summary = OpportunitySummary.model_validate(opp)
        summary.org_name = names.get(opp.organization_id) if opp.organization_id is not None else None
        summaries.append(summary)
    return summaries

"""Opportunity model for Berry."""

from sqlalchemy import JSON, Boolean, Column, Date, DateTime, ForeignKey, Integer, Numeric, String, Text

from backend.app.core.time import utc_now
from backend.app.db.base_class import Base


class Opportunity(Base):
    __tablename__ = "opportunities"

    id = Column(Integer, primary_key=True, index=True)
    # Not enforced as a foreign key: organization rows may disappear and the
    # name lookup degrades to null instead of failing.
    organization_id = Column(Integer, nullable=True, index=True)
    created_by = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    opportunity_name = Column(String(255), nullable=False)
    brief_description = Column(Text, nullable=False)
    category = Column(String(64), nullable=False, index=True)
    opportunity_type = Column(String(64), nullable=False, index=True)

    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)

    location_type = Column(String(20), nullable=False)
    location_address = Column(String(512), nullable=True)
    location_state = Column(String(2), nullable=True)

    min_gpa = Column(Numeric(3, 2), nullable=True)
    min_age = Column(Integer, nullable=True)
    max_age = Column(Integer, nullable=True)
    grade_levels = Column(JSON, nullable=True)
    requirements_other = Column(Text, nullable=True)

    cost = Column(Numeric(10, 2), nullable=False, default=0)
    has_stipend = Column(Boolean, nullable=False, default=False)

    application_deadline = Column(Date, nullable=True, index=True)
    application_url = Column(String(1024), nullable=True)
    contact_info = Column(String(512), nullable=True)

    is_active = Column(Boolean, nullable=False, default=True, index=True)
    deleted_by = Column(Integer, ForeignKey("users.id"), nullable=True)
    deleted_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)

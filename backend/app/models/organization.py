"""Organization model for Berry."""

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from backend.app.core.time import utc_now
from backend.app.db.base_class import Base


class Organization(Base):
    __tablename__ = "organizations"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, unique=True, index=True)
    org_name = Column(String(255), nullable=False)
    org_type = Column(String(100), nullable=False)
    business_id = Column(String(100), nullable=False)
    description = Column(Text, nullable=False)
    services_offered = Column(Text, nullable=True)
    contact_person_name = Column(String(255), nullable=False)
    contact_email = Column(String(255), nullable=False)
    contact_phone = Column(String(50), nullable=False)
    website_url = Column(String(512), nullable=True)
    city = Column(String(100), nullable=False)
    state = Column(String(2), nullable=False)
    grades_served = Column(JSON, nullable=True)
    # Single source of truth for approval: pending -> email_verified -> approved | rejected
    status = Column(String(20), nullable=False, default="pending", index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)

    user = relationship("User", back_populates="organization")

    @property
    def approved(self) -> bool:
        return self.status == "approved"

"""Student model for Berry."""

from sqlalchemy import Boolean, Column, Date, DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship

from backend.app.db.base_class import Base
from backend.app.core.time import utc_now


class Student(Base):
    __tablename__ = "students"

    # Shares its id with the authenticated user
    id = Column(Integer, ForeignKey("users.id"), primary_key=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    date_of_birth = Column(Date, nullable=False)
    school = Column(String(255), nullable=False)
    grade_level = Column(String(2), nullable=False)
    gpa = Column(Numeric(3, 2), nullable=True)
    age_verified = Column(Boolean, nullable=False, default=False)
    onboarding_completed = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, nullable=False, default=utc_now)
    updated_at = Column(DateTime, nullable=False, default=utc_now, onupdate=utc_now)

    user = relationship("User", back_populates="student")
    interests = relationship("StudentInterest", back_populates="student", cascade="all, delete-orphan")
    opportunity_preferences = relationship(
        "StudentOpportunityPreference", back_populates="student", cascade="all, delete-orphan"
    )

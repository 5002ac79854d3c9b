from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from backend.app.db.base_class import Base


class StudentOpportunityPreference(Base):
    __tablename__ = "student_opportunity_preferences"

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(Integer, ForeignKey("students.id"), nullable=False, index=True)
    preference_type = Column(String(64), nullable=False)
    other_description = Column(Text, nullable=True)

    student = relationship("Student", back_populates="opportunity_preferences")

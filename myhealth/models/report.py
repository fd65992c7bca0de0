"""Medical report model."""

from sqlalchemy import Column, Integer, String, Text, ForeignKey, Index
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin


class MedicalReport(Base, TimestampMixin):
    """Uploaded report metadata and the model's analysis of it."""

    __tablename__ = "medical_reports"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    filename = Column(String, nullable=False)
    analysis = Column(Text, nullable=False)

    # Relationships
    user = relationship("User", back_populates="medical_reports")

    __table_args__ = (Index("idx_medical_report_user_id", "user_id"),)

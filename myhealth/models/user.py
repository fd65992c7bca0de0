"""User model."""

from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin


class User(Base, TimestampMixin):
    """Registered account plus the editable health profile."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String, unique=True, nullable=False, index=True)
    password_hash = Column("password", String, nullable=False)  # bcrypt

    # Profile
    first_name = Column(String, nullable=True)
    last_name = Column(String, nullable=True)
    mobile = Column(String, nullable=True)
    blood_group = Column(String, nullable=True)
    personal_notes = Column(Text, nullable=True)

    # Relationships
    chat_sessions = relationship("ChatSession", back_populates="user")
    chat_history = relationship("ChatHistoryEntry", back_populates="user")
    medical_reports = relationship("MedicalReport", back_populates="user")

"""Declarative base and shared column mixins."""

from datetime import datetime

from sqlalchemy import Column, DateTime
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class TimestampMixin:
    """Adds a creation timestamp that defaults to insert time."""

    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

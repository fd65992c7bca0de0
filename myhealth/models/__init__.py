"""Database models."""

from .base import Base
from .user import User
from .chat import ChatSession, ChatHistoryEntry
from .report import MedicalReport

__all__ = [
    "Base",
    "User",
    "ChatSession",
    "ChatHistoryEntry",
    "MedicalReport",
]

"""Chat session and chat history models."""

from sqlalchemy import Column, Integer, String, Text, ForeignKey, Index
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin


class ChatSession(Base, TimestampMixin):
    """
    Titled conversation container owned by a user.

    Rows are write-once: there is no rename or delete path.
    """

    __tablename__ = "chat_sessions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    title = Column(String, nullable=False)

    # Relationships
    user = relationship("User", back_populates="chat_sessions")
    entries = relationship("ChatHistoryEntry", back_populates="session")

    __table_args__ = (Index("idx_chat_session_user_id", "user_id"),)


class ChatHistoryEntry(Base, TimestampMixin):
    """One message of a conversation. Append-only."""

    __tablename__ = "chat_history"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    session_id = Column(
        Integer, ForeignKey("chat_sessions.id"), nullable=True
    )  # NULL = orphaned entry
    role = Column(String, nullable=False)  # user, assistant
    content = Column(Text, nullable=False)

    # Relationships
    user = relationship("User", back_populates="chat_history")
    session = relationship("ChatSession", back_populates="entries")

    __table_args__ = (
        Index("idx_chat_history_user_id", "user_id"),
        Index("idx_chat_history_session_id", "session_id"),
    )

"""Chat session registry and the append-only chat history log."""

import logging
from typing import Optional, List
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from sqlalchemy import asc, desc

from ..models import ChatSession, ChatHistoryEntry
from ..core.exceptions import UnknownSessionError

logger = logging.getLogger(__name__)


class ChatSessionRegistry:
    """Titled, write-once conversation containers."""

    def __init__(self, db: Session):
        """Initialize with database session."""
        self.db = db

    def create(self, user_id: int, title: str) -> int:
        """Create a session and return its id."""
        session = ChatSession(user_id=user_id, title=title)
        self.db.add(session)
        self.db.commit()
        self.db.refresh(session)
        logger.debug(f"Created chat session {session.id} for user {user_id}")
        return session.id

    def list_for_user(self, user_id: int) -> List[ChatSession]:
        """All of a user's sessions, most recent first."""
        return (
            self.db.query(ChatSession)
            .filter(ChatSession.user_id == user_id)
            .order_by(desc(ChatSession.created_at), desc(ChatSession.id))
            .all()
        )


class ChatHistoryLog:
    """
    Append-only message log scoped to (user, session).

    Roles are validated at the request boundary; this class only inserts
    and reads.
    """

    def __init__(self, db: Session):
        """Initialize with database session."""
        self.db = db

    def append(
        self, user_id: int, session_id: Optional[int], role: str, content: str
    ) -> ChatHistoryEntry:
        """
        Insert one entry.

        Raises:
            UnknownSessionError: session_id does not reference a stored session
            IntegrityError: any other constraint failure, e.g. an unknown user
        """
        if session_id is not None and self.db.get(ChatSession, session_id) is None:
            raise UnknownSessionError(session_id)

        entry = ChatHistoryEntry(
            user_id=user_id, session_id=session_id, role=role, content=content
        )
        self.db.add(entry)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise
        self.db.refresh(entry)
        return entry

    def list_for_user(
        self, user_id: int, session_id: Optional[int] = None
    ) -> List[ChatHistoryEntry]:
        """
        Entries in creation order.

        Without a session id every entry of the user is returned as one
        merged timeline across sessions.
        """
        query = self.db.query(ChatHistoryEntry).filter(
            ChatHistoryEntry.user_id == user_id
        )
        if session_id is not None:
            query = query.filter(ChatHistoryEntry.session_id == session_id)
        return query.order_by(
            asc(ChatHistoryEntry.created_at), asc(ChatHistoryEntry.id)
        ).all()

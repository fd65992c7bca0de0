"""
Client-side state: who is signed in and what the current conversation holds.

Everything here is a disposable copy of what the backend stores; it can be
rebuilt at any time from the API.
"""

from enum import Enum
from typing import Any, Dict, List, Optional
from datetime import datetime
from pydantic import BaseModel, Field

from myhealth.schemas.chat import ChatRole


class AuthContext(BaseModel):
    """Bearer token plus the cached user it was issued for."""

    token: str
    user: Dict[str, Any] = Field(default_factory=dict)

    @property
    def user_id(self) -> Optional[int]:
        return self.user.get("id")


class ConversationPhase(str, Enum):
    NO_SESSION = "no_session"
    ACTIVE_SESSION = "active_session"


class Message(BaseModel):
    role: ChatRole
    content: str
    timestamp: datetime = Field(default_factory=datetime.utcnow)

    def as_turn(self) -> Dict[str, str]:
        return {"role": self.role, "content": self.content}


class ConversationState(BaseModel):
    """The open conversation: its session pointer and local message list."""

    session_id: Optional[int] = None
    messages: List[Message] = Field(default_factory=list)

    @property
    def phase(self) -> ConversationPhase:
        if self.session_id is None:
            return ConversationPhase.NO_SESSION
        return ConversationPhase.ACTIVE_SESSION

    def activate(self, session_id: int) -> None:
        self.session_id = session_id

    def append(self, role: str, content: str) -> Message:
        message = Message(role=role, content=content)
        self.messages.append(message)
        return message

    def load(self, session_id: int, messages: List[Message]) -> None:
        """Replace the view with a stored session."""
        self.session_id = session_id
        self.messages = list(messages)

    def reset(self) -> None:
        self.session_id = None
        self.messages = []


class ClientState(BaseModel):
    """Root state container handed to the controller."""

    auth: Optional[AuthContext] = None
    conversation: ConversationState = Field(default_factory=ConversationState)
    sessions: List[Dict[str, Any]] = Field(default_factory=list)

    @property
    def is_authenticated(self) -> bool:
        return self.auth is not None

"""
Chat session and history schemas.
"""

from typing import Optional, Literal
from datetime import datetime
from pydantic import BaseModel, Field

ChatRole = Literal["user", "assistant"]


class ChatSessionCreate(BaseModel):
    title: str = Field(..., min_length=1)


class ChatSessionCreated(BaseModel):
    id: int


class ChatSessionOut(BaseModel):
    id: int
    user_id: int
    title: str
    created_at: datetime

    class Config:
        from_attributes = True


class ChatHistoryCreate(BaseModel):
    """One message to append to the history log."""

    role: ChatRole
    content: str
    session_id: Optional[int] = Field(default=None, alias="sessionId")

    class Config:
        populate_by_name = True


class ChatHistoryOut(BaseModel):
    id: int
    user_id: int
    session_id: Optional[int] = None
    role: str
    content: str
    created_at: datetime

    class Config:
        from_attributes = True

"""
Chat session and chat history endpoints.

The model call itself happens in the client; these routes only persist and
replay what the client sends.
"""

import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from myhealth.core.database import get_db
from myhealth.core.dependencies import get_current_user
from myhealth.core.exceptions import UnknownSessionError
from myhealth.schemas.auth import TokenClaims
from myhealth.schemas.common import SuccessResponse
from myhealth.schemas.chat import (
    ChatSessionCreate,
    ChatSessionCreated,
    ChatSessionOut,
    ChatHistoryCreate,
    ChatHistoryOut,
)
from myhealth.services.chat_service import ChatSessionRegistry, ChatHistoryLog

logger = logging.getLogger(__name__)

router = APIRouter(tags=["chat"])


def _parse_session_id(value: Optional[str]) -> Optional[int]:
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        raise HTTPException(status_code=422, detail="sessionId must be an integer")


@router.get("/sessions", response_model=List[ChatSessionOut])
def list_sessions(
    current_user: TokenClaims = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Caller's sessions, newest first."""
    return ChatSessionRegistry(db).list_for_user(current_user.id)


@router.post("/sessions", response_model=ChatSessionCreated)
def create_session(
    request: ChatSessionCreate,
    current_user: TokenClaims = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Open a new conversation container."""
    session_id = ChatSessionRegistry(db).create(current_user.id, request.title)
    return ChatSessionCreated(id=session_id)


@router.get("/history", response_model=List[ChatHistoryOut])
def list_history(
    session_id: Optional[str] = Query(
        None,
        alias="sessionId",
        description="Limit to one session; omitted or empty returns every session merged",
    ),
    current_user: TokenClaims = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Caller's history in creation order."""
    return ChatHistoryLog(db).list_for_user(
        current_user.id, _parse_session_id(session_id)
    )


@router.post("/history", response_model=SuccessResponse)
def append_history(
    request: ChatHistoryCreate,
    current_user: TokenClaims = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Append one message to the caller's history."""
    try:
        ChatHistoryLog(db).append(
            current_user.id, request.session_id, request.role, request.content
        )
    except UnknownSessionError as e:
        logger.warning(f"History append for user {current_user.id} rejected: {e}")
        raise HTTPException(status_code=404, detail=str(e))
    return SuccessResponse()

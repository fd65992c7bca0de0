"""
Client package: state container, API wrapper, history outbox and the chat
controller that ties them to the assistant.
"""

from myhealth.client.api import ApiError, HealthChatAPI
from myhealth.client.outbox import HistoryOutbox, OutboxEntry, FlushResult
from myhealth.client.state import (
    AuthContext,
    ClientState,
    ConversationPhase,
    ConversationState,
    Message,
)
from myhealth.client.controller import ChatController

__all__ = [
    "ApiError",
    "HealthChatAPI",
    "HistoryOutbox",
    "OutboxEntry",
    "FlushResult",
    "AuthContext",
    "ClientState",
    "ConversationPhase",
    "ConversationState",
    "Message",
    "ChatController",
]

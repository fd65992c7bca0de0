"""
Services package initialization.
"""

from myhealth.services.credential_store import CredentialStore
from myhealth.services.token_service import TokenService
from myhealth.services.chat_service import ChatSessionRegistry, ChatHistoryLog
from myhealth.services.report_store import ReportRecordStore
from myhealth.services.assistant_service import AssistantService

__all__ = [
    "CredentialStore",
    "TokenService",
    "ChatSessionRegistry",
    "ChatHistoryLog",
    "ReportRecordStore",
    "AssistantService",
]

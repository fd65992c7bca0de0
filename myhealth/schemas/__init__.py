"""
Schemas package initialization.
"""

from myhealth.schemas.common import SuccessResponse, HealthCheck, ErrorResponse
from myhealth.schemas.auth import (
    RegisterRequest,
    RegisterResponse,
    LoginRequest,
    LoginResponse,
    UserSummary,
    TokenClaims,
)
from myhealth.schemas.profile import ProfileResponse, ProfileUpdate
from myhealth.schemas.chat import (
    ChatRole,
    ChatSessionCreate,
    ChatSessionCreated,
    ChatSessionOut,
    ChatHistoryCreate,
    ChatHistoryOut,
)
from myhealth.schemas.report import MedicalReportOut

__all__ = [
    "SuccessResponse",
    "HealthCheck",
    "ErrorResponse",
    "RegisterRequest",
    "RegisterResponse",
    "LoginRequest",
    "LoginResponse",
    "UserSummary",
    "TokenClaims",
    "ProfileResponse",
    "ProfileUpdate",
    "ChatRole",
    "ChatSessionCreate",
    "ChatSessionCreated",
    "ChatSessionOut",
    "ChatHistoryCreate",
    "ChatHistoryOut",
    "MedicalReportOut",
]

"""
Shared response schemas.
"""

from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field


class SuccessResponse(BaseModel):
    """Acknowledgement for write endpoints."""

    success: bool = True


class HealthCheck(BaseModel):
    """Health check response schema."""

    status: str = "healthy"
    version: str
    timestamp: datetime = Field(default_factory=datetime.now)


class ErrorResponse(BaseModel):
    """Error response schema."""

    detail: str
    status_code: Optional[int] = None

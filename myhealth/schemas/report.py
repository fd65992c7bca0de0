"""
Medical report schemas.
"""

from datetime import datetime
from pydantic import BaseModel


class MedicalReportOut(BaseModel):
    id: int
    user_id: int
    filename: str
    analysis: str
    created_at: datetime

    class Config:
        from_attributes = True

"""
Profile schemas for the dashboard view.
"""

from typing import Optional
from pydantic import BaseModel, Field


class ProfileResponse(BaseModel):
    """Stored profile, never includes the password hash."""

    id: int
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    mobile: Optional[str] = None
    blood_group: Optional[str] = None
    personal_notes: Optional[str] = None

    class Config:
        from_attributes = True


class ProfileUpdate(BaseModel):
    """
    Editable profile fields.

    Only keys present in the request body are written; omitted keys keep
    their stored value.
    """

    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
    mobile: Optional[str] = None
    blood_group: Optional[str] = Field(default=None, alias="bloodGroup")
    personal_notes: Optional[str] = Field(default=None, alias="personalNotes")

    class Config:
        populate_by_name = True

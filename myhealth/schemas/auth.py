"""
Request/response schemas for registration, login and bearer tokens.

Request bodies use the camelCase keys the browser client sends.
"""

from typing import Optional
from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    """Registration form."""

    email: str = Field(..., min_length=3, max_length=254)
    password: str = Field(..., min_length=1)
    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "email": "a@x.com",
                "password": "pw1",
                "firstName": "A",
                "lastName": "B",
            }
        }


class RegisterResponse(BaseModel):
    id: int


class LoginRequest(BaseModel):
    email: str
    password: str


class UserSummary(BaseModel):
    """Public identity returned alongside a token."""

    id: int
    email: str
    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")

    class Config:
        populate_by_name = True
        from_attributes = True


class LoginResponse(BaseModel):
    token: str
    user: UserSummary


class TokenClaims(BaseModel):
    """Claims carried by a bearer token. Readable by anyone holding it."""

    id: int
    email: str

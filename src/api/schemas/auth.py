"""Pydantic schemas for the auth API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from api.schemas.common import CamelModel


class RegisterRequest(BaseModel):
    """Schema for registering a user.

    Content rules (email shape, password length) are enforced by the
    service so they share its error messages.
    """

    name: str
    email: str
    password: str


class LoginRequest(BaseModel):
    """Schema for logging in."""

    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class AuthResponse(BaseModel):
    """User identity plus a freshly issued bearer token."""

    id: UUID
    name: str
    email: str
    token: str


class UserResponse(CamelModel):
    """Public view of a user. Never carries the password hash."""

    id: UUID
    name: str
    email: str
    created_at: datetime
    updated_at: datetime

"""Authentication schemas."""

from __future__ import annotations  # Enable forward references

from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field

from app.schemas.common import CamelModel


class LoginRequest(CamelModel):
    """Login request schema."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class LoginResponse(CamelModel):
    """Login response schema."""

    access_token: str
    token_type: str = "bearer"
    user: "UserResponse"


class UserResponse(CamelModel):
    """User response schema."""

    id: int
    email: str
    name: Optional[str] = None
    role: str
    is_active: bool = True
    created_at: Optional[datetime] = None


# Rebuild models to resolve forward references
LoginResponse.model_rebuild()

"""Authentication schemas."""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserRegister(BaseModel):
    """User registration request.

    Only the email format is checked here. Empty fields and password length
    are checked by the account service so the client gets a specific message.
    """

    email: EmailStr = Field(..., max_length=255)
    username: str = Field("", max_length=50)
    display_name: str = Field("", max_length=100)
    password: str = Field("", max_length=128)


class UserLogin(BaseModel):
    """User login request."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field("", max_length=128)


class UserUpdate(BaseModel):
    """Profile update. An empty display name keeps the current one."""

    display_name: str = Field("", max_length=100)
    avatar_url: str | None = None


class UserResponse(BaseModel):
    """User information response."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    email: str
    username: str
    display_name: str
    avatar_url: str | None
    created_at: datetime
    updated_at: datetime


class AuthResponse(BaseModel):
    """Authentication response with token and user info."""

    user: UserResponse
    token: str

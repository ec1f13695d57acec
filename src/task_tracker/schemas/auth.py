"""Schemas describing authentication payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from ..models import UserRole


class SignupRequest(BaseModel):
    """Incoming payload for registering a new user."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "jane",
                "email": "jane@example.com",
                "password": "correct-horse-battery",
            }
        }
    )

    username: str
    email: str
    password: str


class LoginRequest(BaseModel):
    """Credentials where the identifier may be either a username or an email."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {"usernameOrEmail": "jane", "password": "correct-horse-battery"}
        },
    )

    username_or_email: str = Field(alias="usernameOrEmail")
    password: str


class TokenResponse(BaseModel):
    token: str


class LoginResponse(BaseModel):
    token: str
    username: str
    message: str = "Login successful"


class TokenPayload(BaseModel):
    """Validated JWT payload."""

    model_config = ConfigDict(extra="ignore")

    id: str
    role: UserRole
    exp: datetime


__all__ = [
    "LoginRequest",
    "LoginResponse",
    "SignupRequest",
    "TokenPayload",
    "TokenResponse",
]

"""Pydantic schemas for public interfaces."""

from __future__ import annotations

from .auth import LoginRequest, LoginResponse, SignupRequest, TokenPayload, TokenResponse
from .system import ErrorResponse, HealthCheckResponse, RootResponse
from .task import (
    TaskAssign,
    TaskCreate,
    TaskDeletedResponse,
    TaskListItem,
    TaskRead,
    TaskStatusChange,
    TaskStatusResponse,
    TaskUpdate,
)

__all__ = [
    "ErrorResponse",
    "HealthCheckResponse",
    "LoginRequest",
    "LoginResponse",
    "RootResponse",
    "SignupRequest",
    "TaskAssign",
    "TaskCreate",
    "TaskDeletedResponse",
    "TaskListItem",
    "TaskRead",
    "TaskStatusChange",
    "TaskStatusResponse",
    "TaskUpdate",
    "TokenPayload",
    "TokenResponse",
]

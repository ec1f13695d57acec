"""Reusable FastAPI dependencies, including the authentication gates."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import APIKeyHeader
from pydantic import ValidationError

from .core.config import Settings, get_settings
from .core.policies import Identity, is_admin
from .core.security import JWTError, decode_token
from .errors import AuthenticationError, PermissionDeniedError
from .repositories import parse_object_id
from .schemas.auth import TokenPayload
from .services import AuthService, TaskService

SettingsDependency = Annotated[Settings, Depends(get_settings)]

MISSING_TOKEN_MESSAGE = "No token, authorization denied"
INVALID_TOKEN_MESSAGE = "Invalid token"
ADMIN_ONLY_MESSAGE = "Access denied. Admins only."

_authorization_header = APIKeyHeader(name="Authorization", auto_error=False)


def _extract_token(header_value: str) -> str:
    """Return the credential following the first space of ``<scheme> <token>``."""

    _, _, token = header_value.partition(" ")
    return token


def _decode_identity(token: str, settings: Settings) -> Identity:
    try:
        payload = decode_token(
            token=token,
            secret=settings.jwt_secret_key,
            algorithm=settings.jwt_algorithm,
        )
        token_payload = TokenPayload.model_validate(payload)
    except (JWTError, ValidationError) as exc:
        raise AuthenticationError(INVALID_TOKEN_MESSAGE) from exc

    if parse_object_id(token_payload.id) is None:
        raise AuthenticationError(INVALID_TOKEN_MESSAGE)
    return Identity(id=token_payload.id, role=token_payload.role)


async def require_identity(
    request: Request,
    settings: SettingsDependency,
    authorization: str | None = Depends(_authorization_header),
) -> Identity:
    """Verify the bearer credential and attach the caller's identity to the request.

    The token alone is trusted for id and role; the user store is not consulted.
    """

    if not authorization:
        raise AuthenticationError(MISSING_TOKEN_MESSAGE)
    identity = _decode_identity(_extract_token(authorization), settings)
    request.state.identity = identity
    return identity


async def require_admin(identity: Identity = Depends(require_identity)) -> Identity:
    """Reject authenticated callers whose role is not ``admin``."""

    if not is_admin(identity):
        raise PermissionDeniedError(ADMIN_ONLY_MESSAGE)
    return identity


def get_auth_service(settings: SettingsDependency) -> AuthService:
    return AuthService(settings)


def get_task_service() -> TaskService:
    return TaskService()


IdentityDependency = Annotated[Identity, Depends(require_identity)]
AdminIdentityDependency = Annotated[Identity, Depends(require_admin)]
AuthServiceDependency = Annotated[AuthService, Depends(get_auth_service)]
TaskServiceDependency = Annotated[TaskService, Depends(get_task_service)]


__all__ = [
    "AdminIdentityDependency",
    "AuthServiceDependency",
    "IdentityDependency",
    "SettingsDependency",
    "TaskServiceDependency",
    "get_auth_service",
    "get_task_service",
    "require_admin",
    "require_identity",
]

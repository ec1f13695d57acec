"""Authentication service encapsulating signup, login and token issuance."""

from __future__ import annotations

import logging

from pymongo.errors import DuplicateKeyError

from ..core.config import Settings
from ..core.security import GeneratedToken, create_access_token, verify_password
from ..errors import ConflictError, ServerError, ValidationError
from ..models import User
from .users import UserService

logger = logging.getLogger(__name__)

USER_EXISTS_MESSAGE = "User already exists"
INVALID_CREDENTIALS_MESSAGE = "Invalid credentials"


class AuthService:
    """Identity issuance workflows."""

    def __init__(self, settings: Settings, user_service: UserService | None = None) -> None:
        self._settings = settings
        self._user_service = user_service or UserService()

    async def register_user(self, *, username: str, email: str, password: str) -> User:
        """Create an ordinary user account.

        Only the email is checked up front. A clashing username is caught by
        the unique index on the users collection and reported the same way.
        """
        existing = await self._user_service.get_user_by_email(email)
        if existing is not None:
            raise ConflictError(USER_EXISTS_MESSAGE)
        try:
            user = await self._user_service.create_user(
                username=username,
                email=email,
                password=password,
            )
        except DuplicateKeyError as exc:
            raise ConflictError(USER_EXISTS_MESSAGE) from exc
        logger.info("User registered", extra={"user_id": str(user.id)})
        return user

    async def authenticate_user(self, identifier: str, password: str) -> User:
        """Return the user matching ``identifier`` (username or email) and ``password``.

        Unknown identifiers and wrong passwords raise the same error.
        """
        user = await self._user_service.find_by_username_or_email(identifier)
        if user is None or not verify_password(password, user.password):
            logger.warning("Login rejected")
            raise ValidationError(INVALID_CREDENTIALS_MESSAGE)
        logger.info("User logged in", extra={"user_id": str(user.id)})
        return user

    def issue_token(self, user: User) -> GeneratedToken:
        if user.id is None:
            raise ServerError()
        return create_access_token(
            user_id=str(user.id),
            role=user.role.value,
            settings=self._settings,
        )


__all__ = ["AuthService", "INVALID_CREDENTIALS_MESSAGE", "USER_EXISTS_MESSAGE"]

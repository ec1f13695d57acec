"""Service layer orchestrating user-related repository operations."""

from __future__ import annotations

from collections.abc import Iterable

from beanie import PydanticObjectId

from ..models import User, UserRole
from ..repositories import UserRepository


class UserService:
    """High-level business operations for ``User`` documents."""

    def __init__(self, repository: UserRepository | None = None) -> None:
        self._repository = repository or UserRepository()

    @property
    def repository(self) -> UserRepository:
        """Expose the underlying repository for advanced scenarios."""
        return self._repository

    async def create_user(
        self,
        *,
        username: str,
        email: str,
        password: str,
        role: UserRole = UserRole.USER,
    ) -> User:
        """Create and persist a new user; the document hashes ``password`` on insert."""
        user = User(username=username, email=email, password=password, role=role)
        return await self._repository.add(user)

    async def get_user(self, user_id: str | PydanticObjectId) -> User | None:
        return await self._repository.get(user_id)

    async def get_user_by_email(self, email: str) -> User | None:
        return await self._repository.get_by_email(email)

    async def find_by_username_or_email(self, identifier: str) -> User | None:
        return await self._repository.get_by_username_or_email(identifier)

    async def usernames_by_id(self, ids: Iterable[PydanticObjectId]) -> dict[PydanticObjectId, str]:
        """Map each existing user id in ``ids`` to its username."""
        users = await self._repository.list_by_ids(ids)
        return {user.id: user.username for user in users if user.id is not None}

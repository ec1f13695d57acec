"""Repository for interacting with user documents."""

from __future__ import annotations

from collections.abc import Iterable

from beanie import PydanticObjectId
from beanie.operators import In, Or

from ..models import User
from .base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Concrete repository for ``User`` documents."""

    def __init__(self) -> None:
        super().__init__(User)

    async def get_by_email(self, email: str) -> User | None:
        """Return a user matching the supplied email if it exists."""
        return await User.find_one(User.email == email)

    async def get_by_username_or_email(self, identifier: str) -> User | None:
        """Return the user whose username or email equals ``identifier``."""
        return await User.find_one(Or(User.email == identifier, User.username == identifier))

    async def list_by_ids(self, ids: Iterable[PydanticObjectId]) -> list[User]:
        """Fetch all users whose identifiers are contained in ``ids``."""
        unique_ids = list(dict.fromkeys(ids))
        if not unique_ids:
            return []
        return await User.find(In(User.id, unique_ids)).to_list()

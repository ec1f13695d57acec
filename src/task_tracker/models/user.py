"""User documents persisted with beanie."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

import pymongo
from beanie import Document, Insert, before_event
from pydantic import Field
from pymongo import IndexModel

from ..core.security import get_password_hash
from .common import utcnow


class UserRole(str, Enum):
    """Roles supported by the authentication system."""

    USER = "user"
    ADMIN = "admin"


class User(Document):
    """Registered account.

    ``password`` is given in plaintext and hashed by :meth:`hash_password`
    when the document is first inserted, whatever it looks like.
    """

    username: str
    email: str
    password: str
    role: UserRole = Field(default=UserRole.USER)
    created_at: datetime = Field(default_factory=utcnow)

    @before_event(Insert)
    def hash_password(self) -> None:
        self.password = get_password_hash(self.password)

    class Settings:
        name = "users"
        indexes = [
            IndexModel([("username", pymongo.ASCENDING)], name="users_username_unique", unique=True),
            IndexModel([("email", pymongo.ASCENDING)], name="users_email_unique", unique=True),
        ]


__all__ = ["User", "UserRole"]

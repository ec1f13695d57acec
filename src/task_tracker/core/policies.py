"""Authorization predicates shared by the task workflows."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..models import UserRole

if TYPE_CHECKING:  # pragma: no cover - imported for typing only
    from ..models import Task


@dataclass(frozen=True, slots=True)
class Identity:
    """Authenticated caller decoded from a verified access token."""

    id: str
    role: UserRole


def is_admin(identity: Identity) -> bool:
    return identity.role == UserRole.ADMIN


def is_owner_or_admin(identity: Identity, task: "Task") -> bool:
    """Allow administrators and the user that created ``task``."""

    return is_admin(identity) or str(task.created_by) == identity.id


__all__ = ["Identity", "is_admin", "is_owner_or_admin"]

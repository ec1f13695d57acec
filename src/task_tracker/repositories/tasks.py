"""Repository for interacting with task documents."""

from __future__ import annotations

from beanie import PydanticObjectId

from ..models import Task
from .base import BaseRepository


class TaskRepository(BaseRepository[Task]):
    """Concrete repository encapsulating ``Task`` persistence operations."""

    def __init__(self) -> None:
        super().__init__(Task)

    async def list_for_creator(self, creator_id: PydanticObjectId) -> list[Task]:
        """Return every task created by the given user, oldest first."""
        return await Task.find(Task.created_by == creator_id).sort("+created_at").to_list()

"""Service layer encapsulating task ownership rules and status transitions."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from beanie import PydanticObjectId

from ..core.policies import Identity, is_owner_or_admin
from ..errors import NotFoundError, PermissionDeniedError, ValidationError
from ..models import Task, TaskStatus
from ..models.common import utcnow
from ..repositories import TaskRepository
from .users import UserService

logger = logging.getLogger(__name__)

TASK_NOT_FOUND_MESSAGE = "Task not found"
USER_NOT_FOUND_MESSAGE = "User not found"
INVALID_STATUS_MESSAGE = "Invalid status value"
EDIT_FORBIDDEN_MESSAGE = "You are not authorized to edit this task"
STATUS_FORBIDDEN_MESSAGE = "You are not authorized to update the status of this task"


def parse_status(value: Any) -> TaskStatus:
    """Return the ``TaskStatus`` named exactly by ``value`` or raise ``ValidationError``."""
    if isinstance(value, str):
        for status in TaskStatus:
            if status.value == value:
                return status
    raise ValidationError(INVALID_STATUS_MESSAGE)


def apply_status_transition(task: Task, status: TaskStatus, *, now: datetime | None = None) -> None:
    """Set ``task.status`` and keep ``completed_at`` present exactly when completed."""
    task.status = status
    if status is TaskStatus.COMPLETED:
        task.completed_at = now or utcnow()
    else:
        task.completed_at = None


class TaskService:
    """High-level business orchestration for ``Task`` documents."""

    def __init__(
        self,
        repository: TaskRepository | None = None,
        user_service: UserService | None = None,
    ) -> None:
        self._repository = repository or TaskRepository()
        self._user_service = user_service or UserService()

    @property
    def repository(self) -> TaskRepository:
        """Expose the underlying repository for advanced scenarios."""
        return self._repository

    async def _require_task(self, task_id: str) -> Task:
        task = await self._repository.get(task_id)
        if task is None:
            raise NotFoundError(TASK_NOT_FOUND_MESSAGE)
        return task

    async def create_task(self, identity: Identity, *, title: str, description: str) -> Task:
        """Create a task owned by the caller."""
        task = Task(
            title=title,
            description=description,
            created_by=PydanticObjectId(identity.id),
        )
        await self._repository.add(task)
        logger.info("Task created", extra={"task_id": str(task.id), "user_id": identity.id})
        return task

    async def list_tasks(self, identity: Identity) -> tuple[list[Task], dict[PydanticObjectId, str]]:
        """Return the caller's own tasks along with the usernames of their assignees.

        Administrators get no wider view here than anyone else.
        """
        tasks = await self._repository.list_for_creator(PydanticObjectId(identity.id))
        assignee_ids = [task.assigned_to for task in tasks if task.assigned_to is not None]
        usernames = await self._user_service.usernames_by_id(assignee_ids)
        return tasks, usernames

    async def update_task(
        self,
        identity: Identity,
        task_id: str,
        *,
        title: str,
        description: str,
        status: TaskStatus,
        assigned_to: PydanticObjectId | None,
    ) -> Task:
        """Overwrite the editable fields of a task.

        ``completed_at`` is deliberately left alone here; only
        :meth:`change_status` maintains it.
        """
        task = await self._require_task(task_id)
        if not is_owner_or_admin(identity, task):
            raise PermissionDeniedError(EDIT_FORBIDDEN_MESSAGE)
        task.title = title
        task.description = description
        task.status = status
        task.assigned_to = assigned_to
        await self._repository.save(task)
        logger.info("Task updated", extra={"task_id": task_id, "user_id": identity.id})
        return task

    async def assign_task(self, task_id: str, user_id: str) -> Task:
        """Point ``assigned_to`` at an existing user. Callers must be admins."""
        task = await self._require_task(task_id)
        user = await self._user_service.get_user(user_id)
        if user is None:
            raise NotFoundError(USER_NOT_FOUND_MESSAGE)
        task.assigned_to = user.id
        await self._repository.save(task)
        logger.info("Task assigned", extra={"task_id": task_id, "assignee_id": str(user.id)})
        return task

    async def change_status(self, identity: Identity, task_id: str, status: Any) -> Task:
        """Transition a task to ``status``, stamping or clearing ``completed_at``."""
        new_status = parse_status(status)
        task = await self._require_task(task_id)
        if not is_owner_or_admin(identity, task):
            raise PermissionDeniedError(STATUS_FORBIDDEN_MESSAGE)
        apply_status_transition(task, new_status)
        await self._repository.save(task)
        logger.info(
            "Task status changed",
            extra={"task_id": task_id, "user_id": identity.id, "status": new_status.value},
        )
        return task

    async def delete_task(self, task_id: str) -> Task:
        """Delete any task by id and return the removed document.

        No ownership or role check applies: any authenticated caller may delete.
        """
        task = await self._require_task(task_id)
        await self._repository.delete(task)
        logger.info("Task deleted", extra={"task_id": task_id})
        return task


__all__ = ["TaskService", "apply_status_transition", "parse_status"]

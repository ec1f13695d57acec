"""Task-related Pydantic schemas.

Wire names are camelCase (``createdBy``, ``assignedTo``, ...); Python code
uses the snake_case field names.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from beanie import PydanticObjectId
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..models import Task, TaskStatus

TASK_READ_EXAMPLE = {
    "id": "665f1c2e9b1e8a3d4c5b6a70",
    "title": "Draft product documentation",
    "description": "Outline sections for the public API guide.",
    "status": TaskStatus.COMPLETED.value,
    "createdBy": "665f1c2e9b1e8a3d4c5b6a71",
    "assignedTo": "665f1c2e9b1e8a3d4c5b6a72",
    "createdAt": "2024-06-04T12:00:00Z",
    "completedAt": "2024-06-05T08:30:00Z",
}

_CAMEL_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TaskCreate(BaseModel):
    """Payload for creating a new task; the creator is always the caller."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Draft product documentation",
                "description": "Outline sections for the public API guide.",
            }
        }
    )

    title: str
    description: str


class TaskUpdate(BaseModel):
    """Payload for the full update; every field is written as given."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "title": "Update API documentation",
                "description": "Cover the new endpoints.",
                "status": TaskStatus.INCOMPLETE.value,
                "assignedTo": None,
            }
        },
    )

    title: str
    description: str
    status: TaskStatus
    assigned_to: PydanticObjectId | None = None


class TaskAssign(BaseModel):
    model_config = _CAMEL_CONFIG

    user_id: str


class TaskStatusChange(BaseModel):
    # Any JSON value is accepted here; the service rejects anything that is not
    # exactly one of the TaskStatus values.
    status: Any = None


class TaskRead(BaseModel):
    """Public representation of a task."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={"example": TASK_READ_EXAMPLE},
    )

    id: str
    title: str
    description: str
    status: TaskStatus
    created_by: str
    assigned_to: str | None = None
    created_at: datetime
    completed_at: datetime | None = None

    @classmethod
    def from_document(cls, task: Task) -> "TaskRead":
        return cls(
            id=str(task.id),
            title=task.title,
            description=task.description,
            status=task.status,
            created_by=str(task.created_by),
            assigned_to=str(task.assigned_to) if task.assigned_to is not None else None,
            created_at=task.created_at,
            completed_at=task.completed_at,
        )


class TaskListItem(TaskRead):
    """Task as shown in listings: ``assignedTo`` carries the assignee's username."""

    @classmethod
    def resolve(cls, task: Task, usernames: Mapping[PydanticObjectId, str]) -> "TaskListItem":
        """Build a listing entry, replacing the assignee id with its username.

        A reference to a user that no longer exists resolves to ``None``.
        """
        item = cls.from_document(task)
        item.assigned_to = usernames.get(task.assigned_to) if task.assigned_to is not None else None
        return item


class TaskStatusResponse(BaseModel):
    message: str = Field(default="Task status updated")
    task: TaskRead


class TaskDeletedResponse(BaseModel):
    message: str = Field(default="Task deleted successfully")
    task: TaskRead


__all__ = [
    "TaskAssign",
    "TaskCreate",
    "TaskDeletedResponse",
    "TaskListItem",
    "TaskRead",
    "TaskStatusChange",
    "TaskStatusResponse",
    "TaskUpdate",
]

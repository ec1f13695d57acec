"""Task documents persisted with beanie."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

import pymongo
from beanie import Document, PydanticObjectId
from pydantic import Field
from pymongo import IndexModel

from .common import utcnow


class TaskStatus(str, Enum):
    """Enumeration of possible task states."""

    INCOMPLETE = "incomplete"
    COMPLETED = "completed"


class Task(Document):
    """Persistent task owned by the user that created it."""

    title: str
    description: str
    status: TaskStatus = Field(default=TaskStatus.INCOMPLETE)
    created_by: PydanticObjectId
    assigned_to: PydanticObjectId | None = None
    created_at: datetime = Field(default_factory=utcnow)
    completed_at: datetime | None = None

    class Settings:
        name = "tasks"
        indexes = [
            IndexModel([("created_by", pymongo.ASCENDING)], name="tasks_created_by"),
        ]


__all__ = ["Task", "TaskStatus"]

"""Domain models exposed by the task tracker."""

from __future__ import annotations

from .task import Task, TaskStatus
from .user import User, UserRole

DOCUMENT_MODELS = [User, Task]

__all__ = [
    "DOCUMENT_MODELS",
    "Task",
    "TaskStatus",
    "User",
    "UserRole",
]

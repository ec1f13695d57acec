from __future__ import annotations

from datetime import datetime, timezone

import pytest
from beanie import PydanticObjectId

from task_tracker.core.policies import Identity, is_admin, is_owner_or_admin
from task_tracker.errors import ValidationError
from task_tracker.models import Task, TaskStatus, UserRole
from task_tracker.services.tasks import apply_status_transition, parse_status

OWNER_ID = "665f1c2e9b1e8a3d4c5b6a71"
OTHER_ID = "665f1c2e9b1e8a3d4c5b6a72"


def _task() -> Task:
    return Task.model_construct(
        title="Write report",
        description="Quarterly numbers",
        status=TaskStatus.INCOMPLETE,
        created_by=PydanticObjectId(OWNER_ID),
        assigned_to=None,
        completed_at=None,
    )


def test_owner_and_admin_may_modify_task() -> None:
    task = _task()

    assert is_owner_or_admin(Identity(id=OWNER_ID, role=UserRole.USER), task)
    assert is_owner_or_admin(Identity(id=OTHER_ID, role=UserRole.ADMIN), task)
    assert not is_owner_or_admin(Identity(id=OTHER_ID, role=UserRole.USER), task)


def test_is_admin_checks_role_only() -> None:
    assert is_admin(Identity(id=OWNER_ID, role=UserRole.ADMIN))
    assert not is_admin(Identity(id=OWNER_ID, role=UserRole.USER))


@pytest.mark.parametrize("value", ["completed", "incomplete"])
def test_parse_status_accepts_exact_values(value: str) -> None:
    assert parse_status(value).value == value


@pytest.mark.parametrize("value", ["COMPLETED", " completed", "done", "", None, 0, ["completed"]])
def test_parse_status_rejects_anything_else(value) -> None:
    with pytest.raises(ValidationError) as excinfo:
        parse_status(value)

    assert excinfo.value.message == "Invalid status value"


def test_completion_stamps_and_reopening_clears_completed_at() -> None:
    task = _task()
    stamp = datetime(2024, 6, 5, 8, 30, tzinfo=timezone.utc)

    apply_status_transition(task, TaskStatus.COMPLETED, now=stamp)
    assert task.status is TaskStatus.COMPLETED
    assert task.completed_at == stamp

    apply_status_transition(task, TaskStatus.INCOMPLETE)
    assert task.status is TaskStatus.INCOMPLETE
    assert task.completed_at is None


def test_completing_without_explicit_time_uses_current_utc() -> None:
    task = _task()
    before = datetime.now(timezone.utc)

    apply_status_transition(task, TaskStatus.COMPLETED)

    assert task.completed_at is not None
    assert task.completed_at >= before

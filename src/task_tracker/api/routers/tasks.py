"""Routes handling the task lifecycle."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...deps import AdminIdentityDependency, IdentityDependency, TaskServiceDependency
from ...schemas import (
    TaskAssign,
    TaskCreate,
    TaskDeletedResponse,
    TaskListItem,
    TaskRead,
    TaskStatusChange,
    TaskStatusResponse,
    TaskUpdate,
)

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.post(
    "",
    response_model=TaskRead,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Create a task owned by the caller",
)
async def create_task(
    payload: TaskCreate,
    identity: IdentityDependency,
    service: TaskServiceDependency,
) -> TaskRead:
    task = await service.create_task(identity, title=payload.title, description=payload.description)
    return TaskRead.from_document(task)


@router.get(
    "",
    response_model=list[TaskListItem],
    response_model_exclude_none=True,
    summary="List tasks created by the caller",
)
async def list_tasks(identity: IdentityDependency, service: TaskServiceDependency) -> list[TaskListItem]:
    tasks, usernames = await service.list_tasks(identity)
    return [TaskListItem.resolve(task, usernames) for task in tasks]


@router.put(
    "/{task_id}",
    response_model=TaskRead,
    response_model_exclude_none=True,
    summary="Overwrite a task's title, description, status and assignee",
)
async def update_task(
    task_id: str,
    payload: TaskUpdate,
    identity: IdentityDependency,
    service: TaskServiceDependency,
) -> TaskRead:
    task = await service.update_task(
        identity,
        task_id,
        title=payload.title,
        description=payload.description,
        status=payload.status,
        assigned_to=payload.assigned_to,
    )
    return TaskRead.from_document(task)


@router.put(
    "/{task_id}/assign",
    response_model=TaskRead,
    response_model_exclude_none=True,
    summary="Assign a task to a user (admins only)",
)
async def assign_task(
    task_id: str,
    payload: TaskAssign,
    _: AdminIdentityDependency,
    service: TaskServiceDependency,
) -> TaskRead:
    task = await service.assign_task(task_id, payload.user_id)
    return TaskRead.from_document(task)


@router.put(
    "/{task_id}/status",
    response_model=TaskStatusResponse,
    response_model_exclude_none=True,
    summary="Mark a task completed or incomplete",
)
async def change_task_status(
    task_id: str,
    payload: TaskStatusChange,
    identity: IdentityDependency,
    service: TaskServiceDependency,
) -> TaskStatusResponse:
    task = await service.change_status(identity, task_id, payload.status)
    return TaskStatusResponse(task=TaskRead.from_document(task))


@router.delete(
    "/{task_id}",
    response_model=TaskDeletedResponse,
    response_model_exclude_none=True,
    summary="Delete a task",
)
async def delete_task(
    task_id: str,
    _: IdentityDependency,
    service: TaskServiceDependency,
) -> TaskDeletedResponse:
    task = await service.delete_task(task_id)
    return TaskDeletedResponse(task=TaskRead.from_document(task))


__all__ = ["router"]

from __future__ import annotations

import pytest

from task_tracker.core.security import verify_password
from task_tracker.db.seed import _parse_args, seed_user
from task_tracker.models import User, UserRole


@pytest.mark.asyncio
async def test_seed_user_creates_admin_once(database: None) -> None:
    first = await seed_user(
        username="root",
        email="root@example.com",
        password="s3cret",
        role=UserRole.ADMIN,
    )
    second = await seed_user(
        username="root-again",
        email="root@example.com",
        password="other",
        role=UserRole.USER,
    )

    assert first.id == second.id
    assert await User.find(User.email == "root@example.com").count() == 1
    stored = await User.get(first.id)
    assert stored is not None
    assert stored.role is UserRole.ADMIN
    assert verify_password("s3cret", stored.password)


@pytest.mark.asyncio
async def test_seeded_admin_can_log_in(client, database: None) -> None:
    await seed_user(username="root", email="root@example.com", password="s3cret", role=UserRole.ADMIN)

    response = await client.post(
        "/api/users/login",
        json={"usernameOrEmail": "root@example.com", "password": "s3cret"},
    )

    assert response.status_code == 200
    assert response.json()["username"] == "root"


def test_parse_args_maps_admin_flag() -> None:
    args = _parse_args(["--username", "root", "--email", "root@example.com", "--password", "pw", "--admin"])
    assert args.admin is True

    args = _parse_args(["--username", "u", "--email", "u@example.com", "--password", "pw"])
    assert args.admin is False

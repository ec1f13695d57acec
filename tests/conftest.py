from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable
from dataclasses import dataclass
from itertools import count

import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from jose import jwt
from mongomock_motor import AsyncMongoMockClient

from task_tracker.core.config import Settings, get_settings
from task_tracker.db import close_database, init_database
from task_tracker.main import create_app
from task_tracker.models import UserRole
from task_tracker.services import UserService

TEST_JWT_SECRET = "test-secret"


@dataclass(slots=True)
class AuthenticatedUser:
    id: str
    username: str
    email: str
    password: str
    token: str

    @property
    def headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}


@pytest_asyncio.fixture
async def settings() -> AsyncIterator[Settings]:
    get_settings.cache_clear()
    current = get_settings()
    current.jwt_secret_key = TEST_JWT_SECRET
    current.mongo_database = "task_tracker_test"
    try:
        yield current
    finally:
        get_settings.cache_clear()


@pytest_asyncio.fixture
async def database(settings: Settings) -> AsyncIterator[None]:
    await init_database(client=AsyncMongoMockClient(), force=True)
    try:
        yield
    finally:
        await close_database()


@pytest_asyncio.fixture
async def app(database: None) -> FastAPI:
    return create_app()


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as http_client:
        yield http_client


@pytest_asyncio.fixture
async def signup_user(
    client: AsyncClient,
    settings: Settings,
) -> Callable[..., Awaitable[AuthenticatedUser]]:
    counter = count()

    async def _factory(
        *,
        username: str | None = None,
        email: str | None = None,
        password: str = "StrongPass123!",
    ) -> AuthenticatedUser:
        index = next(counter)
        actual_username = username or f"user{index}"
        actual_email = email or f"user{index}@example.com"
        response = await client.post(
            "/api/users/signup",
            json={"username": actual_username, "email": actual_email, "password": password},
        )
        assert response.status_code == 201, response.text
        token = response.json()["token"]
        claims = jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
        return AuthenticatedUser(
            id=claims["id"],
            username=actual_username,
            email=actual_email,
            password=password,
            token=token,
        )

    return _factory


@pytest_asyncio.fixture
async def admin_user(client: AsyncClient, database: None) -> AuthenticatedUser:
    password = "AdminPass123!"
    user = await UserService().create_user(
        username="admin",
        email="admin@example.com",
        password=password,
        role=UserRole.ADMIN,
    )
    response = await client.post(
        "/api/users/login",
        json={"usernameOrEmail": "admin", "password": password},
    )
    assert response.status_code == 200, response.text
    return AuthenticatedUser(
        id=str(user.id),
        username=user.username,
        email=user.email,
        password=password,
        token=response.json()["token"],
    )

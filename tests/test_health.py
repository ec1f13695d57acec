from __future__ import annotations

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


async def test_healthz_reports_ok(client: AsyncClient) -> None:
    response = await client.get("/healthz")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
    assert response.headers["X-Request-ID"]


async def test_metadata_describes_service(client: AsyncClient, settings) -> None:
    response = await client.get("/api/metadata")

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == settings.project_name
    assert body["api_prefix"] == "/api"
    assert body["version"] == settings.version

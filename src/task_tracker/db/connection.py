"""MongoDB client lifecycle and beanie initialisation."""

from __future__ import annotations

import asyncio
import logging

from beanie import init_beanie
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from ..core.config import get_settings
from ..models import DOCUMENT_MODELS

logger = logging.getLogger(__name__)

_client: AsyncIOMotorClient | None = None
_database: AsyncIOMotorDatabase | None = None
_initialized = False
_lock = asyncio.Lock()


def set_database_client(client: AsyncIOMotorClient | None) -> None:
    """Inject a custom motor client instance (primarily for tests)."""

    global _client, _database, _initialized
    _client = client
    _database = None
    _initialized = False


async def init_database(*, client: AsyncIOMotorClient | None = None, force: bool = False) -> None:
    """Connect to MongoDB and register the document models with beanie."""

    global _client, _database, _initialized

    async with _lock:
        if client is not None:
            set_database_client(client)

        if _initialized and not force:
            return

        settings = get_settings()
        if _client is None:
            _client = AsyncIOMotorClient(settings.mongo_uri, tz_aware=True, uuidRepresentation="standard")
        _database = _client[settings.mongo_database]

        await init_beanie(database=_database, document_models=DOCUMENT_MODELS)
        _initialized = True
        logger.info("MongoDB connected", extra={"database": settings.mongo_database})


async def close_database() -> None:
    """Dispose the MongoDB client."""

    global _client, _database, _initialized
    client = _client
    if client is not None:
        client.close()
    _client = None
    _database = None
    _initialized = False

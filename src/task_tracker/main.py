"""Entry point for the task tracker FastAPI application."""

from __future__ import annotations

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.routers import api_router, health_router
from .core.config import Settings, get_settings
from .core.logging import configure_logging
from .core.middleware import CorrelationIdMiddleware
from .db import close_database, init_database
from .deps import SettingsDependency
from .errors import register_exception_handlers
from .schemas.system import RootResponse


def _normalise_prefix(raw_prefix: str) -> str:
    prefix = raw_prefix.strip()
    if prefix and not prefix.startswith("/"):
        prefix = f"/{prefix}"
    prefix = prefix.rstrip("/")
    return "" if prefix == "/" else prefix


def create_app() -> FastAPI:
    """Instantiate and configure the FastAPI application."""

    settings = get_settings()
    configure_logging(settings)

    router_prefix = _normalise_prefix(settings.api_prefix)
    application = FastAPI(
        title=settings.project_name,
        version=settings.version,
        summary="Multi-user task tracking API.",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url=f"{router_prefix}/openapi.json",
    )

    application.state.settings = settings

    application.add_middleware(CorrelationIdMiddleware)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    application.include_router(api_router, prefix=router_prefix)
    application.include_router(health_router)

    @application.get(
        f"{router_prefix}/metadata",
        response_model=RootResponse,
        summary="Service metadata",
        tags=["system"],
    )
    async def read_api_metadata(settings: SettingsDependency) -> RootResponse:
        """Expose minimal service metadata for API clients."""

        return RootResponse(
            name=settings.project_name,
            environment=settings.environment,
            version=settings.version,
            api_prefix=router_prefix or "/",
        )

    register_exception_handlers(application)

    @application.on_event("startup")
    async def _connect_database() -> None:
        await init_database()

    @application.on_event("shutdown")
    async def _close_database() -> None:
        await close_database()

    return application


app = create_app()


def run() -> None:
    """Console entry point: serve the application with uvicorn."""

    settings: Settings = get_settings()
    uvicorn.run(
        "task_tracker.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.reload,
        log_config=None,
    )


if __name__ == "__main__":  # pragma: no cover - manual execution entry-point
    run()

"""FastAPI application factory."""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI

from .api import health_router
from .bootstrap import ServiceContainer, bootstrap_services
from .logging_config import configure_logging
from .settings import Settings, get_settings
from bintray_push.modules.pushtobintray import pushtobintray_router


def create_app(settings: Optional[Settings] = None, container: Optional[ServiceContainer] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    services = container or ServiceContainer(settings)

    app = FastAPI(title=settings.app_name, version=settings.app_version)
    app.include_router(health_router)
    app.include_router(pushtobintray_router)
    app.state.container = services

    @app.on_event("startup")
    async def _startup() -> None:  # pragma: no cover - invoked by FastAPI
        await bootstrap_services(services)

    @app.on_event("shutdown")
    async def _shutdown() -> None:  # pragma: no cover - invoked by FastAPI
        services.close()

    return app

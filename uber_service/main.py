from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from uber_service.api.uber import uber_route
from uber_service.config import Settings, get_settings
from uber_service.db.session import create_database
from uber_service.observability.logging import configure_logging, get_logger
from uber_service.service import UberService


class StartupError(RuntimeError):
    """A collaborator could not be built; the process must not serve traffic."""


def start(settings: Settings | None = None) -> UberService:
    """Build settings, logger, database and service in order, then start the service."""

    try:
        settings = settings or get_settings()
    except Exception as exc:
        raise StartupError(f"failed to load configuration: {exc}") from exc

    try:
        configure_logging(settings.log_level, settings.log_format)
        logger = get_logger("uber", service=settings.service_name)
    except Exception as exc:
        raise StartupError(f"failed to configure logger: {exc}") from exc

    try:
        database = create_database(settings)
    except Exception as exc:
        logger.exception("database_init_failed")
        raise StartupError(f"failed to create database handle: {exc}") from exc

    service = UberService(settings=settings, database=database, logger=logger)
    try:
        service.start()
    except Exception as exc:
        logger.exception("service_start_failed")
        database.close()
        raise StartupError(f"failed to initialize Uber components: {exc}") from exc

    return service


def create_app(service: UberService) -> FastAPI:
    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        try:
            yield
        finally:
            service.stop()

    # No docs/OpenAPI routes: every path belongs to the catch-all handler.
    app = FastAPI(
        title="Fake Uber Service",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )
    app.state.service = service
    app.router.routes.append(uber_route)
    return app

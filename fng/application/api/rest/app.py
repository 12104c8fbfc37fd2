import logging
from contextlib import asynccontextmanager

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI, Request

from fng.application.api.v1.errors import error_response
from fng.application.api.v1.routes import health, readings, refresh
from fng.application.di import create_container
from fng.config import Config, configure_logging
from fng.infrastructure.schedule.runner import ScheduleRunner
from fng.util.di.fastapi import setup_dishka

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    container = app.state.dishka_container

    # Hourly refresh runs for the lifetime of the app
    runner = await container.get(ScheduleRunner)

    try:
        async with runner:
            yield
    finally:
        await container.close()


def configure_observability(config: Config) -> None:
    """Configure logfire; spans are only exported when LOGFIRE_TOKEN is set."""
    logfire.configure(
        service_name="fng",
        service_version=config.server.version,
        send_to_logfire="if-token-present",
        console=False,
    )
    logfire.instrument_httpx()


def create_app(config: Config | None = None, container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application."""
    # Pydantic Settings populates from env vars at runtime
    config = config or Config()  # type: ignore[call-arg]

    # Configure logging early
    configure_logging(config.logging)
    configure_observability(config)
    logger.info(
        "Starting %s v%s (region=%s)", config.server.name, config.server.version, config.server.region
    )

    app_instance = FastAPI(
        title=config.server.name,
        description=config.server.description,
        version=config.server.version,
        lifespan=lifespan,
    )
    logfire.instrument_fastapi(app_instance)

    setup_dishka(container or create_container(config), app_instance)

    app_instance.include_router(health.router, prefix="/api/v1")
    app_instance.include_router(refresh.router, prefix="/api/v1")
    app_instance.include_router(readings.router, prefix="/api/v1")

    # Global exception handler - logs all unhandled exceptions
    @app_instance.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return error_response("Internal server error")

    return app_instance

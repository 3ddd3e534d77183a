"""FastAPI application entry point for MUN Admin.

Run with:
    uvicorn mun_admin.api.main:app
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from structlog import get_logger

from mun_admin import __version__
from mun_admin.api.middleware import LoggingMiddleware, MetricsMiddleware
from mun_admin.api.routes import all_routers
from mun_admin.bootstrap import (
    configure_logging,
    get_app_config,
    initialize_conference_store,
    initialize_metrics,
    set_app_config,
)
from mun_admin.config import AppConfig

logger = get_logger()


def create_app(config: Optional[AppConfig] = None) -> FastAPI:
    """Build the FastAPI application.

    Startup configures logging, records the service start for uptime
    metrics and seeds the store when enabled.

    Args:
        config: Configuration override; read from the environment if None.

    Returns:
        The configured application.
    """
    if config is not None:
        set_app_config(config)
    app_config = get_app_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        configure_logging(app_config)
        initialize_metrics(app_config)
        seeded = await initialize_conference_store(app_config)
        logger.info(
            "service_started",
            service=app_config.service_name,
            environment=app_config.environment,
            seeded=seeded,
        )
        yield
        logger.info("service_stopped", service=app_config.service_name)

    app = FastAPI(
        title="MUN Admin API",
        description="Model United Nations conference administration",
        version=__version__,
        lifespan=lifespan,
    )
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(LoggingMiddleware)

    for router in all_routers:
        app.include_router(router)

    return app


app = create_app()

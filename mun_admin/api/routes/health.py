"""Liveness endpoint."""

from fastapi import APIRouter, Depends

from mun_admin import __version__
from mun_admin.api.models.health import HealthResponse
from mun_admin.bootstrap import get_app_config
from mun_admin.config import AppConfig
from mun_admin.infrastructure.monitoring import get_metrics_collector

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(config: AppConfig = Depends(get_app_config)) -> HealthResponse:
    return HealthResponse(
        service=config.service_name,
        version=__version__,
        environment=config.environment,
        uptime_seconds=round(get_metrics_collector().uptime_seconds(), 3),
    )

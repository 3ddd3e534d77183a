"""App settings and dashboard routes."""

from fastapi import APIRouter, Depends, Request

from mun_admin.api.dependencies.conference import (
    get_app_settings_service,
    get_dashboard_service,
)
from mun_admin.api.models.settings import (
    AppSettingsResponse,
    AppSettingsUpdateRequest,
    DashboardSummaryResponse,
)
from mun_admin.api.routes.errors import record_invalid
from mun_admin.application.services import AppSettingsService, DashboardService
from mun_admin.domain.errors import RecordValidationError

settings_router = APIRouter(prefix="/api/app-settings", tags=["app-settings"])
dashboard_router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@settings_router.get("", response_model=AppSettingsResponse)
async def get_app_settings(
    service: AppSettingsService = Depends(get_app_settings_service),
) -> AppSettingsResponse:
    """Return the currency settings, created with defaults on first read."""
    return AppSettingsResponse.model_validate(await service.get_settings())


@settings_router.patch("", response_model=AppSettingsResponse)
async def update_app_settings(
    request_data: AppSettingsUpdateRequest,
    request: Request,
    service: AppSettingsService = Depends(get_app_settings_service),
) -> AppSettingsResponse:
    """Update the currency settings."""
    try:
        settings = await service.update_settings(
            request_data.model_dump(exclude_unset=True)
        )
    except RecordValidationError as e:
        raise record_invalid(e, request) from None
    return AppSettingsResponse.model_validate(settings)


@dashboard_router.get("/summary", response_model=DashboardSummaryResponse)
async def get_dashboard_summary(
    service: DashboardService = Depends(get_dashboard_service),
) -> DashboardSummaryResponse:
    """Return the headline conference numbers."""
    return DashboardSummaryResponse.model_validate(await service.get_summary())

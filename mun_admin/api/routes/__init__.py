"""API routes."""

from fastapi import APIRouter

from mun_admin.api.routes.award_types import router as award_types_router
from mun_admin.api.routes.committees import router as committees_router
from mun_admin.api.routes.conference import routers as conference_routers
from mun_admin.api.routes.delegate_awards import router as delegate_awards_router
from mun_admin.api.routes.delegates import router as delegates_router
from mun_admin.api.routes.evaluations import router as evaluations_router
from mun_admin.api.routes.health import router as health_router
from mun_admin.api.routes.marking_criteria import router as marking_criteria_router
from mun_admin.api.routes.metrics import router as metrics_router
from mun_admin.api.routes.portfolios import router as portfolios_router
from mun_admin.api.routes.settings import dashboard_router, settings_router

all_routers: list[APIRouter] = [
    health_router,
    metrics_router,
    portfolios_router,
    delegates_router,
    committees_router,
    *conference_routers,
    marking_criteria_router,
    award_types_router,
    evaluations_router,
    delegate_awards_router,
    settings_router,
    dashboard_router,
]

__all__ = ["all_routers"]

"""Portfolio routes: country and NGO seats, countries listed first."""

from fastapi import APIRouter

from mun_admin.api.dependencies.conference import get_portfolio_service
from mun_admin.api.models.portfolio import (
    PortfolioCreateRequest,
    PortfolioResponse,
    PortfolioUpdateRequest,
)
from mun_admin.api.routes.crud import add_record_routes

router = add_record_routes(
    APIRouter(prefix="/api/portfolios", tags=["portfolios"]),
    get_service=get_portfolio_service,
    create_model=PortfolioCreateRequest,
    update_model=PortfolioUpdateRequest,
    response_model=PortfolioResponse,
    resource="portfolios",
)

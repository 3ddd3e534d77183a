"""Committee routes."""

from fastapi import APIRouter

from mun_admin.api.dependencies.conference import get_committee_service
from mun_admin.api.models.committee import (
    CommitteeCreateRequest,
    CommitteeResponse,
    CommitteeUpdateRequest,
)
from mun_admin.api.routes.crud import add_record_routes

router = add_record_routes(
    APIRouter(prefix="/api/committees", tags=["committees"]),
    get_service=get_committee_service,
    create_model=CommitteeCreateRequest,
    update_model=CommitteeUpdateRequest,
    response_model=CommitteeResponse,
    resource="committees",
)

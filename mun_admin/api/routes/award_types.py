"""Award type routes.

GET /api/award-types lists every tier by order_index; GET
/api/award-types/active lists only the tiers auto-assignment hands out,
most prestigious first.
"""

from fastapi import APIRouter, Depends

from mun_admin.api.dependencies.conference import get_award_type_registry_service
from mun_admin.api.models.award import (
    AwardTypeCreateRequest,
    AwardTypeResponse,
    AwardTypeUpdateRequest,
)
from mun_admin.api.routes.crud import add_record_routes
from mun_admin.application.services import AwardTypeRegistryService

router = APIRouter(prefix="/api/award-types", tags=["award-types"])


@router.get(
    "/active",
    response_model=list[AwardTypeResponse],
    summary="List active award types in prestige order",
)
async def list_active_award_types(
    service: AwardTypeRegistryService = Depends(get_award_type_registry_service),
) -> list[AwardTypeResponse]:
    """Return active award types ascending by order_index."""
    award_types = await service.list_active_ordered()
    return [AwardTypeResponse.model_validate(t) for t in award_types]


add_record_routes(
    router,
    get_service=get_award_type_registry_service,
    create_model=AwardTypeCreateRequest,
    update_model=AwardTypeUpdateRequest,
    response_model=AwardTypeResponse,
    resource="award_types",
)

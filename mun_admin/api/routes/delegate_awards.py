"""Delegate award routes, including committee auto-assignment.

POST /api/delegate-awards/auto-assign replaces a committee's awards from its
evaluations. When the committee already has awards and ``force`` is false
the request fails with 409 (type ``urn:mun-admin:awards:already-exist``) and
nothing changes; the client may retry with ``force: true``.
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, Response

from mun_admin.api.dependencies.conference import get_award_assignment_service
from mun_admin.api.models.award import (
    AutoAssignRequest,
    DelegateAwardCreateRequest,
    DelegateAwardResponse,
    DelegateAwardUpdateRequest,
)
from mun_admin.api.routes.errors import (
    awards_already_exist,
    record_invalid,
    record_not_found,
)
from mun_admin.application.services import AwardAssignmentService
from mun_admin.domain.errors import (
    AwardsAlreadyExistError,
    RecordNotFoundError,
    RecordValidationError,
)

router = APIRouter(prefix="/api/delegate-awards", tags=["delegate-awards"])


@router.post(
    "/auto-assign",
    response_model=list[DelegateAwardResponse],
    status_code=201,
    responses={
        409: {"description": "Awards already exist and force is false"},
    },
    summary="Auto-assign a committee's awards",
    description=(
        "Rank the committee's evaluations by total score and hand out the "
        "active award types in prestige order, at most one per delegate."
    ),
)
async def auto_assign_awards(
    request_data: AutoAssignRequest,
    request: Request,
    service: AwardAssignmentService = Depends(get_award_assignment_service),
) -> list[DelegateAwardResponse]:
    """Run auto-assignment for one committee.

    Args:
        request_data: Committee id and name, assigner, force flag.
        request: FastAPI request for error context.
        service: Injected award assignment service.

    Returns:
        Created awards, most prestigious first. Empty when the committee
        has no evaluations.

    Raises:
        HTTPException 409: Awards exist and force is false.
    """
    try:
        awards = await service.auto_assign(
            committee_id=request_data.committee_id,
            committee_name=request_data.committee_name,
            assigned_by=request_data.assigned_by,
            force=request_data.force,
        )
    except AwardsAlreadyExistError as e:
        raise awards_already_exist(e, request) from None
    return [DelegateAwardResponse.model_validate(award) for award in awards]


@router.get(
    "",
    response_model=list[DelegateAwardResponse],
    summary="List awards",
)
async def list_awards(
    committee_id: Optional[UUID] = Query(
        default=None,
        alias="committeeId",
        description="Only this committee's awards, in award type order",
    ),
    service: AwardAssignmentService = Depends(get_award_assignment_service),
) -> list[DelegateAwardResponse]:
    """List all awards newest first, or one committee's by prestige."""
    if committee_id is None:
        awards = await service.list_awards()
    else:
        awards = await service.list_committee_awards(committee_id)
    return [DelegateAwardResponse.model_validate(award) for award in awards]


@router.get("/{award_id}", response_model=DelegateAwardResponse)
async def get_award(
    award_id: UUID,
    request: Request,
    service: AwardAssignmentService = Depends(get_award_assignment_service),
) -> DelegateAwardResponse:
    """Get one award."""
    try:
        award = await service.get_award(award_id)
    except RecordNotFoundError as e:
        raise record_not_found(e, request) from None
    return DelegateAwardResponse.model_validate(award)


@router.post("", response_model=DelegateAwardResponse, status_code=201)
async def grant_award(
    request_data: DelegateAwardCreateRequest,
    service: AwardAssignmentService = Depends(get_award_assignment_service),
) -> DelegateAwardResponse:
    """Grant an award manually (isAutoAssigned = 0)."""
    award = await service.grant_award(**request_data.model_dump())
    return DelegateAwardResponse.model_validate(award)


@router.patch("/{award_id}", response_model=DelegateAwardResponse)
async def update_award(
    award_id: UUID,
    request_data: DelegateAwardUpdateRequest,
    request: Request,
    service: AwardAssignmentService = Depends(get_award_assignment_service),
) -> DelegateAwardResponse:
    """Partially update an award."""
    try:
        award = await service.update_award(
            award_id, request_data.model_dump(exclude_unset=True)
        )
    except RecordNotFoundError as e:
        raise record_not_found(e, request) from None
    except RecordValidationError as e:
        raise record_invalid(e, request) from None
    return DelegateAwardResponse.model_validate(award)


@router.delete("/{award_id}", status_code=204, response_class=Response)
async def delete_award(
    award_id: UUID,
    request: Request,
    service: AwardAssignmentService = Depends(get_award_assignment_service),
) -> Response:
    """Delete an award."""
    try:
        await service.delete_award(award_id)
    except RecordNotFoundError as e:
        raise record_not_found(e, request) from None
    return Response(status_code=204)

"""Evaluation routes.

Submitting an evaluation stores a new record with its total computed from
the scores. Only delegateName, committee, comments and evaluatedBy may be
edited afterwards.
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, Response

from mun_admin.api.dependencies.conference import get_evaluation_recorder_service
from mun_admin.api.models.evaluation import (
    EvaluationResponse,
    EvaluationSubmitRequest,
    EvaluationUpdateRequest,
)
from mun_admin.api.routes.errors import record_invalid, record_not_found
from mun_admin.application.services import EvaluationRecorderService
from mun_admin.domain.errors import RecordNotFoundError, RecordValidationError

router = APIRouter(prefix="/api/evaluations", tags=["evaluations"])


@router.get(
    "",
    response_model=list[EvaluationResponse],
    summary="List evaluations, newest first",
)
async def list_evaluations(
    committee: Optional[str] = Query(
        default=None, description="Only evaluations for this committee name"
    ),
    service: EvaluationRecorderService = Depends(get_evaluation_recorder_service),
) -> list[EvaluationResponse]:
    """List evaluations newest first, optionally for one committee."""
    evaluations = await service.list_evaluations(committee_name=committee)
    return [EvaluationResponse.model_validate(e) for e in evaluations]


@router.get("/{evaluation_id}", response_model=EvaluationResponse)
async def get_evaluation(
    evaluation_id: UUID,
    request: Request,
    service: EvaluationRecorderService = Depends(get_evaluation_recorder_service),
) -> EvaluationResponse:
    """Get one evaluation.

    Raises:
        HTTPException 404: Unknown evaluation id.
    """
    try:
        evaluation = await service.get_evaluation(evaluation_id)
    except RecordNotFoundError as e:
        raise record_not_found(e, request) from None
    return EvaluationResponse.model_validate(evaluation)


@router.post(
    "",
    response_model=EvaluationResponse,
    status_code=201,
    summary="Submit a delegate evaluation",
    description=(
        "Store a scoring submission. totalScore is the sum of the submitted "
        "points. Points outside a criterion's range are accepted."
    ),
)
async def submit_evaluation(
    request_data: EvaluationSubmitRequest,
    service: EvaluationRecorderService = Depends(get_evaluation_recorder_service),
) -> EvaluationResponse:
    """Submit an evaluation.

    Args:
        request_data: Delegate, committee name, scores and judge.
        service: Injected evaluation recorder.

    Returns:
        The stored evaluation including totalScore.
    """
    evaluation = await service.submit_evaluation(
        delegate_id=request_data.delegate_id,
        delegate_name=request_data.delegate_name,
        committee_name=request_data.committee,
        scores=request_data.scores,
        evaluated_by=request_data.evaluated_by,
        comments=request_data.comments,
    )
    return EvaluationResponse.model_validate(evaluation)


@router.patch("/{evaluation_id}", response_model=EvaluationResponse)
async def update_evaluation(
    evaluation_id: UUID,
    request_data: EvaluationUpdateRequest,
    request: Request,
    service: EvaluationRecorderService = Depends(get_evaluation_recorder_service),
) -> EvaluationResponse:
    """Edit the descriptive fields of an evaluation.

    Raises:
        HTTPException 404: Unknown evaluation id.
        HTTPException 400: A required field sent as null.
    """
    try:
        evaluation = await service.update_evaluation(
            evaluation_id, request_data.model_dump(exclude_unset=True)
        )
    except RecordNotFoundError as e:
        raise record_not_found(e, request) from None
    except RecordValidationError as e:
        raise record_invalid(e, request) from None
    return EvaluationResponse.model_validate(evaluation)


@router.delete("/{evaluation_id}", status_code=204, response_class=Response)
async def delete_evaluation(
    evaluation_id: UUID,
    request: Request,
    service: EvaluationRecorderService = Depends(get_evaluation_recorder_service),
) -> Response:
    """Delete an evaluation. Awards already granted from it stay.

    Raises:
        HTTPException 404: Unknown evaluation id.
    """
    try:
        await service.delete_evaluation(evaluation_id)
    except RecordNotFoundError as e:
        raise record_not_found(e, request) from None
    return Response(status_code=204)

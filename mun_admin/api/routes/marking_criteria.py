"""Marking criteria routes (scoring rubric), listed by order_index."""

from fastapi import APIRouter

from mun_admin.api.dependencies.conference import get_marking_criteria_service
from mun_admin.api.models.evaluation import (
    MarkingCriterionCreateRequest,
    MarkingCriterionResponse,
    MarkingCriterionUpdateRequest,
)
from mun_admin.api.routes.crud import add_record_routes

router = add_record_routes(
    APIRouter(prefix="/api/marking-criteria", tags=["marking-criteria"]),
    get_service=get_marking_criteria_service,
    create_model=MarkingCriterionCreateRequest,
    update_model=MarkingCriterionUpdateRequest,
    response_model=MarkingCriterionResponse,
    resource="marking_criteria",
)

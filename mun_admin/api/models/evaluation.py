"""Evaluation and marking criteria API models."""

from typing import Optional
from uuid import UUID

from pydantic import Field

from mun_admin.api.models.base import CamelModel, DateTimeWithZ, RecordResponse


class MarkingCriterionCreateRequest(CamelModel):
    """Request to add a rubric criterion."""

    name: str = Field(..., min_length=1, description="Criterion name")
    max_points: int = Field(..., description="Upper bound of awardable points (positive)")
    description: Optional[str] = None
    order_index: int = Field(default=0, description="Display order")


class MarkingCriterionUpdateRequest(CamelModel):
    """Partial criterion update. Stored evaluation totals never change."""

    name: Optional[str] = Field(default=None, min_length=1)
    max_points: Optional[int] = None
    description: Optional[str] = None
    order_index: Optional[int] = None


class MarkingCriterionResponse(RecordResponse):
    """A stored rubric criterion."""

    id: UUID
    name: str
    max_points: int
    description: Optional[str]
    order_index: int


class EvaluationSubmitRequest(CamelModel):
    """A scoring submission for one delegate.

    Attributes:
        delegate_id: Evaluated delegate.
        delegate_name: Delegate name snapshot.
        committee: Committee NAME; auto-assignment selects evaluations by it.
        scores: Criterion id -> awarded points; may be empty (total 0).
        comments: Optional judge comments.
        evaluated_by: Who submitted the evaluation.
    """

    delegate_id: UUID = Field(..., description="Evaluated delegate")
    delegate_name: str = Field(..., min_length=1, description="Delegate name snapshot")
    committee: str = Field(..., min_length=1, description="Committee name")
    scores: dict[str, int] = Field(..., description="Criterion id -> points")
    comments: Optional[str] = Field(default=None, description="Judge comments")
    evaluated_by: str = Field(..., min_length=1, description="Submitting judge")


class EvaluationUpdateRequest(CamelModel):
    """Partial evaluation update.

    Scores, total and timestamp are fixed at submission and cannot be sent.
    """

    delegate_name: Optional[str] = Field(default=None, min_length=1)
    committee: Optional[str] = Field(default=None, min_length=1)
    comments: Optional[str] = None
    evaluated_by: Optional[str] = Field(default=None, min_length=1)


class EvaluationResponse(RecordResponse):
    """A stored evaluation with its computed total."""

    id: UUID
    delegate_id: UUID
    delegate_name: str
    committee: str
    scores: dict[str, int]
    total_score: int = Field(..., description="Sum of scores at submission")
    comments: Optional[str]
    evaluated_by: str
    timestamp: DateTimeWithZ

"""Evaluation recorder service.

Accepts scoring submissions for delegates and stores them as new
evaluations. Every submission is a fresh record: earlier evaluations of the
same delegate are never touched, and a submission's total is fixed at the
moment it is stored.

Scoring Rules:
- total_score = sum of the submitted points
- Points are NOT rejected when they fall outside a criterion's
  [0, max_points] range; such scores are logged as a warning and stored
- An empty scores map is rejected
- After creation only delegate_name, committee, comments and evaluated_by
  may change
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Any, Optional
from uuid import UUID, uuid4

from structlog import get_logger

from mun_admin.application.ports.award_metrics import AwardMetricsProtocol
from mun_admin.application.ports.evaluation_repository import (
    EvaluationRepositoryProtocol,
)
from mun_admin.application.ports.record_store import RecordStoreProtocol
from mun_admin.application.services.record_catalog_service import utc_now
from mun_admin.domain.errors import RecordNotFoundError, RecordValidationError
from mun_admin.domain.models import (
    DelegateEvaluation,
    MarkingCriterion,
    RequiredFieldError,
)

logger = get_logger(__name__)

EVALUATION_KIND = "DelegateEvaluation"


class EvaluationRecorderService:
    """Records, lists and edits delegate evaluations.

    Attributes:
        _evaluations: Evaluation store.
        _criteria: Rubric store, consulted only to flag out-of-range scores.
        _metrics: Optional counter sink.
    """

    def __init__(
        self,
        evaluations: EvaluationRepositoryProtocol,
        criteria: RecordStoreProtocol[MarkingCriterion],
        metrics: Optional[AwardMetricsProtocol] = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """Initialize the recorder.

        Args:
            evaluations: Where evaluations are stored.
            criteria: Marking criteria used for range warnings.
            metrics: Optional metrics sink.
            clock: Source of submission timestamps.
        """
        self._evaluations = evaluations
        self._criteria = criteria
        self._metrics = metrics
        self._clock = clock

    async def submit_evaluation(
        self,
        delegate_id: UUID,
        delegate_name: str,
        committee_name: str,
        scores: Mapping[str, int],
        evaluated_by: str,
        comments: Optional[str] = None,
    ) -> DelegateEvaluation:
        """Store a new evaluation with its computed total.

        An empty scores map is stored with a total of 0.

        Args:
            delegate_id: Evaluated delegate.
            delegate_name: Delegate name snapshot.
            committee_name: Committee NAME the evaluation belongs to.
            scores: Criterion id -> awarded points.
            evaluated_by: Who submitted the evaluation.
            comments: Optional judge comments.

        Returns:
            The stored evaluation.
        """
        log = logger.bind(
            delegate_id=str(delegate_id),
            committee=committee_name,
            evaluated_by=evaluated_by,
        )

        await self._warn_out_of_range(scores, log)

        evaluation = DelegateEvaluation.create(
            evaluation_id=uuid4(),
            delegate_id=delegate_id,
            delegate_name=delegate_name,
            committee=committee_name,
            scores=scores,
            evaluated_by=evaluated_by,
            timestamp=self._clock(),
            comments=comments,
        )
        await self._evaluations.insert(evaluation)

        if self._metrics is not None:
            self._metrics.increment_evaluations_recorded()

        log.info(
            "evaluation_recorded",
            evaluation_id=str(evaluation.id),
            total_score=evaluation.total_score,
            criteria_scored=len(evaluation.scores),
        )
        return evaluation

    async def list_evaluations(
        self, committee_name: Optional[str] = None
    ) -> list[DelegateEvaluation]:
        """Return evaluations newest first, optionally for one committee name."""
        if committee_name is None:
            evaluations = await self._evaluations.list_all()
        else:
            evaluations = await self._evaluations.list_for_committee(committee_name)
        return sorted(evaluations, key=lambda e: e.timestamp, reverse=True)

    async def get_evaluation(self, evaluation_id: UUID) -> DelegateEvaluation:
        """Return one evaluation.

        Raises:
            RecordNotFoundError: If the id is unknown.
        """
        evaluation = await self._evaluations.get(evaluation_id)
        if evaluation is None:
            raise RecordNotFoundError(EVALUATION_KIND, evaluation_id)
        return evaluation

    async def update_evaluation(
        self, evaluation_id: UUID, changes: Mapping[str, Any]
    ) -> DelegateEvaluation:
        """Apply a partial update to the editable evaluation fields.

        Scores, total_score and timestamp are silently left as stored.

        Raises:
            RecordNotFoundError: If the id is unknown.
            RecordValidationError: If a required field is sent as None.
        """
        try:
            updated = await self._evaluations.update(evaluation_id, changes)
        except RequiredFieldError as e:
            raise RecordValidationError(
                EVALUATION_KIND, e.field_name, "must not be null"
            ) from e
        if updated is None:
            raise RecordNotFoundError(EVALUATION_KIND, evaluation_id)
        logger.info(
            "evaluation_updated",
            evaluation_id=str(evaluation_id),
            fields=sorted(changes),
        )
        return updated

    async def delete_evaluation(self, evaluation_id: UUID) -> None:
        """Remove an evaluation.

        Raises:
            RecordNotFoundError: If the id is unknown.
        """
        if not await self._evaluations.delete(evaluation_id):
            raise RecordNotFoundError(EVALUATION_KIND, evaluation_id)
        logger.info("evaluation_deleted", evaluation_id=str(evaluation_id))

    async def _warn_out_of_range(self, scores: Mapping[str, int], log: Any) -> None:
        criteria = {str(c.id): c for c in await self._criteria.list_all()}
        for criterion_id, points in scores.items():
            criterion = criteria.get(criterion_id)
            if criterion is not None and not criterion.accepts(points):
                log.warning(
                    "score_out_of_range",
                    criterion_id=criterion_id,
                    criterion=criterion.name,
                    points=points,
                    max_points=criterion.max_points,
                )

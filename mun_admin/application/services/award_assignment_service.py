"""Award assignment service.

Hands out a committee's award tiers from its evaluations, and manages the
granted awards afterwards (manual grants, edits, deletions).

Auto-Assignment Flow:
1. Load the committee's evaluations (matched by committee NAME)
2. Rank them by total score, highest first, ties in storage order
3. Load the active award types, most prestigious first
4. If the committee (by id) already has awards and force is off, reject
   with AwardsAlreadyExistError; nothing is written
5. Otherwise delete the committee's awards and create one award per
   pairing from the domain ranking rules

Concurrency:
- No await yields to another request between the conflict check and the
  replacement when backed by the in-memory store. Concurrent forced runs
  for one committee are last-writer-wins.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Any, Optional
from uuid import UUID, uuid4

from structlog import get_logger

from mun_admin.application.ports.award_metrics import AwardMetricsProtocol
from mun_admin.application.ports.delegate_award_repository import (
    DelegateAwardRepositoryProtocol,
)
from mun_admin.application.ports.evaluation_repository import (
    EvaluationRepositoryProtocol,
)
from mun_admin.application.ports.record_store import RecordStoreProtocol
from mun_admin.application.services.record_catalog_service import utc_now
from mun_admin.domain.errors import (
    AwardsAlreadyExistError,
    RecordNotFoundError,
    RecordValidationError,
)
from mun_admin.domain.models import (
    UNKNOWN_AWARD_TYPE_ORDER,
    AwardType,
    DelegateAward,
    RequiredFieldError,
)
from mun_admin.domain.services import (
    active_award_types_in_order,
    pair_awards,
    rank_evaluations,
)

logger = get_logger(__name__)

AWARD_KIND = "DelegateAward"


class AwardAssignmentService:
    """Auto-assigns and manages delegate awards.

    Attributes:
        _evaluations: Evaluation store (read only here).
        _awards: Granted awards.
        _award_types: Award tier store (read only here).
        _metrics: Optional counter sink.
    """

    def __init__(
        self,
        evaluations: EvaluationRepositoryProtocol,
        awards: DelegateAwardRepositoryProtocol,
        award_types: RecordStoreProtocol[AwardType],
        metrics: Optional[AwardMetricsProtocol] = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """Initialize the service.

        Args:
            evaluations: Source of committee evaluations.
            awards: Where awards are stored.
            award_types: Source of award tiers.
            metrics: Optional metrics sink.
            clock: Source of award timestamps.
        """
        self._evaluations = evaluations
        self._awards = awards
        self._award_types = award_types
        self._metrics = metrics
        self._clock = clock

    async def auto_assign(
        self,
        committee_id: UUID,
        committee_name: str,
        assigned_by: str,
        force: bool = False,
    ) -> list[DelegateAward]:
        """Replace a committee's awards with a ranking-based set.

        The committee does not need to exist; an unknown committee or one
        without evaluations simply yields no awards.

        Args:
            committee_id: Committee whose awards are replaced.
            committee_name: Committee NAME used to select evaluations.
            assigned_by: Recorded on every created award.
            force: Replace existing awards instead of rejecting the run.

        Returns:
            Created awards, most prestigious first.

        Raises:
            AwardsAlreadyExistError: If awards exist and force is False.
        """
        log = logger.bind(
            committee_id=str(committee_id),
            committee_name=committee_name,
            assigned_by=assigned_by,
            force=force,
        )
        log.info("auto_assign_started")

        ranked = rank_evaluations(
            await self._evaluations.list_for_committee(committee_name)
        )
        award_types = active_award_types_in_order(await self._award_types.list_all())

        existing = await self._awards.list_for_committee(committee_id)
        if existing and not force:
            log.warning("auto_assign_rejected", existing_awards=len(existing))
            if self._metrics is not None:
                self._metrics.increment_award_assignment_conflicts()
            raise AwardsAlreadyExistError(
                committee_id=committee_id,
                committee_name=committee_name,
                existing_count=len(existing),
            )

        removed = await self._awards.delete_for_committee(committee_id)

        timestamp = self._clock()
        created: list[DelegateAward] = []
        for pairing in pair_awards(award_types, ranked):
            award = DelegateAward(
                id=uuid4(),
                committee_id=committee_id,
                committee_name=committee_name,
                award_type_id=pairing.award_type.id,
                award_type_name=pairing.award_type.name,
                delegate_id=pairing.evaluation.delegate_id,
                delegate_name=pairing.evaluation.delegate_name,
                is_auto_assigned=1,
                assigned_by=assigned_by,
                timestamp=timestamp,
            )
            created.append(await self._awards.insert(award))

        if self._metrics is not None:
            self._metrics.increment_awards_auto_assigned(len(created))

        log.info(
            "awards_auto_assigned",
            evaluations_ranked=len(ranked),
            active_award_types=len(award_types),
            awards_replaced=removed,
            awards_created=len(created),
        )
        return created

    async def list_awards(self) -> list[DelegateAward]:
        """Return every award, newest first."""
        awards = await self._awards.list_all()
        return sorted(awards, key=lambda award: award.timestamp, reverse=True)

    async def list_committee_awards(self, committee_id: UUID) -> list[DelegateAward]:
        """Return a committee's awards ordered by award type prestige.

        Awards whose type no longer exists sort last.
        """
        order = {
            award_type.id: award_type.order_index
            for award_type in await self._award_types.list_all()
        }
        awards = await self._awards.list_for_committee(committee_id)
        return sorted(
            awards,
            key=lambda award: order.get(award.award_type_id, UNKNOWN_AWARD_TYPE_ORDER),
        )

    async def get_award(self, award_id: UUID) -> DelegateAward:
        """Return one award.

        Raises:
            RecordNotFoundError: If the id is unknown.
        """
        award = await self._awards.get(award_id)
        if award is None:
            raise RecordNotFoundError(AWARD_KIND, award_id)
        return award

    async def grant_award(
        self,
        committee_id: UUID,
        committee_name: str,
        award_type_id: UUID,
        award_type_name: str,
        delegate_id: UUID,
        delegate_name: str,
        assigned_by: str,
    ) -> DelegateAward:
        """Record a manually granted award (is_auto_assigned = 0).

        Manual grants bypass the conflict check and the one-award-per-delegate
        rule; a later forced auto-assign replaces them as well.
        """
        award = DelegateAward(
            id=uuid4(),
            committee_id=committee_id,
            committee_name=committee_name,
            award_type_id=award_type_id,
            award_type_name=award_type_name,
            delegate_id=delegate_id,
            delegate_name=delegate_name,
            is_auto_assigned=0,
            assigned_by=assigned_by,
            timestamp=self._clock(),
        )
        await self._awards.insert(award)
        logger.info(
            "award_granted",
            award_id=str(award.id),
            committee_id=str(committee_id),
            award_type=award_type_name,
            delegate_id=str(delegate_id),
        )
        return award

    async def update_award(
        self, award_id: UUID, changes: Mapping[str, Any]
    ) -> DelegateAward:
        """Apply a partial update to an award.

        Raises:
            RecordNotFoundError: If the id is unknown.
            RecordValidationError: If a required field is sent as None.
        """
        try:
            updated = await self._awards.update(award_id, changes)
        except RequiredFieldError as e:
            raise RecordValidationError(
                AWARD_KIND, e.field_name, "must not be null"
            ) from e
        if updated is None:
            raise RecordNotFoundError(AWARD_KIND, award_id)
        logger.info("award_updated", award_id=str(award_id), fields=sorted(changes))
        return updated

    async def delete_award(self, award_id: UUID) -> None:
        """Remove an award.

        Raises:
            RecordNotFoundError: If the id is unknown.
        """
        if not await self._awards.delete(award_id):
            raise RecordNotFoundError(AWARD_KIND, award_id)
        logger.info("award_deleted", award_id=str(award_id))

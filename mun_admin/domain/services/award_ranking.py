"""Award ranking domain service.

This module holds the pure part of award auto-assignment: ordering the
evaluations of a committee, ordering the award tiers, and pairing the two
lists position by position.

Ranking Rules:
- Evaluations are ranked by total_score, highest first.
- Equal scores keep their storage (insertion) order. The sort key is
  ``-total_score`` only and Python's sort is stable, so no secondary key
  ever reorders ties.
- Award tiers are granted in ascending order_index; inactive tiers are
  left out.
- Tier i goes to ranked evaluation i. A delegate already paired earlier in
  the same pass is skipped and the slot stays empty; lower-ranked
  delegates are NOT pulled up into it.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from uuid import UUID

from mun_admin.domain.models.award import AwardType
from mun_admin.domain.models.evaluation import DelegateEvaluation


@dataclass(frozen=True)
class AwardPairing:
    """One award tier matched to one ranked evaluation.

    Attributes:
        award_type: The tier being granted.
        evaluation: The evaluation whose delegate receives it.
        rank: Zero-based position shared by both lists.
    """

    award_type: AwardType
    evaluation: DelegateEvaluation
    rank: int


def rank_evaluations(
    evaluations: Iterable[DelegateEvaluation],
) -> list[DelegateEvaluation]:
    """Order evaluations by total score, highest first, ties stable.

    Args:
        evaluations: Evaluations in storage order.

    Returns:
        A new list, best score first.

    Examples:
        Scores [87, 95, 87] for (Bob, Alice, Carol) rank as
        Alice, Bob, Carol: Bob stays ahead of Carol because he was stored
        first.
    """
    return sorted(evaluations, key=lambda evaluation: -evaluation.total_score)


def active_award_types_in_order(award_types: Iterable[AwardType]) -> list[AwardType]:
    """Filter to active tiers and order them by prestige.

    Args:
        award_types: Award types in any order.

    Returns:
        Active types ascending by order_index (stable for equal indexes).
    """
    return sorted(
        (award_type for award_type in award_types if award_type.active),
        key=lambda award_type: award_type.order_index,
    )


def pair_awards(
    award_types: Sequence[AwardType],
    ranked_evaluations: Sequence[DelegateEvaluation],
) -> list[AwardPairing]:
    """Pair prestige-ordered tiers with ranked evaluations by position.

    Walks both lists in lockstep. Stops as soon as the evaluations run out,
    leaving the remaining tiers unassigned. A delegate that appears more
    than once in the ranking only receives the first (most prestigious)
    tier it is paired with.

    Args:
        award_types: Active tiers, most prestigious first.
        ranked_evaluations: Evaluations from ``rank_evaluations``.

    Returns:
        Pairings in prestige order; at most one per delegate.
    """
    pairings: list[AwardPairing] = []
    assigned_delegates: set[UUID] = set()

    for rank, award_type in enumerate(award_types):
        if rank >= len(ranked_evaluations):
            break
        evaluation = ranked_evaluations[rank]
        if evaluation.delegate_id in assigned_delegates:
            continue
        pairings.append(
            AwardPairing(award_type=award_type, evaluation=evaluation, rank=rank)
        )
        assigned_delegates.add(evaluation.delegate_id)

    return pairings

"""Domain services: pure rules with no storage access."""

from mun_admin.domain.services.award_ranking import (
    AwardPairing,
    active_award_types_in_order,
    pair_awards,
    rank_evaluations,
)

__all__ = [
    "AwardPairing",
    "active_award_types_in_order",
    "pair_awards",
    "rank_evaluations",
]

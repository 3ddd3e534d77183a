"""Unit tests for the award ranking rules.

Covers evaluation ranking (highest total first, ties in storage order),
award tier ordering, and positional pairing with the duplicate-delegate
skip.
"""

from datetime import datetime, timezone
from uuid import UUID, uuid4

import pytest

from mun_admin.domain.models import AwardType, DelegateEvaluation
from mun_admin.domain.services import (
    active_award_types_in_order,
    pair_awards,
    rank_evaluations,
)

NOW = datetime(2025, 3, 1, 9, 0, tzinfo=timezone.utc)


def _evaluation(
    name: str, total: int, delegate_id: UUID | None = None
) -> DelegateEvaluation:
    return DelegateEvaluation.create(
        evaluation_id=uuid4(),
        delegate_id=delegate_id or uuid4(),
        delegate_name=name,
        committee="UNSC",
        scores={"c1": total},
        evaluated_by="Chair",
        timestamp=NOW,
    )


def _award_type(name: str, order_index: int, is_active: int = 1) -> AwardType:
    return AwardType(id=uuid4(), name=name, order_index=order_index, is_active=is_active)


@pytest.fixture
def five_award_types() -> list[AwardType]:
    return [
        _award_type("Best Delegate", 0),
        _award_type("High Commendation", 1),
        _award_type("Special Mention", 2),
        _award_type("Verbal Mention", 3),
        _award_type("Honorary Mention", 4),
    ]


class TestRankEvaluations:
    """Tests for rank_evaluations."""

    def test_highest_total_first(self) -> None:
        low = _evaluation("Low", 40)
        high = _evaluation("High", 90)
        mid = _evaluation("Mid", 70)

        ranked = rank_evaluations([low, high, mid])

        assert [e.delegate_name for e in ranked] == ["High", "Mid", "Low"]

    def test_ties_keep_storage_order(self) -> None:
        bob = _evaluation("Bob", 87)
        alice = _evaluation("Alice", 95)
        carol = _evaluation("Carol", 87)

        ranked = rank_evaluations([bob, alice, carol])

        assert [e.delegate_name for e in ranked] == ["Alice", "Bob", "Carol"]

    def test_ties_keep_storage_order_when_reversed(self) -> None:
        carol = _evaluation("Carol", 87)
        alice = _evaluation("Alice", 95)
        bob = _evaluation("Bob", 87)

        ranked = rank_evaluations([carol, alice, bob])

        assert [e.delegate_name for e in ranked] == ["Alice", "Carol", "Bob"]

    def test_empty_input(self) -> None:
        assert rank_evaluations([]) == []

    def test_does_not_mutate_input(self) -> None:
        evaluations = [_evaluation("A", 1), _evaluation("B", 2)]
        original = list(evaluations)

        rank_evaluations(evaluations)

        assert evaluations == original


class TestActiveAwardTypesInOrder:
    """Tests for active_award_types_in_order."""

    def test_sorted_by_order_index(self) -> None:
        third = _award_type("Special Mention", 2)
        first = _award_type("Best Delegate", 0)
        second = _award_type("High Commendation", 1)

        ordered = active_award_types_in_order([third, first, second])

        assert [t.name for t in ordered] == [
            "Best Delegate",
            "High Commendation",
            "Special Mention",
        ]

    def test_inactive_types_excluded(self) -> None:
        active = _award_type("Best Delegate", 0)
        inactive = _award_type("Retired", 1, is_active=0)

        assert active_award_types_in_order([inactive, active]) == [active]

    def test_equal_order_index_keeps_input_order(self) -> None:
        a = _award_type("A", 1)
        b = _award_type("B", 1)

        assert active_award_types_in_order([a, b]) == [a, b]


class TestPairAwards:
    """Tests for pair_awards."""

    def test_two_types_three_evaluations(self) -> None:
        """Alice 95, Bob 87, Carol 87 with two tiers: Alice and Bob win."""
        bob = _evaluation("Bob", 87)
        alice = _evaluation("Alice", 95)
        carol = _evaluation("Carol", 87)
        best = _award_type("Best Delegate", 0)
        high = _award_type("High Commendation", 1)

        pairings = pair_awards([best, high], rank_evaluations([bob, alice, carol]))

        assert [(p.award_type.name, p.evaluation.delegate_name) for p in pairings] == [
            ("Best Delegate", "Alice"),
            ("High Commendation", "Bob"),
        ]
        assert [p.rank for p in pairings] == [0, 1]

    def test_more_types_than_evaluations(
        self, five_award_types: list[AwardType]
    ) -> None:
        ranked = rank_evaluations([_evaluation("X", 80), _evaluation("Y", 60)])

        pairings = pair_awards(five_award_types, ranked)

        assert len(pairings) == 2
        assert [p.award_type.name for p in pairings] == [
            "Best Delegate",
            "High Commendation",
        ]

    def test_no_evaluations(self, five_award_types: list[AwardType]) -> None:
        assert pair_awards(five_award_types, []) == []

    def test_no_award_types(self) -> None:
        assert pair_awards([], [_evaluation("X", 80)]) == []

    def test_duplicate_delegate_slot_left_empty(
        self, five_award_types: list[AwardType]
    ) -> None:
        """A delegate evaluated twice gets one award; the slot is not refilled."""
        dana_id = uuid4()
        ranked = rank_evaluations(
            [
                _evaluation("Dana", 95, delegate_id=dana_id),
                _evaluation("Dana", 90, delegate_id=dana_id),
                _evaluation("Eve", 80),
            ]
        )

        pairings = pair_awards(five_award_types, ranked)

        assert [(p.award_type.name, p.evaluation.delegate_name) for p in pairings] == [
            ("Best Delegate", "Dana"),
            ("Special Mention", "Eve"),
        ]

    def test_no_delegate_receives_two_awards(
        self, five_award_types: list[AwardType]
    ) -> None:
        shared = uuid4()
        ranked = rank_evaluations(
            [_evaluation("S", score, delegate_id=shared) for score in (50, 60, 70)]
        )

        pairings = pair_awards(five_award_types, ranked)

        delegate_ids = [p.evaluation.delegate_id for p in pairings]
        assert len(delegate_ids) == len(set(delegate_ids)) == 1

"""Evaluation scoring models.

This module defines the scoring rubric and the per-delegate evaluation:
- MarkingCriterion: A named, point-capped rubric dimension
- DelegateEvaluation: One scoring submission for a delegate in a committee

Scoring Rules:
- Scores are keyed by criterion id (as a string) and are never re-validated
  against the rubric after submission.
- total_score is the sum of the submitted points, fixed at creation time.
  Later rubric edits or criterion deletions leave it untouched; scores keyed
  by a deleted criterion stay on the record as history.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import ClassVar, Optional
from uuid import UUID

from mun_admin.domain.models.record import MergeableRecord


def compute_total_score(scores: Mapping[str, int]) -> int:
    """Sum the awarded points across every criterion present in the map."""
    return sum(scores.values())


@dataclass(frozen=True, eq=True)
class MarkingCriterion(MergeableRecord):
    """A rubric dimension used to score delegate performance.

    Attributes:
        id: Unique identifier. Evaluation score maps are keyed by it.
        name: Display name (e.g. "Diplomacy & Negotiation").
        max_points: Upper bound of the points a judge should award.
        description: What the criterion measures.
        order_index: Display order; uniqueness is not enforced.
    """

    UPDATABLE_FIELDS: ClassVar[frozenset[str]] = frozenset(
        {"name", "max_points", "description", "order_index"}
    )

    id: UUID
    name: str
    max_points: int
    description: Optional[str] = field(default=None)
    order_index: int = field(default=0)

    def accepts(self, points: int) -> bool:
        """Whether ``points`` lies within ``[0, max_points]``."""
        return 0 <= points <= self.max_points


@dataclass(frozen=True)
class DelegateEvaluation(MergeableRecord):
    """A timestamped scoring submission for one delegate.

    Invariant: ``total_score`` always equals the sum of
    ``scores`` as submitted. Use ``create`` to build new evaluations.

    Attributes:
        id: Unique identifier.
        delegate_id: Soft reference to the evaluated Delegate.
        delegate_name: Delegate name snapshot at submission time.
        committee: Committee NAME (not id) the evaluation belongs to.
        scores: Criterion id -> awarded points.
        total_score: Sum of ``scores`` at creation.
        evaluated_by: Who submitted the evaluation.
        timestamp: Creation time (UTC), immutable.
        comments: Optional judge comments.
    """

    UPDATABLE_FIELDS: ClassVar[frozenset[str]] = frozenset(
        {"delegate_name", "committee", "comments", "evaluated_by"}
    )

    id: UUID
    delegate_id: UUID
    delegate_name: str
    committee: str
    # excluded from __hash__: mappings are unhashable
    scores: Mapping[str, int] = field(hash=False)
    total_score: int
    evaluated_by: str
    timestamp: datetime
    comments: Optional[str] = field(default=None)

    def __post_init__(self) -> None:
        """Validate evaluation fields after initialization.

        Raises:
            ValueError: If the timestamp is naive.
        """
        if self.timestamp.tzinfo is None:
            raise ValueError("timestamp must be timezone-aware (UTC)")

    @classmethod
    def create(
        cls,
        *,
        evaluation_id: UUID,
        delegate_id: UUID,
        delegate_name: str,
        committee: str,
        scores: Mapping[str, int],
        evaluated_by: str,
        timestamp: datetime,
        comments: Optional[str] = None,
    ) -> "DelegateEvaluation":
        """Build an evaluation with its total computed from ``scores``.

        The scores map is copied into a read-only view, so later changes to
        the caller's dict do not leak into the stored record.
        """
        frozen_scores = MappingProxyType(dict(scores))
        return cls(
            id=evaluation_id,
            delegate_id=delegate_id,
            delegate_name=delegate_name,
            committee=committee,
            scores=frozen_scores,
            total_score=compute_total_score(frozen_scores),
            evaluated_by=evaluated_by,
            timestamp=timestamp,
            comments=comments,
        )

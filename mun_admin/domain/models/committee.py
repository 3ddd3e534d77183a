"""Committee domain model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Optional
from uuid import UUID

from mun_admin.domain.models.record import MergeableRecord


@dataclass(frozen=True, eq=True)
class Committee(MergeableRecord):
    """A simulated deliberative body with its own agenda and roster.

    Evaluations link to a committee by ``name``, awards by ``id`` and
    ``name``. Renaming a committee therefore detaches its evaluations from
    auto-assignment.
    """

    UPDATABLE_FIELDS: ClassVar[frozenset[str]] = frozenset(
        {
            "name",
            "topic",
            "agenda",
            "chairperson",
            "vice_chairperson",
            "rapporteur",
            "session_count",
            "status",
            "portfolios",
        }
    )

    id: UUID
    name: str
    topic: str
    agenda: str
    chairperson: Optional[str] = field(default=None)
    vice_chairperson: Optional[str] = field(default=None)
    rapporteur: Optional[str] = field(default=None)
    session_count: int = field(default=0)
    status: str = field(default="planning")
    portfolios: Optional[str] = field(default=None)

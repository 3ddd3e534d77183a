"""Portfolio domain model.

A portfolio is a country or NGO seat that can be allocated to a delegate.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar
from uuid import UUID

from mun_admin.domain.models.record import MergeableRecord

COUNTRY_PORTFOLIO_TYPE = "Country"
NGO_PORTFOLIO_TYPE = "NGO"


@dataclass(frozen=True, eq=True)
class Portfolio(MergeableRecord):
    """A seat assignable to a delegate within a committee.

    Attributes:
        id: Unique identifier.
        name: Seat name (e.g. "France", "UNICEF").
        type: Seat kind, usually "Country" or "NGO".
        is_available: 1 while the seat is unallocated, 0 otherwise.
    """

    UPDATABLE_FIELDS: ClassVar[frozenset[str]] = frozenset(
        {"name", "type", "is_available"}
    )

    id: UUID
    name: str
    type: str
    is_available: int = 1


def portfolio_sort_key(portfolio: Portfolio) -> tuple[int, str]:
    """Countries first, then every other type, each group by name."""
    return (0 if portfolio.type == COUNTRY_PORTFOLIO_TYPE else 1, portfolio.name)

"""Application settings singleton (display formatting only)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar
from uuid import UUID

from mun_admin.domain.models.record import MergeableRecord


@dataclass(frozen=True, eq=True)
class AppSettings(MergeableRecord):
    """Currency used by the dashboard when formatting amounts."""

    UPDATABLE_FIELDS: ClassVar[frozenset[str]] = frozenset(
        {"currency", "currency_symbol"}
    )

    id: UUID
    currency: str = "USD"
    currency_symbol: str = "$"

"""In-memory repositories with committee-scoped queries.

These extend InMemoryRecordStore with the lookups the scoring and award
services need, keeping the same insertion-order guarantees.
"""

from __future__ import annotations

from uuid import UUID

from mun_admin.domain.models.award import DelegateAward
from mun_admin.domain.models.evaluation import DelegateEvaluation
from mun_admin.domain.models.settings import AppSettings
from mun_admin.infrastructure.persistence.in_memory_store import InMemoryRecordStore


class InMemoryEvaluationRepository(InMemoryRecordStore[DelegateEvaluation]):
    """In-memory implementation of EvaluationRepositoryProtocol."""

    async def list_for_committee(self, committee_name: str) -> list[DelegateEvaluation]:
        """Return evaluations whose committee name matches exactly."""
        return [
            evaluation
            for evaluation in self._records.values()
            if evaluation.committee == committee_name
        ]


class InMemoryDelegateAwardRepository(InMemoryRecordStore[DelegateAward]):
    """In-memory implementation of DelegateAwardRepositoryProtocol."""

    async def list_for_committee(self, committee_id: UUID) -> list[DelegateAward]:
        """Return awards granted in ``committee_id`` in insertion order."""
        return [
            award
            for award in self._records.values()
            if award.committee_id == committee_id
        ]

    async def delete_for_committee(self, committee_id: UUID) -> int:
        """Remove every award of ``committee_id``; return how many."""
        doomed = [
            award_id
            for award_id, award in self._records.items()
            if award.committee_id == committee_id
        ]
        for award_id in doomed:
            del self._records[award_id]
        return len(doomed)


class InMemorySettingsRepository:
    """In-memory implementation of SettingsRepositoryProtocol."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        """Initialize with optional existing settings."""
        self._settings = settings

    async def get(self) -> AppSettings | None:
        """Return the settings, or None if never saved."""
        return self._settings

    async def save(self, settings: AppSettings) -> AppSettings:
        """Replace the stored settings."""
        self._settings = settings
        return settings

    def clear(self) -> None:
        """Forget the settings (for testing)."""
        self._settings = None

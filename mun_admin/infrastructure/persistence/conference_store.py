"""Aggregate of every record collection the API serves.

One ConferenceStore instance is the whole in-memory database. The API
wires a process-wide instance through bootstrap; tests build their own
with ``ConferenceStore()`` for isolation.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields

from mun_admin.domain.models import (
    AwardType,
    Committee,
    ConferenceTask,
    ConferenceUpdate,
    Delegate,
    ExecutiveBoardMember,
    LogisticsItem,
    MarketingCampaign,
    MarkingCriterion,
    Portfolio,
    SecretariatMember,
    Sponsorship,
)
from mun_admin.infrastructure.persistence.in_memory_repositories import (
    InMemoryDelegateAwardRepository,
    InMemoryEvaluationRepository,
    InMemorySettingsRepository,
)
from mun_admin.infrastructure.persistence.in_memory_store import InMemoryRecordStore


@dataclass
class ConferenceStore:
    """All keyed collections, one per entity type."""

    portfolios: InMemoryRecordStore[Portfolio] = field(default_factory=InMemoryRecordStore)
    delegates: InMemoryRecordStore[Delegate] = field(default_factory=InMemoryRecordStore)
    committees: InMemoryRecordStore[Committee] = field(default_factory=InMemoryRecordStore)
    secretariat: InMemoryRecordStore[SecretariatMember] = field(
        default_factory=InMemoryRecordStore
    )
    executive_board: InMemoryRecordStore[ExecutiveBoardMember] = field(
        default_factory=InMemoryRecordStore
    )
    tasks: InMemoryRecordStore[ConferenceTask] = field(default_factory=InMemoryRecordStore)
    logistics: InMemoryRecordStore[LogisticsItem] = field(default_factory=InMemoryRecordStore)
    marketing: InMemoryRecordStore[MarketingCampaign] = field(
        default_factory=InMemoryRecordStore
    )
    sponsorships: InMemoryRecordStore[Sponsorship] = field(
        default_factory=InMemoryRecordStore
    )
    updates: InMemoryRecordStore[ConferenceUpdate] = field(
        default_factory=InMemoryRecordStore
    )
    marking_criteria: InMemoryRecordStore[MarkingCriterion] = field(
        default_factory=InMemoryRecordStore
    )
    award_types: InMemoryRecordStore[AwardType] = field(default_factory=InMemoryRecordStore)
    evaluations: InMemoryEvaluationRepository = field(
        default_factory=InMemoryEvaluationRepository
    )
    delegate_awards: InMemoryDelegateAwardRepository = field(
        default_factory=InMemoryDelegateAwardRepository
    )
    settings: InMemorySettingsRepository = field(default_factory=InMemorySettingsRepository)

    def clear(self) -> None:
        """Empty every collection (for testing)."""
        for store_field in fields(self):
            getattr(self, store_field.name).clear()

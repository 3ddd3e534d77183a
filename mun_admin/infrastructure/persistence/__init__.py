"""In-memory persistence for MUN Admin."""

from mun_admin.infrastructure.persistence.conference_store import ConferenceStore
from mun_admin.infrastructure.persistence.in_memory_repositories import (
    InMemoryDelegateAwardRepository,
    InMemoryEvaluationRepository,
    InMemorySettingsRepository,
)
from mun_admin.infrastructure.persistence.in_memory_store import InMemoryRecordStore
from mun_admin.infrastructure.persistence.seed import seed_default_records

__all__ = [
    "ConferenceStore",
    "InMemoryDelegateAwardRepository",
    "InMemoryEvaluationRepository",
    "InMemoryRecordStore",
    "InMemorySettingsRepository",
    "seed_default_records",
]

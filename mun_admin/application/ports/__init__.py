"""Application ports (interfaces implemented by infrastructure)."""

from mun_admin.application.ports.award_metrics import AwardMetricsProtocol
from mun_admin.application.ports.delegate_award_repository import (
    DelegateAwardRepositoryProtocol,
)
from mun_admin.application.ports.evaluation_repository import (
    EvaluationRepositoryProtocol,
)
from mun_admin.application.ports.record_store import RecordStoreProtocol
from mun_admin.application.ports.settings_repository import SettingsRepositoryProtocol

__all__ = [
    "AwardMetricsProtocol",
    "DelegateAwardRepositoryProtocol",
    "EvaluationRepositoryProtocol",
    "RecordStoreProtocol",
    "SettingsRepositoryProtocol",
]

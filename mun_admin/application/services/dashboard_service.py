"""Dashboard summary service.

Aggregates the headline numbers shown on the organiser dashboard.
"""

from __future__ import annotations

from dataclasses import dataclass

from mun_admin.application.ports.record_store import RecordStoreProtocol
from mun_admin.application.services.app_settings_service import AppSettingsService
from mun_admin.domain.models import (
    Committee,
    ConferenceTask,
    Delegate,
    DelegateAward,
    DelegateEvaluation,
    LogisticsItem,
    Sponsorship,
)

PENDING_TASK_STATUS = "pending"
CONFIRMED_SPONSORSHIP_STATUS = "confirmed"


@dataclass(frozen=True)
class DashboardSummary:
    """Headline conference numbers.

    Amounts are integers in the configured currency.
    """

    delegate_count: int
    committee_count: int
    pending_task_count: int
    total_sponsorship: int
    confirmed_sponsorship_count: int
    total_logistics_cost: int
    evaluation_count: int
    award_count: int
    currency: str
    currency_symbol: str


class DashboardService:
    """Computes the dashboard summary from the record stores."""

    def __init__(
        self,
        delegates: RecordStoreProtocol[Delegate],
        committees: RecordStoreProtocol[Committee],
        tasks: RecordStoreProtocol[ConferenceTask],
        sponsorships: RecordStoreProtocol[Sponsorship],
        logistics: RecordStoreProtocol[LogisticsItem],
        evaluations: RecordStoreProtocol[DelegateEvaluation],
        awards: RecordStoreProtocol[DelegateAward],
        settings: AppSettingsService,
    ) -> None:
        self._delegates = delegates
        self._committees = committees
        self._tasks = tasks
        self._sponsorships = sponsorships
        self._logistics = logistics
        self._evaluations = evaluations
        self._awards = awards
        self._settings = settings

    async def get_summary(self) -> DashboardSummary:
        """Build the summary.

        The sponsorship total covers every sponsorship regardless of status;
        logistics items without a cost count as zero.
        """
        tasks = await self._tasks.list_all()
        sponsorships = await self._sponsorships.list_all()
        logistics = await self._logistics.list_all()
        settings = await self._settings.get_settings()

        return DashboardSummary(
            delegate_count=await self._delegates.count(),
            committee_count=await self._committees.count(),
            pending_task_count=sum(
                1 for task in tasks if task.status == PENDING_TASK_STATUS
            ),
            total_sponsorship=sum(s.amount for s in sponsorships),
            confirmed_sponsorship_count=sum(
                1 for s in sponsorships if s.status == CONFIRMED_SPONSORSHIP_STATUS
            ),
            total_logistics_cost=sum(item.cost or 0 for item in logistics),
            evaluation_count=await self._evaluations.count(),
            award_count=await self._awards.count(),
            currency=settings.currency,
            currency_symbol=settings.currency_symbol,
        )

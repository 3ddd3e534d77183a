"""App settings and dashboard API models."""

from typing import Optional
from uuid import UUID

from pydantic import Field

from mun_admin.api.models.base import CamelModel, RecordResponse


class AppSettingsUpdateRequest(CamelModel):
    """Partial settings update."""

    currency: Optional[str] = Field(default=None, min_length=1, description="ISO code")
    currency_symbol: Optional[str] = Field(default=None, min_length=1)


class AppSettingsResponse(RecordResponse):
    """Currency used when formatting amounts."""

    id: UUID
    currency: str
    currency_symbol: str


class DashboardSummaryResponse(RecordResponse):
    """Headline conference numbers."""

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

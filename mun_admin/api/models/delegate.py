"""Delegate API models, including the CSV import summary."""

from typing import Optional
from uuid import UUID

from pydantic import Field

from mun_admin.api.models.base import CamelModel, RecordResponse
from mun_admin.domain.models import DelegateStatus


class DelegateCreateRequest(CamelModel):
    """Request to register a delegate."""

    name: str = Field(..., min_length=1, description="Full name")
    school: str = Field(..., description="School or delegation")
    committee: str = Field(..., description="Committee name")
    portfolio: str = Field(..., description="Portfolio name")
    email: str = Field(..., min_length=1, description="Contact email")
    committee_id: Optional[UUID] = Field(default=None, description="Committee id")
    portfolio_id: Optional[UUID] = Field(default=None, description="Portfolio id")
    phone: Optional[str] = None
    status: DelegateStatus = DelegateStatus.REGISTERED
    performance_score: int = Field(default=0, ge=0)
    notes: Optional[str] = None


class DelegateUpdateRequest(CamelModel):
    """Partial delegate update; only the fields sent are changed."""

    name: Optional[str] = Field(default=None, min_length=1)
    school: Optional[str] = None
    committee: Optional[str] = None
    portfolio: Optional[str] = None
    email: Optional[str] = Field(default=None, min_length=1)
    committee_id: Optional[UUID] = None
    portfolio_id: Optional[UUID] = None
    phone: Optional[str] = None
    status: Optional[DelegateStatus] = None
    performance_score: Optional[int] = Field(default=None, ge=0)
    notes: Optional[str] = None


class DelegateResponse(RecordResponse):
    """A stored delegate."""

    id: UUID
    name: str
    school: str
    committee: str
    portfolio: str
    email: str
    committee_id: Optional[UUID]
    portfolio_id: Optional[UUID]
    phone: Optional[str]
    status: DelegateStatus
    performance_score: int
    notes: Optional[str]


class DelegateImportResponse(RecordResponse):
    """Outcome of a CSV import."""

    imported: int = Field(..., description="Delegates created")
    skipped: int = Field(..., description="Rows rejected")
    delegates: list[DelegateResponse] = Field(..., description="Created delegates")

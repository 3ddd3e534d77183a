"""Award type and delegate award API models."""

from typing import Optional
from uuid import UUID

from pydantic import Field

from mun_admin.api.models.base import CamelModel, DateTimeWithZ, RecordResponse

DEFAULT_ASSIGNED_BY = "Executive Board"


class AwardTypeCreateRequest(CamelModel):
    """Request to add an award tier."""

    name: str = Field(..., min_length=1, description="Tier name, e.g. Best Delegate")
    order_index: int = Field(..., description="Lower is more prestigious")
    is_active: int = Field(default=1, description="1 to take part in auto-assignment")
    description: Optional[str] = None


class AwardTypeUpdateRequest(CamelModel):
    """Partial award type update. Granted awards keep their type name."""

    name: Optional[str] = Field(default=None, min_length=1)
    order_index: Optional[int] = None
    is_active: Optional[int] = None
    description: Optional[str] = None


class AwardTypeResponse(RecordResponse):
    """A stored award tier."""

    id: UUID
    name: str
    order_index: int
    is_active: int
    description: Optional[str]


class AutoAssignRequest(CamelModel):
    """Request to hand out a committee's awards from its evaluations.

    Attributes:
        committee_id: Committee whose awards are replaced.
        committee_name: Committee name; evaluations are matched on it.
        assigned_by: Recorded on every created award.
        force: Replace existing awards instead of failing with 409.
    """

    committee_id: UUID = Field(..., description="Committee whose awards are replaced")
    committee_name: str = Field(..., min_length=1, description="Committee name")
    assigned_by: str = Field(default=DEFAULT_ASSIGNED_BY, min_length=1)
    force: bool = Field(default=False, description="Replace existing awards")


class DelegateAwardCreateRequest(CamelModel):
    """Request to grant an award manually."""

    committee_id: UUID
    committee_name: str = Field(..., min_length=1)
    award_type_id: UUID
    award_type_name: str = Field(..., min_length=1)
    delegate_id: UUID
    delegate_name: str = Field(..., min_length=1)
    assigned_by: str = Field(default=DEFAULT_ASSIGNED_BY, min_length=1)


class DelegateAwardUpdateRequest(CamelModel):
    """Partial award update; only the fields sent are changed."""

    committee_id: Optional[UUID] = None
    committee_name: Optional[str] = Field(default=None, min_length=1)
    award_type_id: Optional[UUID] = None
    award_type_name: Optional[str] = Field(default=None, min_length=1)
    delegate_id: Optional[UUID] = None
    delegate_name: Optional[str] = Field(default=None, min_length=1)
    assigned_by: Optional[str] = Field(default=None, min_length=1)


class DelegateAwardResponse(RecordResponse):
    """A granted award."""

    id: UUID
    committee_id: UUID
    committee_name: str
    award_type_id: UUID
    award_type_name: str
    delegate_id: UUID
    delegate_name: str
    is_auto_assigned: int = Field(..., description="1 when created by auto-assign")
    assigned_by: str
    timestamp: DateTimeWithZ

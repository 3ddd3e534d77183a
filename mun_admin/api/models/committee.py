"""Committee API models."""

from typing import Optional
from uuid import UUID

from pydantic import Field

from mun_admin.api.models.base import CamelModel, RecordResponse


class CommitteeCreateRequest(CamelModel):
    """Request to create a committee."""

    name: str = Field(..., min_length=1, description="Committee name; evaluations match on it")
    topic: str
    agenda: str
    chairperson: Optional[str] = None
    vice_chairperson: Optional[str] = None
    rapporteur: Optional[str] = None
    session_count: int = Field(default=0, ge=0)
    status: str = "planning"
    portfolios: Optional[str] = Field(default=None, description="Free-text portfolio list")


class CommitteeUpdateRequest(CamelModel):
    """Partial committee update; only the fields sent are changed."""

    name: Optional[str] = Field(default=None, min_length=1)
    topic: Optional[str] = None
    agenda: Optional[str] = None
    chairperson: Optional[str] = None
    vice_chairperson: Optional[str] = None
    rapporteur: Optional[str] = None
    session_count: Optional[int] = Field(default=None, ge=0)
    status: Optional[str] = None
    portfolios: Optional[str] = None


class CommitteeResponse(RecordResponse):
    """A stored committee."""

    id: UUID
    name: str
    topic: str
    agenda: str
    chairperson: Optional[str]
    vice_chairperson: Optional[str]
    rapporteur: Optional[str]
    session_count: int
    status: str
    portfolios: Optional[str]

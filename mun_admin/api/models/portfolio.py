"""Portfolio API models."""

from typing import Optional
from uuid import UUID

from pydantic import Field

from mun_admin.api.models.base import CamelModel, RecordResponse


class PortfolioCreateRequest(CamelModel):
    """Request to add a country or NGO seat."""

    name: str = Field(..., min_length=1, description="Seat name, e.g. France")
    type: str = Field(..., min_length=1, description="Country, NGO or free text")
    is_available: int = Field(default=1, ge=0, le=1, description="1 while unallocated")


class PortfolioUpdateRequest(CamelModel):
    """Partial portfolio update; only the fields sent are changed."""

    name: Optional[str] = Field(default=None, min_length=1)
    type: Optional[str] = Field(default=None, min_length=1)
    is_available: Optional[int] = Field(default=None, ge=0, le=1)


class PortfolioResponse(RecordResponse):
    """A stored portfolio."""

    id: UUID
    name: str
    type: str
    is_available: int

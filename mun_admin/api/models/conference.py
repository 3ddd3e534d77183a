"""API models for the conference operations records.

Secretariat, executive board, tasks, logistics, marketing, sponsorships
and public updates. Each has a create request, a partial update request
(only the fields sent are changed) and a response.
"""

from typing import Optional
from uuid import UUID

from pydantic import Field

from mun_admin.api.models.base import CamelModel, DateTimeWithZ, RecordResponse


class SecretariatMemberCreateRequest(CamelModel):
    name: str = Field(..., min_length=1)
    position: str
    department: str
    email: str
    phone: Optional[str] = None
    responsibilities: Optional[str] = None


class SecretariatMemberUpdateRequest(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1)
    position: Optional[str] = None
    department: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    responsibilities: Optional[str] = None


class SecretariatMemberResponse(RecordResponse):
    id: UUID
    name: str
    position: str
    department: str
    email: str
    phone: Optional[str]
    responsibilities: Optional[str]


class ExecutiveBoardMemberCreateRequest(CamelModel):
    position: str
    name: str = Field(..., min_length=1)
    responsibilities: str
    email: str
    department: Optional[str] = None
    reports_to: Optional[str] = None


class ExecutiveBoardMemberUpdateRequest(CamelModel):
    position: Optional[str] = None
    name: Optional[str] = Field(default=None, min_length=1)
    responsibilities: Optional[str] = None
    email: Optional[str] = None
    department: Optional[str] = None
    reports_to: Optional[str] = None


class ExecutiveBoardMemberResponse(RecordResponse):
    id: UUID
    position: str
    name: str
    responsibilities: str
    email: str
    department: Optional[str]
    reports_to: Optional[str]


class ConferenceTaskCreateRequest(CamelModel):
    title: str = Field(..., min_length=1)
    assignee: str
    category: str
    description: Optional[str] = None
    status: str = "pending"
    priority: str = "medium"
    due_date: Optional[DateTimeWithZ] = None


class ConferenceTaskUpdateRequest(CamelModel):
    title: Optional[str] = Field(default=None, min_length=1)
    assignee: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None
    priority: Optional[str] = None
    due_date: Optional[DateTimeWithZ] = None


class ConferenceTaskResponse(RecordResponse):
    id: UUID
    title: str
    assignee: str
    category: str
    description: Optional[str]
    status: str
    priority: str
    due_date: Optional[DateTimeWithZ]


class LogisticsItemCreateRequest(CamelModel):
    category: str
    item: str = Field(..., min_length=1)
    quantity: int = Field(..., ge=0)
    status: str = "pending"
    vendor: Optional[str] = None
    cost: Optional[int] = Field(default=None, ge=0, description="Whole currency units")
    notes: Optional[str] = None


class LogisticsItemUpdateRequest(CamelModel):
    category: Optional[str] = None
    item: Optional[str] = Field(default=None, min_length=1)
    quantity: Optional[int] = Field(default=None, ge=0)
    status: Optional[str] = None
    vendor: Optional[str] = None
    cost: Optional[int] = Field(default=None, ge=0)
    notes: Optional[str] = None


class LogisticsItemResponse(RecordResponse):
    id: UUID
    category: str
    item: str
    quantity: int
    status: str
    vendor: Optional[str]
    cost: Optional[int]
    notes: Optional[str]


class MarketingCampaignCreateRequest(CamelModel):
    campaign: str = Field(..., min_length=1)
    platform: str
    reach: int = Field(default=0, ge=0)
    status: str = "planning"
    start_date: Optional[DateTimeWithZ] = None
    end_date: Optional[DateTimeWithZ] = None
    best_time_to_post: Optional[str] = None
    content_type: Optional[str] = None
    engagement: int = Field(default=0, ge=0)
    notes: Optional[str] = None


class MarketingCampaignUpdateRequest(CamelModel):
    campaign: Optional[str] = Field(default=None, min_length=1)
    platform: Optional[str] = None
    reach: Optional[int] = Field(default=None, ge=0)
    status: Optional[str] = None
    start_date: Optional[DateTimeWithZ] = None
    end_date: Optional[DateTimeWithZ] = None
    best_time_to_post: Optional[str] = None
    content_type: Optional[str] = None
    engagement: Optional[int] = Field(default=None, ge=0)
    notes: Optional[str] = None


class MarketingCampaignResponse(RecordResponse):
    id: UUID
    campaign: str
    platform: str
    reach: int
    status: str
    start_date: Optional[DateTimeWithZ]
    end_date: Optional[DateTimeWithZ]
    best_time_to_post: Optional[str]
    content_type: Optional[str]
    engagement: int
    notes: Optional[str]


class SponsorshipCreateRequest(CamelModel):
    sponsor: str = Field(..., min_length=1)
    tier: str
    amount: int = Field(..., ge=0, description="Whole currency units")
    contact: str
    email: str
    phone: Optional[str] = None
    benefits: Optional[str] = None
    status: str = "pending"


class SponsorshipUpdateRequest(CamelModel):
    sponsor: Optional[str] = Field(default=None, min_length=1)
    tier: Optional[str] = None
    amount: Optional[int] = Field(default=None, ge=0)
    contact: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    benefits: Optional[str] = None
    status: Optional[str] = None


class SponsorshipResponse(RecordResponse):
    id: UUID
    sponsor: str
    tier: str
    amount: int
    contact: str
    email: str
    phone: Optional[str]
    benefits: Optional[str]
    status: str


class ConferenceUpdateCreateRequest(CamelModel):
    """Announcement; the server stamps the timestamp."""

    title: str = Field(..., min_length=1)
    content: str
    category: str
    author: str


class ConferenceUpdateUpdateRequest(CamelModel):
    title: Optional[str] = Field(default=None, min_length=1)
    content: Optional[str] = None
    category: Optional[str] = None
    author: Optional[str] = None


class ConferenceUpdateResponse(RecordResponse):
    id: UUID
    title: str
    content: str
    category: str
    author: str
    timestamp: DateTimeWithZ

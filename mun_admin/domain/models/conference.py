"""Conference operations records.

Plain records behind the organiser dashboard pages: secretariat and
executive board rosters, task tracking, logistics, marketing, sponsorships
and public updates. None of them take part in scoring or awards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import ClassVar, Optional
from uuid import UUID

from mun_admin.domain.models.record import MergeableRecord


@dataclass(frozen=True, eq=True)
class SecretariatMember(MergeableRecord):
    """A member of the conference secretariat."""

    UPDATABLE_FIELDS: ClassVar[frozenset[str]] = frozenset(
        {"name", "position", "department", "email", "phone", "responsibilities"}
    )

    id: UUID
    name: str
    position: str
    department: str
    email: str
    phone: Optional[str] = field(default=None)
    responsibilities: Optional[str] = field(default=None)


@dataclass(frozen=True, eq=True)
class ExecutiveBoardMember(MergeableRecord):
    """A member of the executive board."""

    UPDATABLE_FIELDS: ClassVar[frozenset[str]] = frozenset(
        {"position", "name", "responsibilities", "department", "email", "reports_to"}
    )

    id: UUID
    position: str
    name: str
    responsibilities: str
    email: str
    department: Optional[str] = field(default=None)
    reports_to: Optional[str] = field(default=None)


@dataclass(frozen=True, eq=True)
class ConferenceTask(MergeableRecord):
    """An organiser to-do item."""

    UPDATABLE_FIELDS: ClassVar[frozenset[str]] = frozenset(
        {"title", "description", "assignee", "status", "priority", "due_date", "category"}
    )

    id: UUID
    title: str
    assignee: str
    category: str
    description: Optional[str] = field(default=None)
    status: str = field(default="pending")
    priority: str = field(default="medium")
    due_date: Optional[datetime] = field(default=None)


@dataclass(frozen=True, eq=True)
class LogisticsItem(MergeableRecord):
    """A procured item (venue, catering, printing, ...)."""

    UPDATABLE_FIELDS: ClassVar[frozenset[str]] = frozenset(
        {"category", "item", "quantity", "status", "vendor", "cost", "notes"}
    )

    id: UUID
    category: str
    item: str
    quantity: int
    status: str = field(default="pending")
    vendor: Optional[str] = field(default=None)
    cost: Optional[int] = field(default=None)
    notes: Optional[str] = field(default=None)


@dataclass(frozen=True, eq=True)
class MarketingCampaign(MergeableRecord):
    """A promotional campaign on one platform."""

    UPDATABLE_FIELDS: ClassVar[frozenset[str]] = frozenset(
        {
            "campaign",
            "platform",
            "reach",
            "status",
            "start_date",
            "end_date",
            "best_time_to_post",
            "content_type",
            "engagement",
            "notes",
        }
    )

    id: UUID
    campaign: str
    platform: str
    reach: int = field(default=0)
    status: str = field(default="planning")
    start_date: Optional[datetime] = field(default=None)
    end_date: Optional[datetime] = field(default=None)
    best_time_to_post: Optional[str] = field(default=None)
    content_type: Optional[str] = field(default=None)
    engagement: int = field(default=0)
    notes: Optional[str] = field(default=None)


@dataclass(frozen=True, eq=True)
class Sponsorship(MergeableRecord):
    """A sponsor commitment."""

    UPDATABLE_FIELDS: ClassVar[frozenset[str]] = frozenset(
        {"sponsor", "tier", "amount", "contact", "email", "phone", "benefits", "status"}
    )

    id: UUID
    sponsor: str
    tier: str
    amount: int
    contact: str
    email: str
    phone: Optional[str] = field(default=None)
    benefits: Optional[str] = field(default=None)
    status: str = field(default="pending")


@dataclass(frozen=True, eq=True)
class ConferenceUpdate(MergeableRecord):
    """A public announcement. The timestamp is set once on creation."""

    UPDATABLE_FIELDS: ClassVar[frozenset[str]] = frozenset(
        {"title", "content", "category", "author"}
    )

    id: UUID
    title: str
    content: str
    category: str
    author: str
    timestamp: datetime

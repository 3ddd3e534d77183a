"""Delegate domain model.

Delegates reference their committee and portfolio through soft
id + denormalized-name pairs. Nothing enforces that the ids resolve.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Optional
from uuid import UUID

from mun_admin.domain.models.record import MergeableRecord


class DelegateStatus(str, Enum):
    """Registration lifecycle of a delegate."""

    REGISTERED = "registered"
    CONFIRMED = "confirmed"
    CHECKED_IN = "checked-in"


@dataclass(frozen=True, eq=True)
class Delegate(MergeableRecord):
    """A registered conference participant.

    Attributes:
        id: Unique identifier.
        name: Full name.
        school: School or delegation the delegate represents.
        committee: Denormalized committee name.
        portfolio: Denormalized portfolio name.
        email: Contact email.
        committee_id: Soft reference to a Committee.
        portfolio_id: Soft reference to a Portfolio.
        phone: Optional contact phone.
        status: Registration status.
        performance_score: Free-form score kept on the delegate card.
        notes: Organiser notes.
    """

    UPDATABLE_FIELDS: ClassVar[frozenset[str]] = frozenset(
        {
            "name",
            "school",
            "committee",
            "portfolio",
            "email",
            "committee_id",
            "portfolio_id",
            "phone",
            "status",
            "performance_score",
            "notes",
        }
    )

    id: UUID
    name: str
    school: str
    committee: str
    portfolio: str
    email: str
    committee_id: Optional[UUID] = field(default=None)
    portfolio_id: Optional[UUID] = field(default=None)
    phone: Optional[str] = field(default=None)
    status: DelegateStatus = field(default=DelegateStatus.REGISTERED)
    performance_score: int = field(default=0)
    notes: Optional[str] = field(default=None)

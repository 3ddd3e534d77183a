"""Award domain models.

- AwardType: A recognition tier; lower order_index means more prestigious
- DelegateAward: One award granted to one delegate in one committee
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import ClassVar, Optional
from uuid import UUID

from mun_admin.domain.models.record import MergeableRecord

# Sort position for awards whose type has since been deleted
UNKNOWN_AWARD_TYPE_ORDER = 999


@dataclass(frozen=True, eq=True)
class AwardType(MergeableRecord):
    """A named recognition tier.

    Attributes:
        id: Unique identifier.
        name: Display name (e.g. "Best Delegate").
        order_index: Assignment priority; index 0 is granted first.
        is_active: 1 to take part in auto-assignment, 0 to sit it out.
        description: Optional description.
    """

    UPDATABLE_FIELDS: ClassVar[frozenset[str]] = frozenset(
        {"name", "description", "order_index", "is_active"}
    )

    id: UUID
    name: str
    order_index: int
    is_active: int = field(default=1)
    description: Optional[str] = field(default=None)

    @property
    def active(self) -> bool:
        """Whether this tier takes part in auto-assignment."""
        return self.is_active == 1


@dataclass(frozen=True, eq=True)
class DelegateAward(MergeableRecord):
    """An award granted to a delegate within a committee.

    Award type and delegate are referenced by id plus a denormalized name,
    so deleting either leaves the award readable.

    Attributes:
        id: Unique identifier.
        committee_id: Committee the award belongs to.
        committee_name: Committee name snapshot.
        award_type_id: Granted AwardType.
        award_type_name: Award type name snapshot.
        delegate_id: Recipient Delegate.
        delegate_name: Recipient name snapshot.
        is_auto_assigned: 1 when created by auto-assignment, 0 when manual.
        assigned_by: Who granted the award.
        timestamp: When the award was granted (UTC).
    """

    UPDATABLE_FIELDS: ClassVar[frozenset[str]] = frozenset(
        {
            "committee_id",
            "committee_name",
            "award_type_id",
            "award_type_name",
            "delegate_id",
            "delegate_name",
            "assigned_by",
        }
    )

    id: UUID
    committee_id: UUID
    committee_name: str
    award_type_id: UUID
    award_type_name: str
    delegate_id: UUID
    delegate_name: str
    is_auto_assigned: int
    assigned_by: str
    timestamp: datetime

    def __post_init__(self) -> None:
        """Validate award fields after initialization.

        Raises:
            ValueError: If the timestamp is naive.
        """
        if self.timestamp.tzinfo is None:
            raise ValueError("timestamp must be timezone-aware (UTC)")

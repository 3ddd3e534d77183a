"""Award assignment errors.

Auto-assignment replaces every award of a committee. Running it against a
committee that already has awards requires an explicit force flag; the
rejection must be distinguishable from validation failures so the caller
can offer a force-retry.
"""

from __future__ import annotations

from uuid import UUID

from mun_admin.domain.exceptions import MunAdminError


class AwardAssignmentError(MunAdminError):
    """Base error for award assignment operations."""

    pass


class AwardsAlreadyExistError(AwardAssignmentError):
    """Raised when auto-assign is run without force on an awarded committee.

    No awards were created or deleted. Retrying with force=True replaces
    the existing set.

    HTTP Status: 409 Conflict

    Attributes:
        committee_id: The committee that already has awards.
        committee_name: Denormalized committee name from the request.
        existing_count: Number of awards currently granted.
    """

    def __init__(
        self,
        committee_id: UUID,
        committee_name: str,
        existing_count: int,
    ) -> None:
        """Initialize the error.

        Args:
            committee_id: The committee that already has awards.
            committee_name: Denormalized committee name from the request.
            existing_count: Number of awards currently granted.
        """
        self.committee_id = committee_id
        self.committee_name = committee_name
        self.existing_count = existing_count
        super().__init__(
            f"Awards already exist for committee {committee_name} "
            f"({existing_count} granted); use force to replace them"
        )

    def to_rfc7807_dict(self) -> dict:
        """Serialize to RFC 7807 problem details format.

        Returns:
            Problem details dict without the request-specific instance field.
        """
        return {
            "type": "urn:mun-admin:awards:already-exist",
            "title": "Awards Already Exist",
            "status": 409,
            "detail": str(self),
            "committee_id": str(self.committee_id),
            "committee_name": self.committee_name,
            "existing_count": self.existing_count,
        }

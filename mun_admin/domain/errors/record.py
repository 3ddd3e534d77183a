"""Record store errors.

These errors cover the generic CRUD surface: addressing a record that does
not exist, and submitting data that passes schema validation but breaks a
domain rule.
"""

from __future__ import annotations

from uuid import UUID

from mun_admin.domain.exceptions import MunAdminError


class RecordError(MunAdminError):
    """Base error for record store operations."""

    pass


class RecordNotFoundError(RecordError):
    """Raised when an operation addresses a record id that doesn't exist.

    HTTP Status: 404 Not Found

    Attributes:
        kind: Human-readable record kind (e.g. "Delegate").
        record_id: The id that was not found.
    """

    def __init__(self, kind: str, record_id: UUID) -> None:
        """Initialize the error.

        Args:
            kind: Human-readable record kind.
            record_id: The id that was not found.
        """
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"{kind} not found: {record_id}")


class RecordValidationError(RecordError):
    """Raised when submitted data breaks a domain rule.

    Schema-level problems (missing fields, wrong types) are rejected by the
    API models before reaching the domain. This error covers rules the
    schema cannot express, such as a non-positive max_points or a required
    field sent as null.

    HTTP Status: 400 Bad Request

    Attributes:
        kind: Human-readable record kind.
        field: Name of the offending field.
        reason: Why the value was rejected.
    """

    def __init__(self, kind: str, field: str, reason: str) -> None:
        """Initialize the error.

        Args:
            kind: Human-readable record kind.
            field: Name of the offending field.
            reason: Why the value was rejected.
        """
        self.kind = kind
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid {kind} data: {field} {reason}")


class DelegateImportError(RecordError):
    """Raised when a CSV import cannot be parsed at all.

    Individual bad rows are skipped and counted; this error is reserved for
    input with no usable header row.

    HTTP Status: 400 Bad Request
    """

    def __init__(self, reason: str) -> None:
        """Initialize the error.

        Args:
            reason: Why the CSV payload was rejected.
        """
        self.reason = reason
        super().__init__(f"Delegate import failed: {reason}")

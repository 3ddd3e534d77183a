"""Generic CRUD service over one record collection.

Most entity types (portfolios, committees, tasks, sponsorships, ...) need
nothing beyond create / read / partial update / delete. This service wraps
a RecordStoreProtocol with:
- fresh ids (and optionally a creation timestamp) on create
- RecordNotFoundError for unknown ids
- an optional display ordering for list_records

Subclasses add entity-specific rules by overriding ``_validate``.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import datetime, timezone
from typing import Any, Generic, Optional, TypeVar
from uuid import UUID, uuid4

from structlog import get_logger

from mun_admin.application.ports.record_store import RecordStoreProtocol
from mun_admin.domain.errors import RecordNotFoundError, RecordValidationError
from mun_admin.domain.models import RequiredFieldError

logger = get_logger(__name__)

RecordT = TypeVar("RecordT")


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class RecordCatalogService(Generic[RecordT]):
    """Create, read, update and delete records of one type.

    Attributes:
        kind: Human-readable record kind used in errors and logs.
    """

    def __init__(
        self,
        store: RecordStoreProtocol[RecordT],
        record_type: Callable[..., RecordT],
        kind: str,
        sort_key: Optional[Callable[[RecordT], Any]] = None,
        newest_first: bool = False,
        timestamp_field: Optional[str] = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """Initialize the service.

        Args:
            store: Collection holding the records.
            record_type: Record class; called with ``id=`` plus the create fields.
            kind: Human-readable record kind (e.g. "Committee").
            sort_key: Optional key applied by list_records.
            newest_first: Reverse the sort_key ordering.
            timestamp_field: Field stamped with the current time on create.
            clock: Source of the current time.
        """
        self._store = store
        self._record_type = record_type
        self.kind = kind
        self._sort_key = sort_key
        self._newest_first = newest_first
        self._timestamp_field = timestamp_field
        self._clock = clock

    async def list_records(self) -> list[RecordT]:
        """Return every record in display order."""
        records = await self._store.list_all()
        if self._sort_key is None:
            return records
        return sorted(records, key=self._sort_key, reverse=self._newest_first)

    async def get_record(self, record_id: UUID) -> RecordT:
        """Return one record.

        Raises:
            RecordNotFoundError: If ``record_id`` is unknown.
        """
        record = await self._store.get(record_id)
        if record is None:
            raise RecordNotFoundError(self.kind, record_id)
        return record

    async def create_record(self, fields: Mapping[str, Any]) -> RecordT:
        """Build and store a new record with a fresh id.

        Args:
            fields: Field values excluding ``id``.

        Returns:
            The stored record.

        Raises:
            RecordValidationError: If the fields break a domain rule.
        """
        self._validate(fields)
        values = dict(fields)
        if self._timestamp_field is not None:
            values[self._timestamp_field] = self._clock()
        try:
            record = self._record_type(id=uuid4(), **values)
        except ValueError as e:
            raise RecordValidationError(self.kind, "record", str(e)) from e
        stored = await self._store.insert(record)
        logger.debug("record_created", kind=self.kind, record_id=str(stored.id))  # type: ignore[attr-defined]
        return stored

    async def update_record(
        self, record_id: UUID, changes: Mapping[str, Any]
    ) -> RecordT:
        """Apply a partial update.

        Args:
            record_id: Record to update.
            changes: Only the fields to overwrite.

        Raises:
            RecordNotFoundError: If ``record_id`` is unknown.
            RecordValidationError: If the changes break a domain rule or
                clear a required field.
        """
        self._validate(changes)
        try:
            updated = await self._store.update(record_id, changes)
        except RequiredFieldError as e:
            raise RecordValidationError(
                self.kind, e.field_name, "must not be null"
            ) from e
        if updated is None:
            raise RecordNotFoundError(self.kind, record_id)
        logger.debug(
            "record_updated",
            kind=self.kind,
            record_id=str(record_id),
            fields=sorted(changes),
        )
        return updated

    async def delete_record(self, record_id: UUID) -> None:
        """Remove a record.

        Raises:
            RecordNotFoundError: If ``record_id`` is unknown.
        """
        if not await self._store.delete(record_id):
            raise RecordNotFoundError(self.kind, record_id)
        logger.debug("record_deleted", kind=self.kind, record_id=str(record_id))

    def _validate(self, fields: Mapping[str, Any]) -> None:
        """Hook for entity rules the request schema cannot express."""
        return None

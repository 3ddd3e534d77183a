"""In-memory implementation of RecordStoreProtocol.

Records are kept in a dict keyed by id. Python dicts preserve insertion
order and keep a key's position when its value is replaced, so
``list_all`` reflects creation order even after partial updates.

Thread-safety note: This store is NOT thread-safe. The API runs on a
single event loop and no method awaits between reading and writing, so
each call completes without interleaving.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Generic, TypeVar
from uuid import UUID

from mun_admin.domain.models.record import MergeableRecord

RecordT = TypeVar("RecordT", bound=MergeableRecord)


class InMemoryRecordStore(Generic[RecordT]):
    """Keyed, insertion-ordered collection of one record type."""

    def __init__(self, records: Iterable[RecordT] = ()) -> None:
        """Initialize the store, optionally pre-populated.

        Args:
            records: Records to insert in the given order.
        """
        self._records: dict[UUID, RecordT] = {}
        for record in records:
            self._records[record.id] = record  # type: ignore[attr-defined]

    async def list_all(self) -> list[RecordT]:
        """Return every record in insertion order."""
        return list(self._records.values())

    async def get(self, record_id: UUID) -> RecordT | None:
        """Return the record with ``record_id``, or None if absent."""
        return self._records.get(record_id)

    async def insert(self, record: RecordT) -> RecordT:
        """Store a new record keyed by its id.

        Raises:
            ValueError: If a record with the same id is already stored.
        """
        record_id = record.id  # type: ignore[attr-defined]
        if record_id in self._records:
            raise ValueError(f"Duplicate record id: {record_id}")
        self._records[record_id] = record
        return record

    async def update(
        self, record_id: UUID, changes: Mapping[str, Any]
    ) -> RecordT | None:
        """Shallow-merge ``changes`` into the stored record."""
        existing = self._records.get(record_id)
        if existing is None:
            return None
        updated = existing.merge(changes)
        self._records[record_id] = updated
        return updated

    async def delete(self, record_id: UUID) -> bool:
        """Remove a record; True if one was removed."""
        return self._records.pop(record_id, None) is not None

    async def count(self) -> int:
        """Return the number of stored records."""
        return len(self._records)

    def clear(self) -> None:
        """Remove every record (for testing)."""
        self._records.clear()

"""Record store port (repository pattern).

Every entity type lives in its own keyed collection supporting get-all,
get-by-id, insert, partial update and delete. Services depend on this
protocol, never on a concrete store, so tests can inject an isolated
in-memory instance.

Ordering Contract:
- ``list_all`` returns records in insertion order. Display orderings
  (newest first, by order_index, ...) are applied by services, because
  award ranking relies on storage order to break ties.
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Mapping
from typing import Any, Protocol, TypeVar
from uuid import UUID

RecordT = TypeVar("RecordT")


class RecordStoreProtocol(Protocol[RecordT]):
    """Protocol for a keyed collection of one record type."""

    @abstractmethod
    async def list_all(self) -> list[RecordT]:
        """Return every record in insertion order."""
        ...

    @abstractmethod
    async def get(self, record_id: UUID) -> RecordT | None:
        """Return the record with ``record_id``, or None if absent."""
        ...

    @abstractmethod
    async def insert(self, record: RecordT) -> RecordT:
        """Store a new record keyed by its ``id``.

        Returns:
            The stored record.
        """
        ...

    @abstractmethod
    async def update(
        self, record_id: UUID, changes: Mapping[str, Any]
    ) -> RecordT | None:
        """Shallow-merge ``changes`` into the stored record.

        Only fields present in ``changes`` are overwritten.

        Returns:
            The updated record, or None if ``record_id`` is unknown.
        """
        ...

    @abstractmethod
    async def delete(self, record_id: UUID) -> bool:
        """Remove a record.

        Returns:
            True if a record was removed, False if it did not exist.
        """
        ...

    @abstractmethod
    async def count(self) -> int:
        """Return the number of stored records."""
        ...

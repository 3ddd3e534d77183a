"""Delegate award repository port."""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol
from uuid import UUID

from mun_admin.application.ports.record_store import RecordStoreProtocol
from mun_admin.domain.models.award import DelegateAward


class DelegateAwardRepositoryProtocol(RecordStoreProtocol[DelegateAward], Protocol):
    """Store of granted awards, addressable per committee id."""

    @abstractmethod
    async def list_for_committee(self, committee_id: UUID) -> list[DelegateAward]:
        """Return awards granted in ``committee_id`` in insertion order."""
        ...

    @abstractmethod
    async def delete_for_committee(self, committee_id: UUID) -> int:
        """Remove every award granted in ``committee_id``.

        Returns:
            Number of awards removed.
        """
        ...

"""Evaluation repository port."""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol

from mun_admin.application.ports.record_store import RecordStoreProtocol
from mun_admin.domain.models.evaluation import DelegateEvaluation


class EvaluationRepositoryProtocol(RecordStoreProtocol[DelegateEvaluation], Protocol):
    """Store of delegate evaluations.

    Evaluations reference their committee by NAME, so committee lookups
    are exact string matches on the denormalized name.
    """

    @abstractmethod
    async def list_for_committee(self, committee_name: str) -> list[DelegateEvaluation]:
        """Return evaluations whose committee equals ``committee_name``.

        Args:
            committee_name: Exact committee name (case-sensitive).

        Returns:
            Matching evaluations in insertion order.
        """
        ...

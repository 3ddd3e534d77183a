"""Marking criteria (scoring rubric) service."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from mun_admin.application.ports.record_store import RecordStoreProtocol
from mun_admin.application.services.record_catalog_service import (
    RecordCatalogService,
)
from mun_admin.domain.errors import RecordValidationError
from mun_admin.domain.models import MarkingCriterion


class MarkingCriteriaService(RecordCatalogService[MarkingCriterion]):
    """Rubric criteria listed by order_index.

    Editing or deleting a criterion never touches stored evaluations;
    their totals stay as submitted.
    """

    def __init__(self, store: RecordStoreProtocol[MarkingCriterion]) -> None:
        super().__init__(
            store,
            MarkingCriterion,
            kind="MarkingCriterion",
            sort_key=lambda criterion: criterion.order_index,
        )

    def _validate(self, fields: Mapping[str, Any]) -> None:
        max_points = fields.get("max_points")
        if max_points is not None and max_points <= 0:
            raise RecordValidationError(
                self.kind, "max_points", "must be a positive integer"
            )

"""Award type registry service.

Award types are the recognition tiers handed out by auto-assignment.
Lower order_index means more prestigious. Only active types (is_active == 1)
take part in assignment; inactive ones stay listed for history.

Deleting a type leaves awards already granted with it untouched: awards
carry the type name as a snapshot.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from mun_admin.application.ports.record_store import RecordStoreProtocol
from mun_admin.application.services.record_catalog_service import (
    RecordCatalogService,
)
from mun_admin.domain.errors import RecordValidationError
from mun_admin.domain.models import AwardType
from mun_admin.domain.services import active_award_types_in_order


class AwardTypeRegistryService(RecordCatalogService[AwardType]):
    """Ordered, activatable list of award tiers."""

    def __init__(self, store: RecordStoreProtocol[AwardType]) -> None:
        super().__init__(
            store,
            AwardType,
            kind="AwardType",
            sort_key=lambda award_type: award_type.order_index,
        )

    async def list_active_ordered(self) -> list[AwardType]:
        """Return active types ascending by order_index.

        Types sharing an order_index keep their creation order.
        """
        return active_award_types_in_order(await self._store.list_all())

    def _validate(self, fields: Mapping[str, Any]) -> None:
        is_active = fields.get("is_active")
        if is_active is not None and is_active not in (0, 1):
            raise RecordValidationError(self.kind, "is_active", "must be 0 or 1")

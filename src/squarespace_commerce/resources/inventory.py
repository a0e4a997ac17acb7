"""Inventory operations."""

from __future__ import annotations

from collections.abc import Sequence

from ..exceptions import ValidationError
from ..models.inventory import AdjustStockQuantitiesRequest, InventoryResponse
from ..operations import Operation
from ..query import QueryParams
from .base import ResourceBase

LIST_INVENTORY = Operation("RetrieveAllInventory", "GET", "commerce/inventory", 200, InventoryResponse)
GET_INVENTORY = Operation(
    "RetrieveSpecificInventory", "GET", "commerce/inventory/{ids}", 200, InventoryResponse
)
ADJUST_STOCK = Operation(
    "AdjustStockQuantities", "POST", "commerce/inventory/adjustments", 204, idempotent=True
)


class InventoryResource(ResourceBase):
    """Read and adjust stock levels."""

    def list(self, params: QueryParams | None = None) -> InventoryResponse:
        return self._list(LIST_INVENTORY, params, ("cursor",))

    def get(self, variant_ids: Sequence[str]) -> InventoryResponse:
        return self._get_many(GET_INVENTORY, variant_ids, "inventory")

    def adjust(self, request: AdjustStockQuantitiesRequest) -> int:
        """Apply stock adjustments.

        The configured idempotency key is sent so a repeated call is applied
        only once by the API.
        """
        if request.is_empty():
            raise ValidationError("at least one stock adjustment operation is required")
        return self._execute(ADJUST_STOCK, payload=request)

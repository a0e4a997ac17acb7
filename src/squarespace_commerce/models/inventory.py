"""Inventory API records."""

from __future__ import annotations

from pydantic import Field

from .base import CommerceModel, Pagination


class InventoryItem(CommerceModel):
    variant_id: str | None = None
    sku: str | None = None
    descriptor: str | None = None
    is_unlimited: bool = False
    quantity: int | None = None


class InventoryResponse(CommerceModel):
    inventory: list[InventoryItem] = Field(default_factory=list)
    pagination: Pagination = Field(default_factory=Pagination)


class QuantityOperation(CommerceModel):
    variant_id: str
    quantity: int


class AdjustStockQuantitiesRequest(CommerceModel):
    increment_operations: list[QuantityOperation] | None = None
    decrement_operations: list[QuantityOperation] | None = None
    set_finite_operations: list[QuantityOperation] | None = None
    set_unlimited_operations: list[str] | None = None

    def is_empty(self) -> bool:
        return not any(
            (
                self.increment_operations,
                self.decrement_operations,
                self.set_finite_operations,
                self.set_unlimited_operations,
            )
        )

"""Schema describing important fields for CLI table rendering."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

Row = Mapping[str, Any]
ValueExtractor = Callable[[Row], Any]
ValueFormatter = Callable[[Any], str]
SortKey = Callable[[Row], Any]


@dataclass(frozen=True)
class Column:
    """Describe how to pull and format a column for Rich tables."""

    header: str
    keys: tuple[str, ...] = ()
    extractor: ValueExtractor | None = None
    formatter: ValueFormatter | None = None
    justify: str = "left"

    def render(self, row: Row) -> str:
        value: Any | None = None
        if self.keys:
            for key in self.keys:
                if key in row:
                    value = row.get(key)
                    if value is not None:
                        break
        if value is None and self.extractor:
            value = self.extractor(row)
        if value is None:
            return ""
        if self.formatter:
            formatted = self.formatter(value)
            return "" if formatted is None else str(formatted)
        return str(value)


@dataclass(frozen=True)
class TableView:
    """Describe a Rich table for a CLI command."""

    title: str
    columns: tuple[Column, ...]
    sort_key: SortKey | None = None


def _bool_formatter(value: Any) -> str:
    if value is None:
        return ""
    return "Yes" if bool(value) else "No"


def _amount_formatter(value: Any) -> str:
    if not isinstance(value, Mapping):
        return str(value)
    amount = value.get("value")
    if amount is None:
        return ""
    currency = value.get("currency") or ""
    return f"{amount} {currency}".strip()


def _list_formatter(*, max_chars: int = 24, sep: str = ", ") -> ValueFormatter:
    def _formatter(value: Any) -> str:
        if isinstance(value, (list, tuple)):
            s = sep.join(str(v) for v in value)
        else:
            s = str(value)
        return s if len(s) <= max_chars else s[: max_chars - 1] + "…"

    return _formatter


def _variant_count(row: Row) -> Any:
    variants = row.get("variants")
    if isinstance(variants, list):
        return len(variants)
    return None


def _stock_level(row: Row) -> str:
    if row.get("isUnlimited"):
        return "unlimited"
    quantity = row.get("quantity")
    return "" if quantity is None else str(quantity)


def _full_name(row: Row) -> str:
    parts = [row.get("firstName") or "", row.get("lastName") or ""]
    return " ".join(part for part in parts if part)


CLI_TABLE_VIEWS: dict[str, TableView] = {
    "products.store_pages": TableView(
        title="Store Pages",
        columns=(
            Column("Title", keys=("title",)),
            Column("Page ID", keys=("id",)),
            Column("Enabled", keys=("isEnabled",), formatter=_bool_formatter, justify="center"),
        ),
        sort_key=lambda row: str(row.get("title") or "").lower(),
    ),
    "products.list": TableView(
        title="Products",
        columns=(
            Column("Name", keys=("name",)),
            Column("Product ID", keys=("id",)),
            Column("Type", keys=("type",)),
            Column("Variants", extractor=_variant_count, justify="right"),
            Column("Visible", keys=("isVisible",), formatter=_bool_formatter, justify="center"),
            Column("Tags", keys=("tags",), formatter=_list_formatter()),
        ),
        sort_key=lambda row: str(row.get("name") or "").lower(),
    ),
    "inventory.list": TableView(
        title="Inventory",
        columns=(
            Column("SKU", keys=("sku",)),
            Column("Variant ID", keys=("variantId",)),
            Column("Descriptor", keys=("descriptor",)),
            Column("Stock", extractor=_stock_level, justify="right"),
        ),
        sort_key=lambda row: str(row.get("sku") or ""),
    ),
    "orders.list": TableView(
        title="Orders",
        columns=(
            Column("Order #", keys=("orderNumber",)),
            Column("Order ID", keys=("id",)),
            Column("Customer", keys=("customerEmail",)),
            Column("Status", keys=("fulfillmentStatus",)),
            Column("Total", keys=("grandTotal",), formatter=_amount_formatter, justify="right"),
            Column("Created", keys=("createdOn",)),
        ),
    ),
    "profiles.list": TableView(
        title="Profiles",
        columns=(
            Column("Name", extractor=_full_name),
            Column("Email", keys=("email",)),
            Column("Profile ID", keys=("id",)),
            Column("Customer", keys=("isCustomer",), formatter=_bool_formatter, justify="center"),
            Column(
                "Marketing",
                keys=("acceptsMarketing",),
                formatter=_bool_formatter,
                justify="center",
            ),
        ),
        sort_key=lambda row: str(row.get("email") or "").lower(),
    ),
    "transactions.list": TableView(
        title="Transactions",
        columns=(
            Column("Document ID", keys=("id",)),
            Column("Order ID", keys=("salesOrderId",)),
            Column("Customer", keys=("customerEmail",)),
            Column("Total", keys=("total",), formatter=_amount_formatter, justify="right"),
            Column("Voided", keys=("voided",), formatter=_bool_formatter, justify="center"),
            Column("Created", keys=("createdOn",)),
        ),
    ),
    "webhooks.list": TableView(
        title="Webhook Subscriptions",
        columns=(
            Column("Subscription ID", keys=("id",)),
            Column("Endpoint", keys=("endpointUrl",)),
            Column("Topics", keys=("topics",), formatter=_list_formatter(max_chars=40)),
            Column("Updated", keys=("updatedOn", "createdOn")),
        ),
    ),
}

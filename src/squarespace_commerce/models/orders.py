"""Orders API records."""

from __future__ import annotations

from pydantic import Field

from .base import Address, Amount, CommerceModel, Pagination


class OrderLineItem(CommerceModel):
    id: str | None = None
    variant_id: str | None = None
    product_id: str | None = None
    sku: str | None = None
    product_name: str | None = None
    quantity: int | None = None
    unit_price_paid: Amount | None = None
    line_item_type: str | None = None


class Shipment(CommerceModel):
    ship_date: str | None = None
    carrier_name: str | None = None
    service: str | None = None
    tracking_number: str | None = None
    tracking_url: str | None = None


class Order(CommerceModel):
    id: str | None = None
    order_number: str | None = None
    created_on: str | None = None
    modified_on: str | None = None
    channel: str | None = None
    channel_name: str | None = None
    testmode: bool = False
    customer_email: str | None = None
    billing_address: Address | None = None
    shipping_address: Address | None = None
    fulfillment_status: str | None = None
    line_items: list[OrderLineItem] = Field(default_factory=list)
    fulfillments: list[Shipment] = Field(default_factory=list)
    subtotal: Amount | None = None
    shipping_total: Amount | None = None
    discount_total: Amount | None = None
    tax_total: Amount | None = None
    refunded_total: Amount | None = None
    grand_total: Amount | None = None
    price_tax_interpretation: str | None = None


class OrdersResponse(CommerceModel):
    result: list[Order] = Field(default_factory=list)
    pagination: Pagination = Field(default_factory=Pagination)


class CreateOrderLineItem(CommerceModel):
    line_item_type: str = "PHYSICAL_PRODUCT"
    product_id: str | None = None
    variant_id: str | None = None
    sku: str | None = None
    product_name: str | None = None
    quantity: int
    unit_price_paid: Amount


class CreateOrderRequest(CommerceModel):
    channel_name: str
    external_order_reference: str
    customer_email: str | None = None
    shipping_address: Address | None = None
    billing_address: Address | None = None
    inventory_behavior: str | None = None
    line_items: list[CreateOrderLineItem]
    price_tax_interpretation: str | None = None
    subtotal: Amount
    shipping_total: Amount | None = None
    discount_total: Amount | None = None
    tax_total: Amount | None = None
    grand_total: Amount
    fulfillment_status: str | None = None
    created_on: str


class FulfillOrderRequest(CommerceModel):
    should_send_notification: bool = False
    shipments: list[Shipment] = Field(default_factory=list)

"""Transactions API records."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from .base import Amount, CommerceModel, Pagination


class Refund(CommerceModel):
    id: str | None = None
    amount: Amount | None = None
    refunded_on: str | None = None
    external_transaction_id: str | None = None


class FeeRefund(CommerceModel):
    id: str | None = None
    amount: Amount | None = None
    amount_gateway_currency: Amount | None = None
    exchange_rate: str | None = None
    refunded_on: str | None = None
    external_transaction_id: str | None = None


class ProcessingFee(CommerceModel):
    id: str | None = None
    amount: Amount | None = None
    amount_gateway_currency: Amount | None = None
    exchange_rate: str | None = None
    refunded_amount: Amount | None = None
    refunded_amount_gateway_currency: Amount | None = None
    net_amount: Amount | None = None
    net_amount_gateway_currency: Amount | None = None
    fee_refunds: list[FeeRefund] = Field(default_factory=list)


class Payment(CommerceModel):
    id: str | None = None
    amount: Amount | None = None
    refunded_amount: Amount | None = None
    net_amount: Amount | None = None
    credit_card_type: str | None = None
    provider: str | None = None
    refunds: list[Refund] = Field(default_factory=list)
    processing_fees: list[ProcessingFee] = Field(default_factory=list)
    gift_card_id: str | None = None
    paid_on: str | None = None
    external_transaction_id: str | None = None
    external_transaction_properties: list[Any] = Field(default_factory=list)
    external_customer_id: str | None = None


class Tax(CommerceModel):
    amount: Amount | None = None
    rate: str | None = None
    name: str | None = None
    jurisdiction: str | None = None
    description: str | None = None


class SalesLineItem(CommerceModel):
    id: str | None = None
    discount_amount: Amount | None = None
    total_sales: Amount | None = None
    total_net_sales: Amount | None = None
    total: Amount | None = None
    taxes: list[Tax] = Field(default_factory=list)


class Discount(CommerceModel):
    description: str | None = None
    name: str | None = None
    amount: Amount | None = None


class ShippingLineItem(CommerceModel):
    id: str | None = None
    amount: Amount | None = None
    discount_amount: Amount | None = None
    net_amount: Amount | None = None
    description: str | None = None
    taxes: list[Tax] = Field(default_factory=list)


class TransactionDocument(CommerceModel):
    id: str | None = None
    created_on: str | None = None
    modified_on: str | None = None
    customer_email: str | None = None
    sales_order_id: str | None = None
    voided: bool = False
    total_sales: Amount | None = None
    total_net_sales: Amount | None = None
    total_net_shipping: Amount | None = None
    total_taxes: Amount | None = None
    total: Amount | None = None
    total_net_payment: Amount | None = None
    payments: list[Payment] = Field(default_factory=list)
    sales_line_items: list[SalesLineItem] = Field(default_factory=list)
    discounts: list[Discount] = Field(default_factory=list)
    shipping_line_items: list[ShippingLineItem] = Field(default_factory=list)
    payment_gateway_error: str | None = None


class TransactionsResponse(CommerceModel):
    documents: list[TransactionDocument] = Field(default_factory=list)
    pagination: Pagination = Field(default_factory=Pagination)

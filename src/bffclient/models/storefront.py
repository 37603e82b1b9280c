"""Payload and input models for the storefront BFF operations.

Attributes are snake_case in Python and camelCase on the wire.
"""

from __future__ import annotations

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class _WireModel(BaseModel):
    model_config = {"alias_generator": to_camel, "populate_by_name": True}


# ------------------------------------------------------------------
# Records returned by the BFF
# ------------------------------------------------------------------


class Customer(_WireModel):
    id: str
    email: str
    tier: str


class CatalogItem(_WireModel):
    sku: str
    name: str
    available: bool
    list_price: float


class PriceQuote(_WireModel):
    sku: str
    quantity: int
    unit_price: float
    total_price: float


class PlaceOrderResult(_WireModel):
    order_id: str
    status: str


class ScheduleReturnResult(_WireModel):
    return_id: str
    status: str
    updated_at: str
    refund_amount: float | None = None


# ------------------------------------------------------------------
# Mutation inputs
# ------------------------------------------------------------------


class PlaceOrderInput(_WireModel):
    customer_id: str
    sku: str
    quantity: int = 1
    payment_method_id: str


class ScheduleReturnInput(_WireModel):
    order_id: str
    customer_id: str
    sku: str
    quantity: int = 1
    reason_code: str


# ------------------------------------------------------------------
# Top-level ``data`` shapes, one per operation
# ------------------------------------------------------------------


class CustomerPayload(_WireModel):
    customer: Customer | None = None


class CatalogPayload(_WireModel):
    catalog_items: list[CatalogItem] | None = None


class QuotePayload(_WireModel):
    quote_price: PriceQuote | None = None


class PlaceOrderPayload(_WireModel):
    place_order: PlaceOrderResult | None = None


class ScheduleReturnPayload(_WireModel):
    schedule_return: ScheduleReturnResult | None = None

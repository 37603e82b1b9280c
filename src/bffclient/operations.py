"""Builders for the storefront operations.

Each builder returns a fresh :class:`Operation` whose ``payload_type`` is the
model for that operation's ``data``.
"""

from __future__ import annotations

from bffclient import queries
from bffclient.models.envelope import Operation
from bffclient.models.storefront import (
    CatalogPayload,
    CustomerPayload,
    PlaceOrderInput,
    PlaceOrderPayload,
    QuotePayload,
    ScheduleReturnInput,
    ScheduleReturnPayload,
)

DEFAULT_CATALOG_LIMIT = 5
DEFAULT_QUANTITY = 1


def customer_lookup(customer_id: str) -> Operation:
    return Operation(query=queries.CUSTOMER, variables={"id": customer_id}, payload_type=CustomerPayload)


def catalog_listing(category: str | None = None, limit: int = DEFAULT_CATALOG_LIMIT) -> Operation:
    """List catalog items; an empty ``category`` means no filter and is sent as null."""
    return Operation(
        query=queries.CATALOG_ITEMS,
        variables={"category": category or None, "limit": limit},
        payload_type=CatalogPayload,
    )


def price_quote(sku: str, quantity: int = DEFAULT_QUANTITY) -> Operation:
    return Operation(
        query=queries.QUOTE_PRICE,
        variables={"sku": sku, "quantity": quantity},
        payload_type=QuotePayload,
    )


def place_order(order: PlaceOrderInput) -> Operation:
    return Operation(
        query=queries.PLACE_ORDER,
        variables={"input": order.model_dump(mode="json", by_alias=True)},
        payload_type=PlaceOrderPayload,
    )


def schedule_return(request: ScheduleReturnInput) -> Operation:
    return Operation(
        query=queries.SCHEDULE_RETURN,
        variables={"input": request.model_dump(mode="json", by_alias=True)},
        payload_type=ScheduleReturnPayload,
    )


__all__ = [
    "DEFAULT_CATALOG_LIMIT",
    "DEFAULT_QUANTITY",
    "catalog_listing",
    "customer_lookup",
    "place_order",
    "price_quote",
    "schedule_return",
]

"""Domain models for bffclient."""

from bffclient.models.envelope import Envelope, GraphQLErrorRecord, Operation
from bffclient.models.storefront import (
    CatalogItem,
    CatalogPayload,
    Customer,
    CustomerPayload,
    PlaceOrderInput,
    PlaceOrderPayload,
    PlaceOrderResult,
    PriceQuote,
    QuotePayload,
    ScheduleReturnInput,
    ScheduleReturnPayload,
    ScheduleReturnResult,
)

__all__ = [
    "CatalogItem",
    "CatalogPayload",
    "Customer",
    "CustomerPayload",
    "Envelope",
    "GraphQLErrorRecord",
    "Operation",
    "PlaceOrderInput",
    "PlaceOrderPayload",
    "PlaceOrderResult",
    "PriceQuote",
    "QuotePayload",
    "ScheduleReturnInput",
    "ScheduleReturnPayload",
    "ScheduleReturnResult",
]

"""Storefront session: composition root tying transport, orchestrator and state."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import TracebackType
from typing import Any

from pydantic import ValidationError

from bffclient import operations
from bffclient.config import ClientConfig
from bffclient.exceptions import PayloadError
from bffclient.models.envelope import Envelope, Operation
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
from bffclient.orchestrator import CallOrchestrator, CallState, OnSuccess
from bffclient.outcome import CallOutcome
from bffclient.transport import GraphQLTransport

_LOG = logging.getLogger(__name__)


def _typed(operation: Operation, data: Any) -> Any:
    if operation.payload_type is None:
        return data
    try:
        return operation.payload_type.model_validate(data)
    except ValidationError as exc:
        raise PayloadError(
            f"unexpected {operation.payload_type.__name__} payload: {exc.error_count()} invalid field(s)"
        ) from exc


@dataclass
class StorefrontState(CallState):
    """Call status plus the most recent successful result of each operation kind."""

    customer: Customer | None = None
    catalog: list[CatalogItem] | None = field(default_factory=list)
    quote: PriceQuote | None = None
    order: PlaceOrderResult | None = None
    return_result: ScheduleReturnResult | None = None


class StorefrontSession:
    """One client session against the storefront BFF.

    Each operation method runs through the orchestrator and, on success, stores
    its payload in the matching slot of :attr:`state`. Failed calls leave every
    slot as it was and report through ``state.error_text``.

    Usage::

        async with StorefrontSession(load_config()) as session:
            await session.load_customer("cust-1")
            print(session.state.customer)
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        transport: GraphQLTransport | None = None,
        state: StorefrontState | None = None,
    ) -> None:
        self.state = state or StorefrontState()
        self._transport = transport or GraphQLTransport(config)
        self._orchestrator = CallOrchestrator(self.state)

    async def __aenter__(self) -> StorefrontSession:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self._transport.aclose()

    async def load_customer(self, customer_id: str) -> CallOutcome[CustomerPayload]:
        def store(payload: CustomerPayload) -> None:
            self.state.customer = payload.customer

        return await self._run(operations.customer_lookup(customer_id), store)

    async def load_catalog(
        self, category: str | None = None, limit: int = operations.DEFAULT_CATALOG_LIMIT
    ) -> CallOutcome[CatalogPayload]:
        def store(payload: CatalogPayload) -> None:
            self.state.catalog = payload.catalog_items

        return await self._run(operations.catalog_listing(category, limit), store)

    async def quote_price(self, sku: str, quantity: int = operations.DEFAULT_QUANTITY) -> CallOutcome[QuotePayload]:
        def store(payload: QuotePayload) -> None:
            self.state.quote = payload.quote_price

        return await self._run(operations.price_quote(sku, quantity), store)

    async def place_order(self, order: PlaceOrderInput) -> CallOutcome[PlaceOrderPayload]:
        def store(payload: PlaceOrderPayload) -> None:
            self.state.order = payload.place_order

        return await self._run(operations.place_order(order), store)

    async def schedule_return(self, request: ScheduleReturnInput) -> CallOutcome[ScheduleReturnPayload]:
        def store(payload: ScheduleReturnPayload) -> None:
            self.state.return_result = payload.schedule_return

        return await self._run(operations.schedule_return(request), store)

    async def _run(self, operation: Operation, store: OnSuccess) -> CallOutcome:
        async def task() -> Envelope:
            return await self._transport.request(operation)

        def on_success(data: Any) -> None:
            store(_typed(operation, data))

        outcome = await self._orchestrator.execute(task, on_success)
        _LOG.debug("Call finished: %s", type(outcome).__name__)
        return outcome


__all__ = ["StorefrontSession", "StorefrontState"]

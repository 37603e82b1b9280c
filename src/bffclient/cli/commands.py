"""CLI command execution against a :class:`StorefrontSession`."""

from __future__ import annotations

import argparse
from typing import Any

from rich.console import Console

from bffclient.cli.common import parse_int_or_default
from bffclient.config import load_config
from bffclient.models.storefront import PlaceOrderInput, ScheduleReturnInput
from bffclient.operations import DEFAULT_CATALOG_LIMIT, DEFAULT_QUANTITY
from bffclient.outcome import CallOutcome
from bffclient.session import StorefrontSession, StorefrontState

_SLOTS = {
    "customer": "customer",
    "catalog": "catalog",
    "quote": "quote",
    "order": "order",
    "return": "return_result",
}


def result_slot(state: StorefrontState, command: str) -> Any:
    return getattr(state, _SLOTS[command])


async def dispatch(session: StorefrontSession, args: argparse.Namespace) -> CallOutcome:
    command = args.command
    if command == "customer":
        return await session.load_customer(args.customer_id)
    if command == "catalog":
        return await session.load_catalog(args.category, parse_int_or_default(args.limit, DEFAULT_CATALOG_LIMIT))
    if command == "quote":
        return await session.quote_price(args.sku, parse_int_or_default(args.quantity, DEFAULT_QUANTITY))
    if command == "order":
        order = PlaceOrderInput(
            customer_id=args.customer_id,
            sku=args.sku,
            quantity=parse_int_or_default(args.quantity, DEFAULT_QUANTITY),
            payment_method_id=args.payment_method_id,
        )
        return await session.place_order(order)
    if command == "return":
        request = ScheduleReturnInput(
            order_id=args.order_id,
            customer_id=args.customer_id,
            sku=args.sku,
            quantity=parse_int_or_default(args.quantity, DEFAULT_QUANTITY),
            reason_code=args.reason_code,
        )
        return await session.schedule_return(request)
    raise ValueError(f"unsupported command: {command}")


async def run_command(
    args: argparse.Namespace, *, status_console: Console | None = None
) -> tuple[CallOutcome, StorefrontState]:
    """Run one command in a fresh session and return its outcome and the final state.

    Raises:
        ConfigError: If the endpoint configuration is invalid.
    """
    config = load_config(base_url=args.base_url, endpoint_path=args.endpoint)
    console = status_console or Console(stderr=True)
    async with StorefrontSession(config) as session:
        with console.status("Loading..."):
            outcome = await dispatch(session, args)
        return outcome, session.state


__all__ = ["dispatch", "result_slot", "run_command"]

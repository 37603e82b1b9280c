"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version


def _package_version() -> str:
    try:
        return version("bff-client")
    except PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bffclient")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")
    parser.add_argument("--base-url", default=None, help="BFF base URL (default: $BFF_URL or http://localhost:4400)")
    parser.add_argument("--endpoint", default=None, help="GraphQL endpoint path (default: /graphql)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    customer_parser = subparsers.add_parser("customer", help="Load a customer by id")
    customer_parser.add_argument("customer_id", nargs="?", default="cust-1", help="Customer id")

    catalog_parser = subparsers.add_parser("catalog", help="List catalog items")
    catalog_parser.add_argument("--category", default="", help="Category filter (optional)")
    catalog_parser.add_argument("--limit", default="5", help="Maximum number of items (default: 5)")

    quote_parser = subparsers.add_parser("quote", help="Get a price quote")
    quote_parser.add_argument("sku", nargs="?", default="sku-1", help="SKU to quote")
    quote_parser.add_argument("--quantity", default="1", help="Quantity (default: 1)")

    order_parser = subparsers.add_parser("order", help="Place an order")
    order_parser.add_argument("--customer-id", default="cust-1", help="Customer id")
    order_parser.add_argument("--sku", default="sku-1", help="SKU to order")
    order_parser.add_argument("--quantity", default="1", help="Quantity (default: 1)")
    order_parser.add_argument("--payment-method-id", default="card-1", help="Payment method id")

    return_parser = subparsers.add_parser("return", help="Schedule a return")
    return_parser.add_argument("--order-id", default="order-1", help="Order id")
    return_parser.add_argument("--customer-id", default="cust-1", help="Customer id")
    return_parser.add_argument("--sku", default="sku-1", help="SKU to return")
    return_parser.add_argument("--quantity", default="1", help="Quantity (default: 1)")
    return_parser.add_argument("--reason-code", default="DAMAGED", help="Return reason code")

    return parser


__all__ = ["build_parser"]

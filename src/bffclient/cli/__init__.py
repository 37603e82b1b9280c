"""Command-line interface for bffclient."""

from __future__ import annotations

from bffclient.cli.app import main as main
from bffclient.cli.common import parse_int_or_default as parse_int_or_default
from bffclient.cli.parser import build_parser as build_parser

__all__ = ["build_parser", "main", "parse_int_or_default"]

"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import asyncio
import logging
import sys

from rich.console import Console

from bffclient.cli.commands import result_slot, run_command
from bffclient.cli.common import format_result
from bffclient.cli.parser import build_parser
from bffclient.exceptions import BffClientError, ConfigError
from bffclient.outcome import ApplicationError, CallOutcome, MissingData, Success, TransportFailure

EXIT_OK = 0
EXIT_UNEXPECTED = 1
EXIT_CONFIG = 2
EXIT_APPLICATION = 3
EXIT_TRANSPORT = 4


def exit_code_for(outcome: CallOutcome) -> int:
    if isinstance(outcome, Success):
        return EXIT_OK
    if isinstance(outcome, (ApplicationError, MissingData)):
        return EXIT_APPLICATION
    if isinstance(outcome, TransportFailure):
        return EXIT_TRANSPORT
    return EXIT_UNEXPECTED


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        outcome, state = asyncio.run(run_command(args))
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_CONFIG
    except BffClientError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_UNEXPECTED
    except Exception as exc:  # pragma: no cover - defensive fallback
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_UNEXPECTED

    if state.error_text:
        print(state.error_text, file=sys.stderr)
        return exit_code_for(outcome)

    Console().print_json(format_result(result_slot(state, args.command)))
    return EXIT_OK


__all__ = ["exit_code_for", "main"]

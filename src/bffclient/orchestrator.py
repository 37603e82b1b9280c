"""Call orchestrator: runs one GraphQL call and folds its outcome into caller state."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from bffclient.exceptions import CallInFlightError
from bffclient.models.envelope import Envelope
from bffclient.outcome import (
    ApplicationError,
    CallOutcome,
    MissingData,
    Success,
    TransportFailure,
    classify,
)

_LOG = logging.getLogger(__name__)

Task = Callable[[], Awaitable[Envelope]]
OnSuccess = Callable[[Any], None]


@dataclass
class CallState:
    """Caller-owned call status, mutated only by :class:`CallOrchestrator`.

    Subclasses add one result slot per operation kind.
    """

    busy: bool = False
    error_text: str = ""


class CallOrchestrator:
    """Wraps a transport task and maps its outcome onto a :class:`CallState`.

    For each :meth:`execute` the state goes ``busy=True, error_text=""``, then to
    its terminal update, then ``busy=False``. Only ``on_success`` touches result
    slots, and only for a :class:`Success` outcome.

    An exception raised by ``on_success`` is reported like a failed task: its
    message becomes ``error_text`` and the call ends as :class:`TransportFailure`.

    Args:
        state: The state object to drive.
        single_flight: When *True* (default), :meth:`execute` raises
            :class:`CallInFlightError` if ``state.busy`` is already set. When
            *False*, concurrent calls interleave their writes and the last one
            to finish decides ``busy`` and ``error_text``.
    """

    def __init__(self, state: CallState, *, single_flight: bool = True) -> None:
        self.state = state
        self._single_flight = single_flight

    async def execute(self, task: Task, on_success: OnSuccess) -> CallOutcome[Any]:
        """Run ``task`` and apply its outcome.

        Args:
            task: Zero-argument callable returning an awaitable envelope.
            on_success: Receives ``data`` when the call succeeded.

        Returns:
            The normalized outcome of the call.

        Raises:
            CallInFlightError: If single-flight is enforced and a call is pending.
        """
        if self._single_flight and self.state.busy:
            raise CallInFlightError("a call is already in flight")

        self.state.busy = True
        self.state.error_text = ""
        try:
            try:
                envelope = await task()
            except Exception as exc:
                outcome: CallOutcome[Any] = TransportFailure.from_exception(exc)
                _LOG.warning("Transport failure: %s", outcome.message)
                self.state.error_text = outcome.message
                return outcome

            outcome = classify(envelope)
            if isinstance(outcome, ApplicationError):
                _LOG.warning("GraphQL returned %d error(s)", len(outcome.messages))
                self.state.error_text = outcome.text
            elif isinstance(outcome, MissingData):
                _LOG.warning("GraphQL response carried neither data nor errors")
                self.state.error_text = outcome.text
            elif isinstance(outcome, Success):
                _LOG.debug("GraphQL call succeeded")
                try:
                    on_success(outcome.payload)
                except Exception as exc:
                    outcome = TransportFailure.from_exception(exc)
                    _LOG.warning("Applying result failed: %s", outcome.message)
                    self.state.error_text = outcome.message
            return outcome
        finally:
            self.state.busy = False


__all__ = ["CallOrchestrator", "CallState", "OnSuccess", "Task"]

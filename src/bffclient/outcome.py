"""Normalized outcome of one GraphQL call.

Every call ends in exactly one of :class:`Success`, :class:`ApplicationError`,
:class:`MissingData` or :class:`TransportFailure`. Outcomes are derived per call
and never stored.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from bffclient.models.envelope import Envelope

T = TypeVar("T")

MISSING_DATA_MESSAGE = "No data returned by GraphQL API"


@dataclass(frozen=True)
class Success(Generic[T]):
    """The server returned data and no errors."""

    payload: T


@dataclass(frozen=True)
class ApplicationError:
    """The server reported one or more errors; ``data`` is ignored."""

    messages: tuple[str, ...]

    @property
    def text(self) -> str:
        return "\n".join(self.messages)


@dataclass(frozen=True)
class MissingData:
    """The server reported no errors but returned no data either."""

    @property
    def text(self) -> str:
        return MISSING_DATA_MESSAGE


@dataclass(frozen=True)
class TransportFailure:
    """No decodable envelope was obtained."""

    message: str

    @property
    def text(self) -> str:
        return self.message

    @classmethod
    def from_exception(cls, exc: BaseException) -> TransportFailure:
        return cls(message=str(exc) or repr(exc))


CallOutcome = Union[Success[T], ApplicationError, MissingData, TransportFailure]


def classify(envelope: Envelope) -> Success[object] | ApplicationError | MissingData:
    """Normalize an envelope. Errors take precedence over data."""
    if envelope.has_errors:
        return ApplicationError(messages=tuple(envelope.error_messages))
    if envelope.data is None:
        return MissingData()
    return Success(payload=envelope.data)


def describe(outcome: CallOutcome[object]) -> str:
    """Return the error text a caller should show for ``outcome`` ("" on success)."""
    if isinstance(outcome, Success):
        return ""
    return outcome.text


__all__ = [
    "ApplicationError",
    "CallOutcome",
    "MISSING_DATA_MESSAGE",
    "MissingData",
    "Success",
    "TransportFailure",
    "classify",
    "describe",
]

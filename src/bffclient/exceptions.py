"""Errors raised by bffclient.

Everything derives from :class:`BffClientError`. Per-call failures are not
raised to callers of the session; they end up in ``CallState.error_text``.
"""

from __future__ import annotations


class BffClientError(Exception):
    """Root of the bffclient error tree."""


class ConfigError(BffClientError):
    """Raised when the client configuration is invalid."""


class TransportError(BffClientError):
    """Raised when a request never produced a decodable response envelope.

    Attributes:
        status_code: HTTP status of the response, when one was received.
    """

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class PayloadError(BffClientError):
    """Raised when successful ``data`` does not fit the operation's payload model."""


class CallInFlightError(BffClientError):
    """Raised when a call is started while another one is still pending."""

"""Tests for bffclient exception hierarchy."""

from __future__ import annotations

from bffclient.exceptions import BffClientError, CallInFlightError, ConfigError, PayloadError, TransportError


class TestExceptionHierarchy:
    """Tests for exception inheritance."""

    def test_all_exceptions_inherit_from_bff_client_error(self) -> None:
        assert issubclass(ConfigError, BffClientError)
        assert issubclass(TransportError, BffClientError)
        assert issubclass(CallInFlightError, BffClientError)
        assert issubclass(PayloadError, BffClientError)

    def test_transport_error_keeps_status_code(self) -> None:
        exc = TransportError("invalid JSON response (HTTP 502)", status_code=502)
        assert exc.status_code == 502
        assert str(exc) == "invalid JSON response (HTTP 502)"

    def test_transport_error_status_code_defaults_to_none(self) -> None:
        assert TransportError("boom").status_code is None

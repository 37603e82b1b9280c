"""httpx async transport for the BFF GraphQL endpoint."""

from __future__ import annotations

import json
import logging
from types import TracebackType
from typing import Any

import httpx
from pydantic import ValidationError

from bffclient.config import ClientConfig
from bffclient.exceptions import TransportError
from bffclient.models.envelope import Envelope, Operation

_LOG = logging.getLogger(__name__)

_JSON_HEADERS = {"content-type": "application/json"}


class GraphQLTransport:
    """Sends GraphQL operations as single JSON POSTs and decodes the envelope.

    The transport does not interpret ``errors`` or ``data``; it only turns a
    response body into an :class:`Envelope` or raises :class:`TransportError`.
    HTTP status codes are not checked because GraphQL servers routinely answer
    failed operations with a non-2xx status and a JSON error envelope.

    Use as an async context manager so a client it creates gets closed::

        async with GraphQLTransport(config) as transport:
            envelope = await transport.send("query { ping }", {})
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config or ClientConfig()
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=None)

    @property
    def endpoint_url(self) -> str:
        return self._config.endpoint_url

    async def __aenter__(self) -> GraphQLTransport:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def send(self, query: str, variables: dict[str, Any] | None = None) -> Envelope:
        """POST ``{"query", "variables"}`` and decode the response envelope.

        Args:
            query: GraphQL operation text. Must not be empty.
            variables: Mapping of variable names to JSON-serializable values.

        Returns:
            The decoded envelope, with ``data`` left untyped.

        Raises:
            ValueError: If ``query`` is empty.
            TransportError: If the request fails or the body is not a JSON envelope.
        """
        if not query:
            raise ValueError("query must be a non-empty string")

        body = {"query": query, "variables": variables or {}}
        _LOG.debug("POST %s variables=%s", self.endpoint_url, sorted(body["variables"]))
        try:
            response = await self._client.post(self.endpoint_url, json=body, headers=_JSON_HEADERS)
        except httpx.HTTPError as exc:
            raise TransportError(str(exc) or f"request to {self.endpoint_url} failed") from exc

        _LOG.debug("Response HTTP %d from %s", response.status_code, self.endpoint_url)
        return self._decode(response)

    async def request(self, operation: Operation) -> Envelope:
        """Send ``operation``; its ``data`` comes back untyped.

        Raises:
            TransportError: If the request fails or the body is not a JSON envelope.
        """
        return await self.send(operation.query, operation.variables)

    @staticmethod
    def _decode(response: httpx.Response) -> Envelope:
        try:
            raw: Any = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise TransportError(
                f"invalid JSON response (HTTP {response.status_code})",
                status_code=response.status_code,
            ) from exc

        if not isinstance(raw, dict):
            raise TransportError(
                f"response is not a JSON object (HTTP {response.status_code})",
                status_code=response.status_code,
            )
        try:
            return Envelope.model_validate(raw)
        except ValidationError as exc:
            raise TransportError(
                f"malformed response envelope (HTTP {response.status_code}): {exc}",
                status_code=response.status_code,
            ) from exc


__all__ = ["GraphQLTransport"]

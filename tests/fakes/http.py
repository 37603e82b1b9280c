"""MockTransport handlers for wire-level tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import httpx

Handler = Callable[[httpx.Request], httpx.Response]


def json_handler(body: Any, status_code: int = 200, seen: list[httpx.Request] | None = None) -> Handler:
    """A handler that always answers ``body`` as JSON."""

    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return httpx.Response(status_code, json=body)

    return handler


def request_json(request: httpx.Request) -> dict[str, Any]:
    return json.loads(request.read().decode("utf-8"))


def routing_handler(routes: dict[str, Any], seen: list[httpx.Request] | None = None) -> Handler:
    """Answer with the body of the first route whose key appears in the query text."""

    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        query = request_json(request)["query"]
        for marker, body in routes.items():
            if marker in query:
                return httpx.Response(200, json=body)
        return httpx.Response(200, json={"errors": [{"message": f"no route for {query!r}"}]})

    return handler

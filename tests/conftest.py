"""Shared test fixtures for bffclient tests."""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from bffclient.config import ClientConfig
from bffclient.transport import GraphQLTransport
from tests.fakes.http import Handler


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(base_url="http://bff.test")


@pytest.fixture
def make_transport(config: ClientConfig) -> Callable[[Handler], GraphQLTransport]:
    """Build a transport whose requests are answered by ``handler``."""

    def factory(handler: Handler) -> GraphQLTransport:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return GraphQLTransport(config, http_client=http_client)

    return factory

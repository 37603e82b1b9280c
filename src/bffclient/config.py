"""Client configuration.

:class:`ClientConfig` carries the location of the BFF GraphQL endpoint. It is
built by :func:`load_config` from explicit arguments, the ``BFF_URL``
environment variable, or the defaults, in that order.
"""

from __future__ import annotations

import os
from urllib.parse import urlparse

from pydantic import BaseModel, ValidationError, field_validator

from bffclient.exceptions import ConfigError

DEFAULT_BASE_URL = "http://localhost:4400"
DEFAULT_ENDPOINT_PATH = "/graphql"
BASE_URL_ENV_VAR = "BFF_URL"


class ClientConfig(BaseModel):
    """Where GraphQL operations are sent.

    Attributes:
        base_url: Scheme and host of the BFF (e.g. "http://localhost:4400").
        endpoint_path: Path of the single GraphQL endpoint. Default is "/graphql".
    """

    base_url: str = DEFAULT_BASE_URL
    endpoint_path: str = DEFAULT_ENDPOINT_PATH

    model_config = {"frozen": True}

    @field_validator("base_url")
    @classmethod
    def _check_base_url(cls, value: str) -> str:
        parsed = urlparse(value.strip())
        if parsed.scheme not in {"http", "https"} or not parsed.netloc:
            raise ValueError(f"base_url must be an http(s) URL, got {value!r}")
        return value.strip().rstrip("/")

    @field_validator("endpoint_path")
    @classmethod
    def _check_endpoint_path(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError(f"endpoint_path must start with '/', got {value!r}")
        return value

    @property
    def endpoint_url(self) -> str:
        return f"{self.base_url}{self.endpoint_path}"


def load_config(base_url: str | None = None, endpoint_path: str | None = None) -> ClientConfig:
    """Resolve configuration from arguments, then ``BFF_URL``, then defaults.

    Raises:
        ConfigError: If the resolved values are invalid.
    """
    resolved_base_url = base_url or (os.getenv(BASE_URL_ENV_VAR) or "").strip() or DEFAULT_BASE_URL
    try:
        return ClientConfig(
            base_url=resolved_base_url,
            endpoint_path=endpoint_path or DEFAULT_ENDPOINT_PATH,
        )
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc


__all__ = ["BASE_URL_ENV_VAR", "ClientConfig", "DEFAULT_BASE_URL", "DEFAULT_ENDPOINT_PATH", "load_config"]

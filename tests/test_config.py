"""Tests for client configuration loading."""

from __future__ import annotations

import pytest

from bffclient.config import BASE_URL_ENV_VAR, ClientConfig, load_config
from bffclient.exceptions import ConfigError


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(BASE_URL_ENV_VAR, raising=False)


def test_defaults() -> None:
    config = load_config()
    assert config.base_url == "http://localhost:4400"
    assert config.endpoint_path == "/graphql"
    assert config.endpoint_url == "http://localhost:4400/graphql"


def test_env_var_overrides_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(BASE_URL_ENV_VAR, "https://bff.example.com")
    assert load_config().endpoint_url == "https://bff.example.com/graphql"


def test_explicit_arguments_win_over_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(BASE_URL_ENV_VAR, "https://bff.example.com")
    config = load_config(base_url="http://other:8080", endpoint_path="/api/graphql")
    assert config.endpoint_url == "http://other:8080/api/graphql"


def test_blank_env_var_falls_back_to_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(BASE_URL_ENV_VAR, "   ")
    assert load_config().base_url == "http://localhost:4400"


def test_trailing_slash_is_stripped() -> None:
    assert ClientConfig(base_url="http://bff.test/").endpoint_url == "http://bff.test/graphql"


@pytest.mark.parametrize("base_url", ["localhost:4400", "ftp://bff.test", "not a url"])
def test_invalid_base_url_raises_config_error(base_url: str) -> None:
    with pytest.raises(ConfigError, match="invalid config"):
        load_config(base_url=base_url)


def test_endpoint_path_must_be_absolute() -> None:
    with pytest.raises(ConfigError, match="endpoint_path"):
        load_config(endpoint_path="graphql")

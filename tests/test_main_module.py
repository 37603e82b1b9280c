"""Entrypoint wiring: ``python -m`` targets and the console script."""

from __future__ import annotations

import importlib
import runpy
import sys
import tomllib
from pathlib import Path

import pytest


@pytest.mark.parametrize("module_name", ["bffclient", "bffclient.cli"])
def test_python_dash_m_dispatches_to_cli_main(monkeypatch: pytest.MonkeyPatch, module_name: str) -> None:
    cli_module = importlib.import_module("bffclient.cli")
    exit_codes = iter([4])
    monkeypatch.setattr(cli_module, "main", lambda: next(exit_codes))
    monkeypatch.delitem(sys.modules, f"{module_name}.__main__", raising=False)

    with pytest.raises(SystemExit) as exc_info:
        runpy.run_module(module_name, run_name="__main__")

    assert exc_info.value.code == 4


def test_importing_main_module_does_not_run_cli(monkeypatch: pytest.MonkeyPatch) -> None:
    cli_module = importlib.import_module("bffclient.cli")
    monkeypatch.setattr(cli_module, "main", lambda: pytest.fail("cli main ran on import"))
    monkeypatch.delitem(sys.modules, "bffclient.__main__", raising=False)

    importlib.import_module("bffclient.__main__")


def test_console_script_points_at_cli_main() -> None:
    pyproject = tomllib.loads((Path(__file__).resolve().parents[1] / "pyproject.toml").read_text(encoding="utf-8"))
    assert pyproject["tool"]["poetry"]["scripts"] == {"bffclient": "bffclient.cli:main"}

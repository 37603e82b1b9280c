"""Shared CLI input and output helpers."""

from __future__ import annotations

import json
import re
from typing import Any

from pydantic import BaseModel

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_int_or_default(value: str | None, fallback: int) -> int:
    """Parse the leading base-10 integer of ``value``, else return ``fallback``.

    ``"12"`` -> 12, ``" 7 items"`` -> 7, ``""`` or ``"abc"`` -> ``fallback``.
    """
    if value is None:
        return fallback
    match = _LEADING_INT.match(value)
    if match is None:
        return fallback
    return int(match.group(1))


def to_jsonable(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if isinstance(value, list):
        return [to_jsonable(item) for item in value]
    return value


def format_result(value: Any) -> str:
    return json.dumps(to_jsonable(value), indent=2)

"""Tests for wire models."""

from __future__ import annotations

import pydantic
import pytest

from bffclient.models import CatalogPayload, Envelope, Operation, ScheduleReturnPayload


def test_operation_is_frozen() -> None:
    op = Operation(query="query { ping }")
    with pytest.raises(pydantic.ValidationError):
        op.query = "query { other }"  # type: ignore[misc]


def test_operation_rejects_empty_query() -> None:
    with pytest.raises(ValueError):
        Operation(query="")


def test_error_records_keep_extra_fields() -> None:
    envelope = Envelope.model_validate(
        {"errors": [{"message": "boom", "path": ["quotePrice"], "extensions": {"code": "BAD_USER_INPUT"}}]}
    )
    assert envelope.errors is not None
    assert envelope.errors[0].message == "boom"
    assert envelope.errors[0].model_extra == {"path": ["quotePrice"], "extensions": {"code": "BAD_USER_INPUT"}}


def test_catalog_payload_keeps_order_and_camel_case_fields() -> None:
    payload = CatalogPayload.model_validate(
        {
            "catalogItems": [
                {"sku": "sku-2", "name": "Boot", "available": False, "listPrice": 80},
                {"sku": "sku-1", "name": "Shoe", "available": True, "listPrice": 49.5},
            ]
        }
    )
    assert [item.sku for item in payload.catalog_items] == ["sku-2", "sku-1"]
    assert payload.catalog_items[1].list_price == 49.5


def test_schedule_return_refund_amount_is_optional() -> None:
    payload = ScheduleReturnPayload.model_validate(
        {"scheduleReturn": {"returnId": "ret-1", "status": "SCHEDULED", "updatedAt": "2024-05-01T10:00:00Z"}}
    )
    assert payload.schedule_return.refund_amount is None

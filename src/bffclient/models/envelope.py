"""Wire-level models: the operation sent and the envelope received."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class Operation(BaseModel):
    """One GraphQL operation: query text plus named variables.

    ``payload_type`` optionally names the model that ``data`` of a successful
    response is validated into. It never goes on the wire.
    """

    query: str = Field(min_length=1)
    variables: dict[str, Any] = Field(default_factory=dict)
    payload_type: type[BaseModel] | None = Field(default=None, exclude=True, repr=False)

    model_config = {"frozen": True}

    def request_body(self) -> dict[str, Any]:
        return {"query": self.query, "variables": self.variables}


class GraphQLErrorRecord(BaseModel):
    """A single entry of a response's ``errors`` list.

    Only ``message`` is interpreted; ``locations``, ``path`` and
    ``extensions`` are kept as extra fields.
    """

    message: str

    model_config = {"extra": "allow"}


class Envelope(BaseModel):
    """Decoded response of one GraphQL request."""

    data: Any = None
    errors: list[GraphQLErrorRecord] | None = None

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def error_messages(self) -> list[str]:
        return [record.message for record in self.errors or []]

"""JSON-Patch documents for PATCH endpoints (RFC 6902 subset PayPal accepts)."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator


class PatchOp(str, Enum):
    ADD = "add"
    REMOVE = "remove"
    REPLACE = "replace"
    MOVE = "move"
    COPY = "copy"
    TEST = "test"


_NEEDS_VALUE = {PatchOp.ADD, PatchOp.REPLACE, PatchOp.TEST}
_NEEDS_FROM = {PatchOp.MOVE, PatchOp.COPY}


class Patch(BaseModel):
    """One JSON-Patch operation.

    add/replace/test need an explicit ``value``, which may be None (sent as JSON null).
    """

    op: PatchOp
    path: str
    value: Any = None
    from_: str | None = Field(default=None, alias="from")

    model_config = {"populate_by_name": True, "frozen": True}

    @field_validator("path", "from_")
    @classmethod
    def _json_pointer(cls, value: str | None) -> str | None:
        if value is not None and not value.startswith("/"):
            raise ValueError(f"'{value}' is not a JSON pointer (must start with '/')")
        return value

    @model_validator(mode="after")
    def _check_operands(self) -> Patch:
        if self.op in _NEEDS_VALUE and "value" not in self.model_fields_set:
            raise ValueError(f"'{self.op.value}' requires a value")
        if self.op in _NEEDS_FROM and not self.from_:
            raise ValueError(f"'{self.op.value}' requires a 'from' path")
        return self

    def to_api(self) -> dict[str, Any]:
        data = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        if self.op in _NEEDS_VALUE:
            data["value"] = self.model_dump(mode="json", include={"value"})["value"]
        return data


class PatchBuilder:
    """Fluent builder for a list of Patch operations.

    >>> PatchBuilder().replace("/shipping_amount", {"currency_code": "USD", "value": "5.00"}).build()
    """

    def __init__(self) -> None:
        self._ops: list[Patch] = []

    def add(self, path: str, value: Any) -> PatchBuilder:
        return self._append(PatchOp.ADD, path, value=value)

    def remove(self, path: str) -> PatchBuilder:
        return self._append(PatchOp.REMOVE, path)

    def replace(self, path: str, value: Any) -> PatchBuilder:
        return self._append(PatchOp.REPLACE, path, value=value)

    def move(self, from_path: str, path: str) -> PatchBuilder:
        return self._append(PatchOp.MOVE, path, from_=from_path)

    def copy(self, from_path: str, path: str) -> PatchBuilder:
        return self._append(PatchOp.COPY, path, from_=from_path)

    def test(self, path: str, value: Any) -> PatchBuilder:
        return self._append(PatchOp.TEST, path, value=value)

    def build(self) -> list[Patch]:
        return list(self._ops)

    def __len__(self) -> int:
        return len(self._ops)

    def _append(self, op: PatchOp, path: str, **kwargs: Any) -> PatchBuilder:
        self._ops.append(Patch(op=op, path=path, **kwargs))
        return self

"""Scalar request parameter values.

Each value knows how to render itself for a query string (GET requests) and
as a JSON literal (POST/DELETE bodies). The two renderings always denote the
same logical value, e.g. ``BooleanValue(True)`` becomes ``"true"`` in a query
string and ``true`` in a JSON body.

Updates:
  v0.1.2 - 2026-10-19 - Reject non-finite floats so JSON bodies stay valid.
  v0.1.1 - 2026-10-09 - Render floats through json.dumps so both encodings agree.
  v0.1.0 - 2026-10-06 - Introduce the Value variant and native coercion helper.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping

type JSONScalar = str | bool | int | float


class Value:
    """Base class for request parameter values."""

    __slots__ = ()

    def to_query_string(self) -> str:
        """Return the rendering used in URL query strings."""
        raise NotImplementedError

    def to_json(self) -> JSONScalar:
        """Return the value as a JSON-serialisable literal."""
        raise NotImplementedError

    def __str__(self) -> str:
        return self.to_query_string()

    @staticmethod
    def of(value: Value | JSONScalar) -> Value:
        """Wrap a native Python scalar in the matching ``Value`` subclass."""
        if isinstance(value, Value):
            return value
        # bool is a subclass of int and must be matched first.
        if isinstance(value, bool):
            return BooleanValue(value)
        if isinstance(value, int):
            return IntegerValue(value)
        if isinstance(value, float):
            return FloatValue(value)
        if isinstance(value, str):
            return StringValue(value)
        raise TypeError(f"Unsupported parameter value type: {type(value).__name__}")


@dataclass(frozen=True, slots=True)
class StringValue(Value):
    """Plain text parameter."""

    value: str

    def to_query_string(self) -> str:
        return self.value

    def to_json(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class BooleanValue(Value):
    """Boolean flag rendered as lowercase ``true``/``false``."""

    value: bool

    def to_query_string(self) -> str:
        return "true" if self.value else "false"

    def to_json(self) -> bool:
        return self.value


@dataclass(frozen=True, slots=True)
class IntegerValue(Value):
    value: int

    def to_query_string(self) -> str:
        return str(self.value)

    def to_json(self) -> int:
        return self.value


@dataclass(frozen=True, slots=True)
class FloatValue(Value):
    """Finite floating-point parameter; NaN and infinities have no JSON literal."""

    value: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.value):
            raise ValueError(f"FloatValue must be finite, got {self.value!r}")

    def to_query_string(self) -> str:
        return json.dumps(self.value, allow_nan=False)

    def to_json(self) -> float:
        return self.value


def coerce_params(params: Mapping[str, Value | JSONScalar] | None) -> dict[str, Value] | None:
    """Return *params* with every entry wrapped as a :class:`Value`."""
    if params is None:
        return None
    return {str(key): Value.of(value) for key, value in params.items()}


def params_to_query(params: Mapping[str, Value]) -> dict[str, str]:
    """Render *params* for use as URL query parameters."""
    return {key: value.to_query_string() for key, value in params.items()}


def params_to_json(params: Mapping[str, Value]) -> dict[str, Any]:
    """Render *params* as a JSON object payload."""
    return {key: value.to_json() for key, value in params.items()}


__all__ = [
    "BooleanValue",
    "FloatValue",
    "IntegerValue",
    "JSONScalar",
    "StringValue",
    "Value",
    "coerce_params",
    "params_to_json",
    "params_to_query",
]

# toggle_anim/numeric.py
from __future__ import annotations

import math
from enum import Enum
from typing import Any, Dict, Type

import numpy as np

from toggle_anim.errors import InvalidArgument


class NumberKind(Enum):
    """The closed set of number representations an animated value may take."""

    BYTE = np.int8
    SHORT = np.int16
    INT = np.int32
    LONG = np.int64
    FLOAT = np.float32
    DOUBLE = np.float64

    @property
    def is_integer(self) -> bool:
        return np.issubdtype(self.value, np.integer)


_KIND_BY_TYPE: Dict[Type[Any], NumberKind] = {
    np.int8: NumberKind.BYTE,
    np.int16: NumberKind.SHORT,
    np.int32: NumberKind.INT,
    np.int64: NumberKind.LONG,
    np.float32: NumberKind.FLOAT,
    np.float64: NumberKind.DOUBLE,
    int: NumberKind.LONG,
    float: NumberKind.DOUBLE,
}

_INT32 = np.iinfo(np.int32)
_INT64 = np.iinfo(np.int64)


def kind_of(value: Any) -> NumberKind:
    """Exact-type lookup; bool, Decimal, complex and friends are rejected."""
    kind = _KIND_BY_TYPE.get(type(value))
    if kind is None:
        raise InvalidArgument(f"Unsupported number type: {type(value).__name__}")
    # Python ints are unbounded; only the int64 range is a LONG
    if type(value) is int and not int(_INT64.min) <= value <= int(_INT64.max):
        raise InvalidArgument("Unsupported number type: int outside the 64-bit range")
    return kind


def round_half_up(x: float) -> int:
    if math.isnan(x):
        raise InvalidArgument("Cannot round NaN value")
    if math.isinf(x):
        return _INT64.max if x > 0 else _INT64.min
    # x - floor(x) is exact for doubles, x + 0.5 is not
    f = math.floor(x)
    return f + 1 if x - f >= 0.5 else f


def _saturate(n: int, info: np.iinfo) -> int:
    return max(int(info.min), min(int(info.max), n))


def convert(x: float, kind: NumberKind) -> Any:
    """
    Convert a computed float into `kind`, returned as the numpy scalar type.
    - BYTE/SHORT/INT: rounded, saturated to int32, then BYTE/SHORT wrap to width.
    - LONG: rounded, saturated to int64.
    - FLOAT: narrowed to single precision. DOUBLE: unchanged.
    """
    if not kind.is_integer:
        return kind.value(x)
    n = round_half_up(x)
    if kind is NumberKind.LONG:
        return np.int64(_saturate(n, _INT64))
    as_int = np.int32(_saturate(n, _INT32))
    # astype is an unchecked cast: two's complement wrap for the narrow kinds
    return as_int.astype(kind.value)


def convert_like(x: float, like: Any) -> Any:
    """Convert `x` into the same number type as `like` (Python int/float stay Python)."""
    kind = kind_of(like)
    out = convert(x, kind)
    if type(like) is int:
        return int(out)
    if type(like) is float:
        return float(out)
    return out

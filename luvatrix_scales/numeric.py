from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Any, TypeAlias

import numpy as np


Number: TypeAlias = int | float

# Largest integers that survive a round trip through float64.
F64_SAFE_INT_MIN = -9_007_199_254_740_991
F64_SAFE_INT_MAX = 9_007_199_254_740_990


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


@dataclass(frozen=True)
class NumericKind:
    """Safe bounds and float conversions for one numeric representation.

    Domain arithmetic is carried out in float64. ``safe_min``/``safe_max`` bound
    the values that convert to float64 and back without losing precision, which
    for 64-bit integers is much narrower than the dtype itself.
    """

    name: str
    dtype: np.dtype
    safe_min: Number
    safe_max: Number
    zero: Number
    resolution: Number

    @property
    def is_integer(self) -> bool:
        return bool(np.issubdtype(self.dtype, np.integer))

    def to_float(self, value: Number) -> float:
        return float(value)

    def from_float(self, value: float) -> Number:
        if self.is_integer:
            info = np.iinfo(self.dtype)
            if math.isnan(value):
                raise ValueError(f"cannot convert NaN to {self.name}")
            if math.isinf(value):
                return int(info.max) if value > 0 else int(info.min)
            return max(int(info.min), min(int(info.max), round_half_away(value)))
        if self.dtype == np.float32:
            with np.errstate(over="ignore"):
                return float(np.float32(value))
        return float(value)

    def contains(self, value: Number) -> bool:
        return self.safe_min <= value <= self.safe_max


def _integer_kind(name: str, safe_min: int | None = None, safe_max: int | None = None) -> NumericKind:
    dtype = np.dtype(name)
    info = np.iinfo(dtype)
    return NumericKind(
        name=name,
        dtype=dtype,
        safe_min=int(info.min) if safe_min is None else safe_min,
        safe_max=int(info.max) - 1 if safe_max is None else safe_max,
        zero=0,
        resolution=1,
    )


def _float_kind(name: str) -> NumericKind:
    dtype = np.dtype(name)
    info = np.finfo(dtype)
    return NumericKind(
        name=name,
        dtype=dtype,
        safe_min=float(info.min),
        safe_max=float(info.max),
        zero=0.0,
        resolution=0.0,
    )


KINDS: dict[str, NumericKind] = {
    kind.name: kind
    for kind in (
        _integer_kind("int64", F64_SAFE_INT_MIN, F64_SAFE_INT_MAX),
        _integer_kind("int32"),
        _integer_kind("int16"),
        _integer_kind("uint64", 0, F64_SAFE_INT_MAX),
        _integer_kind("uint32"),
        _integer_kind("uint16"),
        _float_kind("float32"),
        _float_kind("float64"),
    )
}


def resolve_kind(tag: Any) -> NumericKind:
    """Look up a kind by name, numpy dtype, scalar type or an existing ``NumericKind``."""
    if isinstance(tag, NumericKind):
        return tag
    if isinstance(tag, str):
        name = tag.strip().lower()
    else:
        try:
            name = np.dtype(tag).name
        except TypeError as exc:
            raise ValueError(f"unsupported numeric kind: {tag!r}") from exc
    kind = KINDS.get(name)
    if kind is None:
        raise ValueError(f"unsupported numeric kind `{name}`; expected one of {sorted(KINDS)}")
    return kind


def kind_for(*values: Any) -> NumericKind:
    """Infer the kind of a domain from its endpoint values.

    A numpy scalar pins the kind (``np.uint16(360)`` selects ``uint16``). Plain
    Python numbers select ``int64``, or ``float64`` as soon as one of them is a float.
    """
    for value in values:
        if isinstance(value, np.generic):
            return resolve_kind(value.dtype)
    if any(isinstance(value, float) for value in values):
        return KINDS["float64"]
    for value in values:
        if not isinstance(value, int):
            raise ValueError(f"cannot infer numeric kind from {type(value).__name__}")
    return KINDS["int64"]

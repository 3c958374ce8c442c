from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import Any, Callable, Iterator

import numpy as np

from luvatrix_scales.errors import DimensionTooSmall, OutOfRange, RangeExceedsMaximum
from luvatrix_scales.numeric import Number, NumericKind, kind_for, resolve_kind, round_half_away


LOGGER = logging.getLogger(__name__)
MIN_DIMENSION = 5


@dataclass
class DomainIter:
    """Cursor over ``(domain, coordinate)`` pairs of a linear scale.

    Both accumulators are floats; the coordinate is snapped to a whole pixel only
    when a pair is emitted, so fractional increments still land on integer
    coordinates.
    """

    current: float
    domain_step: float
    increment: float
    dimension: float
    dimension_end: int
    from_float: Callable[[float], Number]

    def __iter__(self) -> DomainIter:
        return self

    def __next__(self) -> tuple[Number, int]:
        coordinate = round_half_away(self.dimension)
        if coordinate >= self.dimension_end:
            raise StopIteration
        item = (self.from_float(self.current), coordinate)
        self.dimension += self.increment
        self.current += self.domain_step
        return item


@dataclass(frozen=True)
class Linear:
    start: Number
    end: Number
    dimension: int
    domain_min: Number
    domain_max: Number
    ratio: float
    domain_range: float
    kind: NumericKind

    @classmethod
    def try_new(cls, start: Any, end: Any, dimension: int, kind: Any = None) -> Linear:
        """Build a scale mapping ``start..end`` onto coordinates ``0..dimension-1``.

        ``end`` may be smaller than ``start``; the scale then runs in reverse.
        Raises ``DimensionTooSmall`` or ``OutOfRange`` (including its
        ``RangeExceedsMaximum`` subclass) when the scale cannot be represented.
        """
        if dimension < MIN_DIMENSION:
            LOGGER.debug("rejecting dimension=%s (minimum %s)", dimension, MIN_DIMENSION)
            raise DimensionTooSmall()

        numeric = kind_for(start, end) if kind is None else resolve_kind(kind)
        start = _coerce(numeric, start)
        end = _coerce(numeric, end)

        for value in (start, end):
            if isinstance(value, float) and math.isnan(value):
                raise OutOfRange(f"domain value {value} is not a number")

        if start < end:
            lo, hi, sign = start, end, 1.0
        else:
            lo, hi, sign = end, start, -1.0

        if lo < numeric.safe_min:
            raise OutOfRange(f"minimum value {lo} is out of range; must be larger than {numeric.safe_min}")
        if hi > numeric.safe_max:
            raise OutOfRange(f"maximum value {hi} is out of range; must be less than {numeric.safe_max}")

        span = hi - lo
        if not numeric.contains(span):
            raise RangeExceedsMaximum(
                f"Difference between {lo} and {hi} is out of range; must be less than {numeric.safe_max}"
            )

        if span == numeric.zero:
            LOGGER.debug("zero-width domain at %s", start)
        domain_range = numeric.to_float(span)
        ratio = domain_range / float(dimension - 1) * sign
        if not math.isfinite(ratio):
            raise DimensionTooSmall()

        LOGGER.debug(
            "linear scale %s..%s (%s) over %s coordinates, ratio=%r",
            start,
            end,
            numeric.name,
            dimension,
            ratio,
        )
        return cls(
            start=start,
            end=end,
            dimension=int(dimension),
            domain_min=lo,
            domain_max=hi,
            ratio=ratio,
            domain_range=domain_range,
            kind=numeric,
        )

    @property
    def reversed(self) -> bool:
        return self.end < self.start

    def domain_to_coordinate(self, value: Number) -> int | None:
        if not (self.domain_min <= value <= self.domain_max):
            return None
        if self.domain_range == 0:
            return 0
        value = int(value) if isinstance(value, (int, np.integer)) else float(value)
        diff = float(abs(value - self.start))
        return round_half_away((diff / self.domain_range) * float(self.dimension - 1))

    def coordinate_to_domain(self, coordinate: int) -> Number | None:
        if coordinate < 0 or coordinate >= self.dimension:
            return None
        if self.kind.is_integer:
            # Offset stays a signed Python int; a reversed unsigned scale steps below zero.
            return self.start + round_half_away(self.ratio * float(coordinate))
        return self.kind.from_float(self.start + self.ratio * float(coordinate))

    def iter(self) -> DomainIter:
        return self._create_iter(self.ratio)

    def intervals(self, step: Number) -> DomainIter:
        step = self.kind.to_float(step)
        if step == 0 or not math.isfinite(step):
            raise ValueError("interval step must be finite and non-zero")
        return self._create_iter(step)

    def __iter__(self) -> Iterator[tuple[Number, int]]:
        return self.iter()

    def _create_iter(self, step: float) -> DomainIter:
        if self.ratio == 0:
            # Zero-width domain: walk the coordinates, the value never moves.
            increment, domain_step = 1.0, 0.0
        else:
            increment = abs(step / self.ratio)
            domain_step = increment * self.ratio
        return DomainIter(
            current=self.kind.to_float(self.start),
            domain_step=domain_step,
            increment=increment,
            dimension=0.0,
            dimension_end=self.dimension,
            from_float=self.kind.from_float,
        )


def _coerce(kind: NumericKind, value: Any) -> Number:
    if kind.is_integer:
        if isinstance(value, (int, np.integer)):
            return int(value)
        as_float = float(value)
        if not as_float.is_integer():
            raise ValueError(f"{kind.name} scale endpoints must be whole numbers, got {value!r}")
        return int(as_float)
    return kind.from_float(float(value))

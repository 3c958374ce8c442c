from __future__ import annotations

from dataclasses import dataclass, replace
from itertools import islice
import logging
import math
import operator
from typing import Any, Generic, Iterable, Iterator, NamedTuple, TypeVar

from luvatrix_scales.errors import DimensionTooSmall, OutOfRange, RangeExceedsMaximum


LOGGER = logging.getLogger(__name__)
T = TypeVar("T")


class ScaledStep(NamedTuple):
    dimension: int
    value: Any


@dataclass
class ScaledStepsIter(Generic[T]):
    dimension: int
    dimension_step: int
    values: Iterator[T]

    def __iter__(self) -> ScaledStepsIter[T]:
        return self

    def __next__(self) -> ScaledStep:
        value = next(self.values)
        step = ScaledStep(dimension=self.dimension, value=value)
        self.dimension += self.dimension_step
        return step


@dataclass(frozen=True)
class ScaledSteps(Generic[T]):
    """Evenly spaced domain values laid out across a fixed dimension.

    Start from ``ScaledSteps(dimension)`` and pick a layout with
    ``discrete_range``, ``continuous_range`` or ``ordered``; each returns a new
    value holding the precomputed domain values, which ``iter`` replays.
    """

    dimension: int
    values: tuple[T, ...] = ()
    dimension_step: int = 1
    dimension_start: int = 0

    def __post_init__(self) -> None:
        if self.dimension < 1:
            raise DimensionTooSmall()
        object.__setattr__(self, "values", tuple(self.values))

    def discrete_range(self, start: int, end: int) -> ScaledSteps[int]:
        """Integer steps from ``start`` towards ``end`` (exclusive).

        With more coordinates than values each value gets several coordinates;
        otherwise the domain step is rounded up so the last value never passes
        ``end``.
        """
        start = operator.index(start)
        end = operator.index(end)
        distance = end - start
        if distance == 0:
            return replace(self, values=(), dimension_step=1, dimension_start=0)

        sign = -1 if start > end else 1
        if self.dimension > abs(distance):
            dimension_step = self.dimension // abs(distance)
            domain_step = sign
        else:
            quotient, remainder = _trunc_divmod(distance, self.dimension)
            dimension_step = 1
            domain_step = quotient + (sign if remainder else 0)

        quotient, remainder = _trunc_divmod(distance, domain_step)
        count = quotient + (1 if remainder else 0)
        LOGGER.debug(
            "discrete steps %s..%s over %s: %s values, domain step %s, dimension step %s",
            start,
            end,
            self.dimension,
            count,
            domain_step,
            dimension_step,
        )
        return replace(
            self,
            values=tuple(start + i * domain_step for i in range(count)),
            dimension_step=dimension_step,
            dimension_start=0,
        )

    def continuous_range(self, start: float, end: float) -> ScaledSteps[float]:
        """One float step per coordinate from ``start`` towards ``end``.

        Values are accumulated by repeated addition, so the last one carries the
        summed rounding error rather than a recomputed endpoint.
        """
        start = float(start)
        end = float(end)
        for value in (start, end):
            if not math.isfinite(value):
                raise OutOfRange(f"range endpoint {value} is not finite")
        distance = end - start
        if distance == 0:
            return replace(self, values=(), dimension_step=1, dimension_start=0)

        if not math.isfinite(distance):
            raise RangeExceedsMaximum(f"distance between {start} and {end} is not representable")
        domain_step = distance / float(self.dimension)
        if domain_step == 0:
            # Distance too small to split across the dimension.
            return replace(self, values=(), dimension_step=1, dimension_start=0)
        count = math.floor(distance / domain_step)
        values: list[float] = []
        current = start
        for _ in range(count):
            values.append(current)
            current += domain_step
        return replace(self, values=tuple(values), dimension_step=1, dimension_start=0)

    def ordered(self, steps: Iterable[T]) -> ScaledSteps[T]:
        # The last coordinate is kept free as a margin.
        values = tuple(islice(steps, self.dimension - 1))
        dimension_step = self.dimension // (len(values) + 1)
        return replace(self, values=values, dimension_step=dimension_step, dimension_start=dimension_step)

    def iter(self) -> ScaledStepsIter[T]:
        return ScaledStepsIter(
            dimension=self.dimension_start,
            dimension_step=self.dimension_step,
            values=iter(self.values),
        )

    def __iter__(self) -> Iterator[ScaledStep]:
        return self.iter()

    def __len__(self) -> int:
        return len(self.values)


def _trunc_divmod(a: int, b: int) -> tuple[int, int]:
    """Integer division rounding toward zero, remainder carrying the sign of ``a``."""
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - b * quotient

from __future__ import annotations

from dataclasses import dataclass, replace
import logging
from typing import Generic, Iterable, Iterator, TypeVar

from luvatrix_scales.errors import DimensionTooSmall
from luvatrix_scales.numeric import round_half_away


LOGGER = logging.getLogger(__name__)
T = TypeVar("T")

DEFAULT_PADDING_INNER = 0.1
DEFAULT_PADDING_OUTER = 0.05
DEFAULT_ALIGN = 0.5


def fit_dimension(n: int, dimension: int, padding_inner: float) -> int:
    """Grow ``dimension`` until ``n`` bands separated by ``padding_inner`` all keep a width."""
    if n < 2 or padding_inner <= 0:
        return dimension
    return max(dimension, round_half_away(float(n - 1) / padding_inner))


@dataclass
class BandIter(Generic[T]):
    step: float
    current: float
    bandwidth: int
    values: Iterator[T]

    def __iter__(self) -> BandIter[T]:
        return self

    def __next__(self) -> tuple[T, tuple[int, int]]:
        value = next(self.values)
        band_start = max(0, round_half_away(self.current))
        band_end = band_start + self.bandwidth - 1
        self.current += self.step
        return (value, (band_start, band_end))


@dataclass(frozen=True)
class Band(Generic[T]):
    """Ordinal band scale: one equal-width, padded band per domain value.

    Builder methods return updated copies; the dimension is enlarged when the
    requested one cannot fit every band at the configured inner padding.
    """

    domain: tuple[T, ...]
    dimension: int
    inner: float = DEFAULT_PADDING_INNER
    outer: float = DEFAULT_PADDING_OUTER
    alignment: float = DEFAULT_ALIGN

    def __post_init__(self) -> None:
        if self.dimension < 1:
            raise DimensionTooSmall()
        object.__setattr__(self, "domain", tuple(self.domain))
        fitted = fit_dimension(len(self.domain), int(self.dimension), self.inner)
        if fitted != self.dimension:
            LOGGER.debug(
                "band dimension %s enlarged to %s for %s values", self.dimension, fitted, len(self.domain)
            )
        object.__setattr__(self, "dimension", fitted)

    @classmethod
    def new(cls, domain: Iterable[T], dimension: int) -> Band[T]:
        return cls(domain=tuple(domain), dimension=dimension)

    def padding_inner(self, padding: float) -> Band[T]:
        return replace(self, inner=_fraction_or(padding, DEFAULT_PADDING_INNER))

    def padding_outer(self, padding: float) -> Band[T]:
        return replace(self, outer=_fraction_or(padding, DEFAULT_PADDING_OUTER))

    def align(self, align: float) -> Band[T]:
        return replace(self, alignment=_fraction_or(align, DEFAULT_ALIGN))

    def step(self) -> float:
        n = float(len(self.domain))
        return float(self.dimension) / max(1.0, n - self.inner + self.outer * 2.0)

    def bandwidth(self) -> int:
        return max(round_half_away(self.step() * (1.0 - self.inner)), 1)

    def iter(self) -> BandIter[T]:
        n = float(len(self.domain))
        step = self.step()
        current = (float(self.dimension - 1) - step * (n - self.inner)) * self.alignment
        return BandIter(step=step, current=current, bandwidth=self.bandwidth(), values=iter(self.domain))

    def __iter__(self) -> Iterator[tuple[T, tuple[int, int]]]:
        return self.iter()

    def __len__(self) -> int:
        return len(self.domain)

    def band(self, value: T) -> tuple[int, int] | None:
        for candidate, extent in self.iter():
            if candidate == value:
                return extent
        return None


def _fraction_or(value: float, default: float) -> float:
    if 0.0 <= value < 1.0:
        return float(value)
    return default

from __future__ import annotations


class ScaleError(Exception):
    """Raised when a scale cannot be built from the requested domain and dimension."""


class DimensionTooSmall(ScaleError):
    def __init__(self) -> None:
        super().__init__("Dimension is too small.")


class OutOfRange(ScaleError):
    prefix = "Out of range:"

    def __init__(self, explain: str) -> None:
        self.explain = explain
        super().__init__(f"{self.prefix} {explain}")


class RangeExceedsMaximum(OutOfRange):
    prefix = "Range too large"

from luvatrix_scales.api import DomainScale, IterableScale
from luvatrix_scales.band import Band, BandIter
from luvatrix_scales.errors import DimensionTooSmall, OutOfRange, RangeExceedsMaximum, ScaleError
from luvatrix_scales.linear import DomainIter, Linear
from luvatrix_scales.numeric import KINDS, NumericKind, kind_for, resolve_kind
from luvatrix_scales.steps import ScaledStep, ScaledSteps, ScaledStepsIter

__all__ = [
    "Band",
    "BandIter",
    "DimensionTooSmall",
    "DomainIter",
    "DomainScale",
    "IterableScale",
    "KINDS",
    "Linear",
    "NumericKind",
    "OutOfRange",
    "RangeExceedsMaximum",
    "ScaleError",
    "ScaledStep",
    "ScaledSteps",
    "ScaledStepsIter",
    "kind_for",
    "resolve_kind",
]

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from luvatrix_scales.band import DEFAULT_ALIGN, DEFAULT_PADDING_INNER, DEFAULT_PADDING_OUTER, Band
from luvatrix_scales.config import ConsoleSettings
from luvatrix_scales.console import render_grid, sine_wave
from luvatrix_scales.errors import ScaleError
from luvatrix_scales.linear import Linear
from luvatrix_scales.numeric import KINDS, Number
from luvatrix_scales.steps import ScaledSteps


LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="luvatrix-scales")
    parser.add_argument("--log-level", default=None, help="Logging level. Default: $LUVATRIX_SCALES_LOG_LEVEL or WARNING.")
    sub = parser.add_subparsers(dest="command", required=True)

    ticks = sub.add_parser("ticks", help="Enumerate (domain, coordinate) pairs of a linear scale.")
    ticks.add_argument("start", type=_number)
    ticks.add_argument("end", type=_number)
    ticks.add_argument("dimension", type=int)
    ticks.add_argument("--step", type=_number, default=None, help="Domain step between ticks. Default: one per coordinate.")
    ticks.add_argument("--kind", choices=sorted(KINDS), default=None)

    bands = sub.add_parser("bands", help="Lay out one band per label across a dimension.")
    bands.add_argument("dimension", type=int)
    bands.add_argument("labels", nargs="+")
    bands.add_argument("--padding-inner", type=float, default=DEFAULT_PADDING_INNER)
    bands.add_argument("--padding-outer", type=float, default=DEFAULT_PADDING_OUTER)
    bands.add_argument("--align", type=float, default=DEFAULT_ALIGN)

    steps = sub.add_parser("steps", help="Spread evenly spaced domain values across a dimension.")
    steps.add_argument("dimension", type=int)
    mode = steps.add_mutually_exclusive_group(required=True)
    mode.add_argument("--discrete", nargs=2, type=int, metavar=("START", "END"))
    mode.add_argument("--continuous", nargs=2, type=float, metavar=("START", "END"))
    mode.add_argument("--ordered", nargs="+", metavar="LABEL")

    sine = sub.add_parser("sine", help="Draw a sine wave on the console using linear scales.")
    sine.add_argument("--width", type=int, default=None, help="Columns. Default: $LUVATRIX_SCALES_CONSOLE_WIDTH or 121.")
    sine.add_argument("--height", type=int, default=None, help="Rows. Default: $LUVATRIX_SCALES_CONSOLE_HEIGHT or 24.")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = ConsoleSettings.from_env().with_overrides(log_level=args.log_level)
    logging.basicConfig(level=settings.level_number(), format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.command == "ticks":
            lines = _ticks(args)
        elif args.command == "bands":
            lines = _bands(args)
        elif args.command == "steps":
            lines = _steps(args)
        else:
            settings = settings.with_overrides(width=args.width, height=args.height)
            lines = [render_grid(sine_wave(settings.width, settings.height))]
    except (ScaleError, ValueError) as exc:
        LOGGER.debug("%s command failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 2

    for line in lines:
        print(line)
    return 0


def _ticks(args: argparse.Namespace) -> list[str]:
    scale = Linear.try_new(args.start, args.end, args.dimension, kind=args.kind)
    pairs = scale.iter() if args.step is None else scale.intervals(args.step)
    return [f"coordinate={coord}, domain={value}" for value, coord in pairs]


def _bands(args: argparse.Namespace) -> list[str]:
    band = (
        Band.new(args.labels, args.dimension)
        .padding_inner(args.padding_inner)
        .padding_outer(args.padding_outer)
        .align(args.align)
    )
    return [f"domain: {label} -> ({start}, {end})" for label, (start, end) in band.iter()]


def _steps(args: argparse.Namespace) -> list[str]:
    steps = ScaledSteps(args.dimension)
    if args.discrete is not None:
        steps = steps.discrete_range(*args.discrete)
    elif args.continuous is not None:
        steps = steps.continuous_range(*args.continuous)
    else:
        steps = steps.ordered(args.ordered)
    return [f"coordinate={step.dimension}, domain={step.value}" for step in steps.iter()]


def _number(raw: str) -> Number:
    try:
        return int(raw)
    except ValueError:
        return float(raw)

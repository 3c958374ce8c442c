from __future__ import annotations

import math

import numpy as np

from luvatrix_scales.linear import Linear


def new_grid(width: int, height: int, fill: str = " ") -> np.ndarray:
    if width <= 0 or height <= 0:
        raise ValueError("grid width/height must be > 0")
    return np.full((height, width), fill, dtype="<U1")


def put_text(grid: np.ndarray, x: int, y: int, text: str) -> None:
    if y < 0 or y >= grid.shape[0]:
        return
    for offset, ch in enumerate(text):
        col = x + offset
        if 0 <= col < grid.shape[1]:
            grid[y, col] = ch


def render_grid(grid: np.ndarray) -> str:
    return "\n".join("".join(row.tolist()) for row in grid)


def sine_wave(width: int, height: int) -> np.ndarray:
    """Plot one period of sin(x) with degree labels at every pi/8."""
    x_axis_radians = Linear.try_new(0.0, 2.0 * math.pi, width)
    x_axis_degrees = Linear.try_new(0, 360, width, kind="uint16")
    y_axis = Linear.try_new(1.0, -1.0, height)

    grid = new_grid(width, height)
    for radians, coord_x in x_axis_radians.intervals(math.pi / 8.0):
        coord_y = y_axis.domain_to_coordinate(math.sin(radians))
        degrees = x_axis_degrees.coordinate_to_domain(coord_x)
        if coord_y is None or degrees is None:
            continue
        label = str(degrees)
        # Centre three-digit labels on the tick.
        put_text(grid, coord_x - (1 if len(label) > 2 else 0), coord_y, label)
    return grid

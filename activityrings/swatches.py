"""
Swatch sheet: one column of squares per ring, stepping from the ring's start
color towards its end color, to preview how a ring gradient reads from top
to bottom.
"""
from __future__ import annotations

import os
from typing import Mapping, Union

from .colors.interpolation import next_color
from .gradients.patterns import SolidPattern
from .rings.model import DEFAULT_PALETTE, RingPalette, RingType
from .surface import Surface


def draw_swatches(
    palette: Mapping[RingType, RingPalette] = DEFAULT_PALETTE,
    rows: int = 12,
    swatch_size: int = 20,
) -> Surface:
    if rows <= 0 or swatch_size <= 0:
        raise ValueError("rows and swatch_size must be positive")

    columns = list(RingType)
    surface = Surface(len(columns) * swatch_size, rows * swatch_size)
    for column, ring_type in enumerate(columns):
        colors = palette[ring_type]
        for row in range(rows):
            color = next_color(colors.start, colors.end, row / rows)
            surface.fill_rectangle(
                column * swatch_size, row * swatch_size, swatch_size, swatch_size,
                SolidPattern(color),
            )
    return surface


def save_swatches(path: Union[str, os.PathLike], rows: int = 12, swatch_size: int = 20) -> None:
    draw_swatches(rows=rows, swatch_size=swatch_size).save_png(path)

from __future__ import annotations

import math
import os
from typing import BinaryIO, Mapping, Optional, Union

from PIL import Image

from ..colors.color_base import ColorBase
from ..colors.rgb import BLACK
from ..config import DEFAULT_LAYOUT, RingLayout
from ..gradients.patterns import SolidPattern
from ..surface import LineCap, Surface
from .model import DEFAULT_PALETTE, ActivityRing, RingPalette, RingType, build_rings
from .segments import ArcStroke, DrawCommand, ShadowDisc, render_progress


class ActivityRingsImage:
    """
    A square image of the three activity rings.

    The background and the idle (inactive colored) rings are drawn on
    construction; ``draw_activity`` then paints progress on top.

    Args:
        size: Width and height of the image in pixels
        background: Background color; any ColorBase, alpha is honoured
        layout: Ring geometry; defaults to the reference layout scaled to ``size``
        palette: Colors per ring type
    """

    def __init__(
        self,
        size: int = DEFAULT_LAYOUT.image_size,
        background: ColorBase = BLACK,
        layout: Optional[RingLayout] = None,
        palette: Mapping[RingType, RingPalette] = DEFAULT_PALETTE,
    ) -> None:
        if layout is None:
            layout = DEFAULT_LAYOUT if size == DEFAULT_LAYOUT.image_size else DEFAULT_LAYOUT.scaled_to(size)
        self.size = int(size)
        self.layout = layout
        self.background = background
        self.center = self.size / 2.0
        self.rings: Mapping[RingType, ActivityRing] = build_rings(layout, palette)

        self.surface = Surface(self.size, self.size)
        self.surface.line_cap = LineCap.ROUND
        self.surface.line_width = layout.line_width
        self._draw_empty_rings()

    def _draw_empty_rings(self) -> None:
        self.surface.fill(SolidPattern(self.background))
        for ring in self.rings.values():
            self.surface.stroke_arc(
                self.center, self.center, ring.radius, 0.0, 2.0 * math.pi,
                SolidPattern(ring.inactive_color),
            )

    def draw_activity(self, values: Mapping[RingType, float]) -> None:
        """
        Draw progress for each ring in ``values``.

        Values are fractions of the goal: 1.0 meets it exactly, 2.0 doubles
        it. Keys that are not a known ring type (``RingType`` members or
        their string names) are ignored.
        """
        requested = {}
        for key, value in values.items():
            try:
                requested[RingType(key)] = value
            except ValueError:
                continue

        # Ring order, not mapping order, so equal inputs give equal pixels
        for ring_type, ring in self.rings.items():
            if ring_type in requested:
                self.apply(render_progress(ring, float(requested[ring_type]), self.center, self.layout))

    def apply(self, commands: list[DrawCommand]) -> None:
        for command in commands:
            if isinstance(command, ShadowDisc):
                self.surface.fill_circle(command.x, command.y, command.radius, command.gradient)
            elif isinstance(command, ArcStroke):
                self.surface.stroke_arc(
                    command.center, command.center, command.radius,
                    command.start_angle, command.end_angle, command.gradient,
                )
            else:
                raise TypeError(f"Unsupported draw command {command!r}")

    def to_image(self) -> Image.Image:
        return self.surface.to_image()

    def encode_png(self, stream: Optional[BinaryIO] = None) -> bytes:
        return self.surface.encode_png(stream)

    def save_png(self, path: Union[str, os.PathLike]) -> None:
        self.surface.save_png(path)

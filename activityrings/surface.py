"""
Raster drawing surface
======================

A thin wrapper around a pycairo ``ImageSurface`` with just the operations the
rings need: filling the whole surface, rectangles and discs, and stroking
circular arcs. Every operation takes a fill pattern
(``activityrings.gradients.patterns``) and composites it source-over, with
cairo's anti-aliasing.

Pixels are read back through Pillow, which also handles PNG encoding.
"""
from __future__ import annotations

import io
import math
import os
from enum import Enum
from typing import BinaryIO, Optional, Union

import cairo
import numpy as np
from numpy import ndarray as NDArray
from PIL import Image

from .gradients.patterns import Pattern

TAU = 2.0 * math.pi


class LineCap(str, Enum):
    BUTT = "butt"
    ROUND = "round"

    @property
    def cairo_cap(self) -> cairo.LineCap:
        if self is LineCap.ROUND:
            return cairo.LINE_CAP_ROUND
        return cairo.LINE_CAP_BUTT


class Surface:
    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Surface size must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self.line_width = 1.0
        self.line_cap = LineCap.ROUND
        self._surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, self.width, self.height)
        self._ctx = cairo.Context(self._surface)

    # ------------------ Shapes ------------------
    def fill(self, pattern: Pattern) -> None:
        self._ctx.set_source(pattern.to_cairo())
        self._ctx.paint()

    def fill_rectangle(self, x: float, y: float, width: float, height: float, pattern: Pattern) -> None:
        self._ctx.new_path()
        self._ctx.rectangle(x, y, width, height)
        self._fill_path(pattern)

    def fill_circle(self, cx: float, cy: float, radius: float, pattern: Pattern) -> None:
        self._ctx.new_path()
        self._ctx.arc(cx, cy, radius, 0.0, TAU)
        self._fill_path(pattern)

    def stroke_arc(
        self,
        cx: float,
        cy: float,
        radius: float,
        angle1: float,
        angle2: float,
        pattern: Pattern,
        line_width: Optional[float] = None,
    ) -> None:
        """
        Stroke the arc from ``angle1`` to ``angle2`` (radians, clockwise on screen).

        Args:
            cx, cy: Arc center
            radius: Radius of the stroke centerline
            angle1, angle2: Start and end angle; an ``angle2`` below ``angle1``
                wraps forward by full turns, as ``cairo.Context.arc`` does
            pattern: Fill pattern for the stroke
            line_width: Stroke width; defaults to ``self.line_width``
        """
        ctx = self._ctx
        ctx.new_path()
        ctx.arc(cx, cy, radius, angle1, angle2)
        ctx.set_line_width(self.line_width if line_width is None else line_width)
        ctx.set_line_cap(self.line_cap.cairo_cap)
        ctx.set_source(pattern.to_cairo())
        ctx.stroke()

    def _fill_path(self, pattern: Pattern) -> None:
        self._ctx.set_source(pattern.to_cairo())
        self._ctx.fill()

    # ------------------ Export ------------------
    def to_image(self) -> Image.Image:
        """
        Copy the pixels into a Pillow RGBA image.

        cairo keeps premultiplied native-endian ARGB words, which read as
        ``BGRa`` bytes on little-endian machines; Pillow un-premultiplies them.
        """
        self._surface.flush()
        return Image.frombuffer(
            "RGBA", (self.width, self.height), bytes(self._surface.get_data()),
            "raw", "BGRa", self._surface.get_stride(), 1,
        )

    def to_array(self) -> NDArray:
        """8-bit RGBA pixels, shape (height, width, 4)."""
        return np.array(self.to_image(), dtype=np.uint8)

    def encode_png(self, stream: Optional[BinaryIO] = None) -> bytes:
        """
        Encode the current pixels as PNG.

        The bytes are returned and, when ``stream`` is given, also written to it.
        Encoding does not change the surface.
        """
        buffer = io.BytesIO()
        self.to_image().save(buffer, format="PNG")
        data = buffer.getvalue()
        if stream is not None:
            stream.write(data)
        return data

    def save_png(self, path: Union[str, os.PathLike]) -> None:
        """Write the PNG to ``path``; Pillow's OSError propagates on failure."""
        self.to_image().save(path, format="PNG")

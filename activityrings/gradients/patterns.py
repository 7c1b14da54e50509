"""
Fill patterns understood by the drawing surface.

Patterns are small immutable descriptions of a paint. The surface asks each
one for ``to_cairo()`` when it draws, so a pattern can be built once and
reused across surfaces.
"""
from __future__ import annotations

import warnings
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import Tuple

import cairo

from ..colors.color_base import ColorBase
from ..types.color_types import ColorSpace
from ..types.format_type import FormatType


@dataclass(frozen=True)
class ColorStop:
    offset: float
    color: ColorBase

    @property
    def unit_rgba(self) -> Tuple[float, ...]:
        return tuple(float(v) for v in self.color.convert(ColorSpace.RGBA, FormatType.FLOAT).value)


class Pattern(ABC):
    @abstractmethod
    def to_cairo(self) -> cairo.Pattern:
        """Build the cairo source this pattern paints with."""


@dataclass(frozen=True)
class SolidPattern(Pattern):
    color: ColorBase

    def to_cairo(self) -> cairo.SolidPattern:
        return cairo.SolidPattern(*ColorStop(0.0, self.color).unit_rgba)


@dataclass(frozen=True)
class _StopPattern(Pattern):
    stops: Tuple[ColorStop, ...] = field(default=(), kw_only=True)

    def add_color_stop(self, offset: float, color: ColorBase):
        """Return a copy of this gradient with one more stop, kept in offset order."""
        if not 0.0 <= offset <= 1.0:
            warnings.warn(f"Color stop offset {offset} outside [0, 1]; clamping")
            offset = min(max(offset, 0.0), 1.0)
        stops = sorted(self.stops + (ColorStop(offset, color),), key=lambda s: s.offset)
        return replace(self, stops=tuple(stops))

    def _with_stops(self, gradient: cairo.Gradient) -> cairo.Gradient:
        # End colors are held outside the first and last stop
        gradient.set_extend(cairo.EXTEND_PAD)
        for stop in self.stops:
            gradient.add_color_stop_rgba(stop.offset, *stop.unit_rgba)
        return gradient


@dataclass(frozen=True)
class LinearGradient(_StopPattern):
    """Gradient along the axis from (x0, y0) to (x1, y1)."""
    x0: float
    y0: float
    x1: float
    y1: float

    def to_cairo(self) -> cairo.LinearGradient:
        return self._with_stops(cairo.LinearGradient(self.x0, self.y0, self.x1, self.y1))


@dataclass(frozen=True)
class RadialGradient(_StopPattern):
    """Gradient between the circle (x0, y0, r0) and the circle (x1, y1, r1)."""
    x0: float
    y0: float
    r0: float
    x1: float
    y1: float
    r1: float

    def to_cairo(self) -> cairo.RadialGradient:
        return self._with_stops(cairo.RadialGradient(self.x0, self.y0, self.r0, self.x1, self.y1, self.r1))

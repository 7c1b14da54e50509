"""
Ring segment rendering
======================

Turns one ring's progress value into the draw commands that paint it.

Progress is split into half-circle segments of at most 0.5 goal units. Each
segment is stroked with a linear gradient along the ring's vertical axis,
and consecutive segments alternate between starting at the top and at the
bottom so the color stays continuous across the seam. The color of each
segment's end is interpolated from the ring's start to end color according
to how much of the total value has been drawn so far.

A value of 1.0 or more also produces one shadow disc just past the end of
the sweep, painted under the last segment so the arc's lip appears to lie
on top of the lap below it.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Union

from ..colors.color_base import ColorBase
from ..colors.interpolation import blend
from ..colors.rgb import ColorRGBAINT
from ..config import DEFAULT_LAYOUT, RingLayout
from ..gradients.patterns import LinearGradient, RadialGradient
from ..gradients.ring_gradient import GradientDirection, build_ring_gradient
from ..utils import arc_end
from .model import ActivityRing

SEGMENT_VALUE = 0.5
# Nudge so the shadow sits just past the arc end rather than centered on it
SHADOW_ANGLE_OFFSET = 0.01 * math.pi
SHADOW_INNER_COLOR = ColorRGBAINT((0, 0, 0, 255))
SHADOW_OUTER_COLOR = ColorRGBAINT((0, 0, 0, 10))


@dataclass(frozen=True)
class ArcStroke:
    center: float
    radius: float
    start_angle: float
    end_angle: float
    direction: GradientDirection
    gradient: LinearGradient
    stop_color: ColorBase


@dataclass(frozen=True)
class ShadowDisc:
    angle: float
    x: float
    y: float
    radius: float
    gradient: RadialGradient


DrawCommand = Union[ArcStroke, ShadowDisc]


def segment_start_angle(direction: GradientDirection) -> float:
    """12 o'clock for top-down segments, 6 o'clock for bottom-up ones."""
    if direction == GradientDirection.BOTTOM_UP:
        return 0.5 * math.pi
    return -0.5 * math.pi


def shadow_angle(value: float) -> float:
    return (value * (2.0 * math.pi)) - (0.5 * math.pi) + SHADOW_ANGLE_OFFSET


def build_shadow(angle: float, ring_radius: float, center: float, layout: RingLayout = DEFAULT_LAYOUT) -> ShadowDisc:
    x, y = arc_end(angle, ring_radius, center)
    outer = layout.half_width
    inner = max(outer - layout.shadow_falloff, 0.0)
    grad = RadialGradient(x, y, inner, x, y, outer)
    grad = grad.add_color_stop(0.0, SHADOW_INNER_COLOR)
    grad = grad.add_color_stop(1.0, SHADOW_OUTER_COLOR)
    return ShadowDisc(angle=angle, x=x, y=y, radius=outer, gradient=grad)


def render_progress(
    ring: ActivityRing,
    value: float,
    center: float,
    layout: RingLayout = DEFAULT_LAYOUT,
) -> List[DrawCommand]:
    """
    Decompose ``value`` into the commands that draw it on ``ring``.

    Args:
        ring: Ring to draw on
        value: Fraction of the goal completed; 1.0 is the goal, above that is overflow
        center: Canvas center (x and y)
        layout: Geometry providing stroke width and shadow size

    Returns:
        Arc strokes in drawing order, with a shadow disc placed before the
        final stroke when ``value >= 1.0``. Empty when ``value <= 0``.

    Raises:
        ValueError: if ``value`` is NaN or infinite.
    """
    if not math.isfinite(value):
        raise ValueError(f"Progress value must be finite, got {value!r}")

    commands: List[DrawCommand] = []
    # TODO: a zero value could draw a start-colored dot at 12 o'clock once the desired look is agreed on
    if value <= 0.0:
        return commands

    needs_shadow = value >= 1.0
    remaining = value
    direction = GradientDirection.TOP_DOWN
    start_color = ring.start_color
    accumulated = 0.0

    while remaining > 0.0:
        start_angle = segment_start_angle(direction)
        if needs_shadow and remaining <= SEGMENT_VALUE:
            commands.append(build_shadow(shadow_angle(value), ring.radius, center, layout))

        # Draw either the remaining value or a full half circle, whichever is smaller
        segment_value = min(remaining, SEGMENT_VALUE)
        end_angle = ((segment_value / SEGMENT_VALUE) * math.pi) + start_angle

        accumulated += segment_value
        stop_color = blend(ring.start_color, ring.end_color, accumulated / value)

        grad = build_ring_gradient(center, direction, start_color, stop_color, ring.radius, layout.line_width)
        commands.append(ArcStroke(
            center=center,
            radius=ring.radius,
            start_angle=start_angle,
            end_angle=end_angle,
            direction=direction,
            gradient=grad,
            stop_color=stop_color,
        ))

        remaining -= SEGMENT_VALUE
        direction = direction.flip()
        start_color = stop_color

    return commands

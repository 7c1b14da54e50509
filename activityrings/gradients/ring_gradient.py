from __future__ import annotations

from enum import Enum

from ..colors.color_base import ColorBase
from ..config import DEFAULT_LAYOUT
from .patterns import LinearGradient


class GradientDirection(str, Enum):
    TOP_DOWN = "top_down"
    BOTTOM_UP = "bottom_up"

    def flip(self) -> GradientDirection:
        if self is GradientDirection.TOP_DOWN:
            return GradientDirection.BOTTOM_UP
        return GradientDirection.TOP_DOWN


def build_ring_gradient(
    center: float,
    direction: GradientDirection,
    start_color: ColorBase,
    stop_color: ColorBase,
    radius: float,
    line_width: float = DEFAULT_LAYOUT.line_width,
) -> LinearGradient:
    """
    Build the linear gradient used to stroke one half-circle ring segment.

    The axis runs vertically through the center, from the inner edge of the
    ring's top to the inner edge of its bottom (or the reverse for
    ``BOTTOM_UP``), so the color follows the sweep of a half circle.

    Args:
        center: Canvas center (x and y)
        direction: Which end of the axis holds ``start_color``
        start_color: Color at stop 0.0
        stop_color: Color at stop 1.0
        radius: Ring centerline radius
        line_width: Stroke width of the ring

    Returns:
        Two-stop LinearGradient
    """
    top = center - radius + (line_width / 2.0)
    bottom = center + radius - (line_width / 2.0)
    if direction == GradientDirection.TOP_DOWN:
        start_y, end_y = top, bottom
    else:
        start_y, end_y = bottom, top

    grad = LinearGradient(center, start_y, center, end_y)
    grad = grad.add_color_stop(0.0, start_color)
    return grad.add_color_stop(1.0, stop_color)

from __future__ import annotations
from typing import TypeVar

from boundednumbers import clamp

from ..types.format_type import FormatType
from .color_base import ColorBase

C = TypeVar("C", bound=ColorBase)


def lerp_channel(t: float, a: int, b: int) -> int:
    """Linear step between two 8-bit channels, truncated toward the lower value."""
    return int(a + clamp(t, 0.0, 1.0) * (b - a))


def blend(start: C, end: ColorBase, t: float) -> C:
    """
    Linearly blend ``start`` towards ``end``.

    ``t`` is clamped to [0, 1]. Both colors are quantized to 8-bit channels,
    each channel is interpolated and truncated, and the result is returned in
    the class of ``start``. Pure function: same inputs, same output.

    Args:
        start: Color returned for ``t <= 0``
        end: Color returned (in ``start``'s format) for ``t >= 1``
        t: Position along the blend

    Returns:
        New color of the same class as ``start``
    """
    a = start.convert(start.mode, FormatType.INT)
    b = end.convert(start.mode, FormatType.INT)
    channels = tuple(lerp_channel(t, ca, cb) for ca, cb in zip(a.value, b.value))
    return start.__class__(a.__class__(channels))


def next_color(start: C, end: ColorBase, t: float) -> C:
    """Next color along the ring gradient for fraction ``t`` of the sweep."""
    return blend(start, end, t)

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from ..colors.color_base import ColorBase
from ..colors.rgb import ColorRGBINT, ColorUnitRGB
from ..config import DEFAULT_LAYOUT, RingLayout


class RingType(str, Enum):
    """The three rings, innermost first."""
    STAND = "stand"
    EXERCISE = "exercise"
    MOVE = "move"


@dataclass(frozen=True)
class RingPalette:
    inactive: ColorBase
    start: ColorBase
    end: ColorBase


# Active colors credit to the MKRingProgressView example project
DEFAULT_PALETTE: Mapping[RingType, RingPalette] = MappingProxyType({
    RingType.STAND: RingPalette(
        inactive=ColorRGBINT((6, 27, 33)),
        start=ColorUnitRGB((0.0, 0.7294117647, 0.8823529412)),
        end=ColorUnitRGB((0.0, 0.9803921569, 0.8156862745)),
    ),
    RingType.EXERCISE: RingPalette(
        inactive=ColorRGBINT((14, 32, 3)),
        start=ColorUnitRGB((0.2156862745, 0.862745098, 0.0)),
        end=ColorUnitRGB((0.7176470588, 1.0, 0.0)),
    ),
    RingType.MOVE: RingPalette(
        inactive=ColorRGBINT((30, 1, 3)),
        start=ColorUnitRGB((0.8823529412, 0.0, 0.07843137255)),
        end=ColorUnitRGB((1.0, 0.1960784314, 0.5294117647)),
    ),
})


@dataclass(frozen=True)
class ActivityRing:
    """Geometry and colors needed to draw a single ring."""
    ring_type: RingType
    radius: float
    inactive_color: ColorBase
    start_color: ColorBase
    end_color: ColorBase


def build_rings(
    layout: RingLayout = DEFAULT_LAYOUT,
    palette: Mapping[RingType, RingPalette] = DEFAULT_PALETTE,
) -> Mapping[RingType, ActivityRing]:
    """
    Lay the rings out from the middle outwards in ``RingType`` order.

    Raises:
        KeyError: if ``palette`` has no entry for one of the ring types.
    """
    rings = {}
    for index, ring_type in enumerate(RingType):
        colors = palette[ring_type]
        rings[ring_type] = ActivityRing(
            ring_type=ring_type,
            radius=layout.ring_radius(index),
            inactive_color=colors.inactive,
            start_color=colors.start,
            end_color=colors.end,
        )
    return MappingProxyType(rings)

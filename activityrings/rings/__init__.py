from .model import (
    RingType,
    RingPalette,
    ActivityRing,
    DEFAULT_PALETTE,
    build_rings,
)
from .segments import (
    ArcStroke,
    ShadowDisc,
    DrawCommand,
    render_progress,
)
from .image import ActivityRingsImage

__all__ = [
    "RingType",
    "RingPalette",
    "ActivityRing",
    "DEFAULT_PALETTE",
    "build_rings",
    "ArcStroke",
    "ShadowDisc",
    "DrawCommand",
    "render_progress",
    "ActivityRingsImage",
]

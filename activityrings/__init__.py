"""Activity rings: concentric progress-ring images rendered to PNG."""

from .colors import (
    ColorBase,
    ColorRGBINT,
    ColorRGBAINT,
    ColorUnitRGB,
    ColorUnitRGBA,
    BLACK,
    WHITE,
    TRANSPARENT,
    parse_color,
    blend,
    next_color,
)
from .types.format_type import FormatType
from .config import RingLayout, DEFAULT_LAYOUT
from .gradients import (
    LinearGradient,
    RadialGradient,
    SolidPattern,
    GradientDirection,
    build_ring_gradient,
)
from .rings import (
    RingType,
    RingPalette,
    ActivityRing,
    DEFAULT_PALETTE,
    build_rings,
    ArcStroke,
    ShadowDisc,
    render_progress,
    ActivityRingsImage,
)
from .surface import Surface
from .swatches import draw_swatches, save_swatches

__all__ = [
    # colors
    "ColorBase",
    "ColorRGBINT",
    "ColorRGBAINT",
    "ColorUnitRGB",
    "ColorUnitRGBA",
    "BLACK",
    "WHITE",
    "TRANSPARENT",
    "parse_color",
    "blend",
    "next_color",
    "FormatType",
    # geometry
    "RingLayout",
    "DEFAULT_LAYOUT",
    # gradients
    "LinearGradient",
    "RadialGradient",
    "SolidPattern",
    "GradientDirection",
    "build_ring_gradient",
    # rings
    "RingType",
    "RingPalette",
    "ActivityRing",
    "DEFAULT_PALETTE",
    "build_rings",
    "ArcStroke",
    "ShadowDisc",
    "render_progress",
    "ActivityRingsImage",
    "Surface",
    "draw_swatches",
    "save_swatches",
]

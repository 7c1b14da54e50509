"""
Activity Rings Color Classes
============================

Immutable RGB/RGBA color classes in integer (0-255) and unit float (0.0-1.0)
formats, plus the channel-wise blend used to color ring segments.

Usage
-----
>>> from activityrings.colors import ColorRGBINT, ColorUnitRGB, blend
>>>
>>> teal = ColorUnitRGB((0.0, 0.7294117647, 0.8823529412))
>>> teal.convert("rgb", "int").value
(0, 186, 225)
>>> blend(ColorRGBINT((0, 0, 0)), ColorRGBINT((255, 255, 255)), 0.5).value
(127, 127, 127)

Notes
-----
- Values are clamped to the format's maxima during initialization
- Instances are frozen; assigning an attribute raises AttributeError
- ``blend`` truncates channels after interpolation, it never rounds
"""

from .color_base import ColorBase
from .rgb import (
    ColorRGBINT,
    ColorRGBAINT,
    ColorUnitRGB,
    ColorUnitRGBA,
    BLACK,
    WHITE,
    TRANSPARENT,
    parse_color,
)
from .interpolation import blend, next_color


__all__ = [
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
]

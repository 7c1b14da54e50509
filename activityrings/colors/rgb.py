from typing import ClassVar, Tuple
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace
from .color_base import ColorBase, build_registry


class ColorRGBINT(ColorBase):
    num_channels: ClassVar[int] = 3
    mode: ClassVar[ColorSpace] = ColorSpace.RGB
    maxima: ClassVar[Tuple[int, int, int]] = (255, 255, 255)
    format_type: ClassVar[FormatType] = FormatType.INT


class ColorRGBAINT(ColorBase):
    num_channels: ClassVar[int] = 4
    mode: ClassVar[ColorSpace] = ColorSpace.RGBA
    maxima: ClassVar[Tuple[int, int, int, int]] = (255, 255, 255, 255)
    format_type: ClassVar[FormatType] = FormatType.INT


class ColorUnitRGB(ColorBase):
    num_channels: ClassVar[int] = 3
    mode: ClassVar[ColorSpace] = ColorSpace.RGB
    maxima: ClassVar[Tuple[float, float, float]] = (1.0, 1.0, 1.0)
    format_type: ClassVar[FormatType] = FormatType.FLOAT


class ColorUnitRGBA(ColorBase):
    num_channels: ClassVar[int] = 4
    mode: ClassVar[ColorSpace] = ColorSpace.RGBA
    maxima: ClassVar[Tuple[float, float, float, float]] = (1.0, 1.0, 1.0, 1.0)
    format_type: ClassVar[FormatType] = FormatType.FLOAT


BLACK = ColorRGBAINT((0, 0, 0, 255))
WHITE = ColorRGBAINT((255, 255, 255, 255))
TRANSPARENT = ColorRGBAINT((0, 0, 0, 0))

named_colors = {
    "black": BLACK,
    "white": WHITE,
    "transparent": TRANSPARENT,
}


rgb_tuple_to_class = build_registry(
    ColorRGBINT,
    ColorRGBAINT,
    ColorUnitRGB,
    ColorUnitRGBA,
)


def parse_color(text: str) -> ColorRGBAINT:
    """
    Parse ``#RRGGBB``, ``#RRGGBBAA`` or one of the named colors into an RGBA color.

    Raises:
        ValueError: if the text is neither a known name nor a valid hex string.
    """
    key = text.strip().lower()
    if key in named_colors:
        return named_colors[key]
    hex_str = key.lstrip("#")
    if len(hex_str) not in (6, 8):
        raise ValueError(f"Unrecognized color {text!r}; expected #RRGGBB, #RRGGBBAA or a color name")
    try:
        channels = tuple(int(hex_str[i:i + 2], 16) for i in range(0, len(hex_str), 2))
    except ValueError:
        raise ValueError(f"Unrecognized color {text!r}; invalid hex digits") from None
    if len(channels) == 3:
        channels = channels + (255,)
    return ColorRGBAINT(channels)

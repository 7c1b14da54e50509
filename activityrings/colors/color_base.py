from __future__ import annotations
from typing import Any, ClassVar, Tuple, cast
from ..conversions import convert
from ..types.format_type import FormatType, format_classes
from ..types.color_types import ColorElement, ColorSpace, Scalar
from ..utils import get_dimension


class ColorBase:
    __slots__ = ('_value',)  # prevents adding new attributes

    num_channels: ClassVar[int] = 3
    mode:       ClassVar[ColorSpace]
    maxima:     ClassVar[Tuple[Scalar, ...]]
    format_type: ClassVar[FormatType]
    _is_frozen: bool = False   # class-level default (instance gets its own slot)

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: ColorElement | ColorBase) -> None:
        # ---- Handle ColorBase input ----
        if isinstance(value, ColorBase):
            if value.mode == self.mode and value.format_type == self.format_type:
                value = value.value
            else:
                value = convert(
                    color=value.value,
                    from_space=value.mode,
                    to_space=self.mode,
                    input_type=value.format_type,
                    output_type=self.format_type,
                )

        if isinstance(value, (str, bytes)) or get_dimension(value) != self.num_channels:
            raise ValueError(f"{self.mode.value} expects {self.num_channels} channels, got {value!r}")

        # clamp value, then enforce the format type
        cast_fn = format_classes[self.format_type]
        channels = tuple(
            cast_fn(max(0, min(v, m))) for v, m in zip(cast(Tuple[Any, ...], value), self.maxima)
        )

        # safe assignment; __setattr__ still allows it during init
        self._value = channels

        # freeze instance; no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[Scalar, ...]:
        return self._value

    @property
    def has_alpha(self) -> bool:
        """Check if this color space includes an alpha channel."""
        return self.mode.has_alpha

    @property
    def rgba8(self) -> Tuple[int, int, int, int]:
        """The color as an 8-bit RGBA tuple, the form the drawing surface consumes."""
        return cast(
            Tuple[int, int, int, int],
            tuple(int(v) for v in convert(self.value, self.mode, ColorSpace.RGBA, self.format_type, FormatType.INT)),
        )

    def convert(self, to_space: ColorSpace | str | None = None, to_format: FormatType | str | None = None) -> ColorBase:
        """
        Convert this color to a different space (adding or dropping alpha) and/or format.

        Args:
            to_space: Target color space ("rgb" or "rgba"). Defaults to the current one.
            to_format: Target format type (INT or FLOAT). Defaults to current format.

        Returns:
            New ColorBase instance in the target space/format
        """
        from .rgb import rgb_tuple_to_class  # local import to avoid cycles

        to_space = ColorSpace(to_space or self.mode)
        to_format = FormatType(to_format or self.format_type)
        cls = rgb_tuple_to_class[(to_space, to_format)]
        return cls(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return (
            self.mode == other.mode
            and self.format_type == other.format_type
            and self.value == other.value
        )

    def __hash__(self) -> int:
        return hash((self.mode, self.format_type, self.value))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.value!r})"


def build_registry(*classes: type[ColorBase]):
    return {
        (cls.mode, cls.format_type): cls
        for cls in classes
    }

"""
Format conversions for RGB(A) channel tuples.

Colors are normalized to unit floats, re-scaled to the target format and
rounded half up when the target is INT. Alpha is carried through, added at full
opacity, or dropped depending on the source and target spaces.
"""
from typing import Tuple, cast

import numpy as np

from .types.color_types import ColorElement, ColorSpace
from .types.format_type import FormatType, max_channel


def normalize(color: np.ndarray, fmt: FormatType) -> np.ndarray:
    return color / max_channel[fmt]


def round_half_up(values: np.ndarray) -> np.ndarray:
    """Round halves up (2.5 -> 3), unlike np.round which rounds them to even."""
    return np.floor(values + 0.5)


def scale(color: np.ndarray, fmt: FormatType) -> np.ndarray:
    scaled = color * max_channel[fmt]
    return round_half_up(scaled).astype(int) if fmt == FormatType.INT else scaled


def _convert_core(
    color: np.ndarray,
    from_space: ColorSpace,
    to_space: ColorSpace,
    input_fmt: FormatType,
    output_fmt: FormatType,
) -> np.ndarray:
    if from_space.has_alpha:
        base = color[..., :3]
        alpha = color[..., 3]
    else:
        base = color
        alpha = None

    out = scale(normalize(base, input_fmt), output_fmt)

    if not to_space.has_alpha:
        return out

    if alpha is None:
        # Default alpha value when no alpha in input
        alpha_out = np.full(out.shape[:-1], max_channel[output_fmt])
    else:
        alpha_out = scale(normalize(alpha, input_fmt), output_fmt)
    return np.concatenate([out, np.asarray(alpha_out)[..., None]], axis=-1)


def convert(
    color: ColorElement,
    from_space: ColorSpace | str,
    to_space: ColorSpace | str,
    input_type: FormatType | str = FormatType.INT,
    output_type: FormatType | str = FormatType.INT,
) -> ColorElement:
    from_space = ColorSpace(from_space)
    to_space = ColorSpace(to_space)
    input_type = FormatType(input_type)
    output_type = FormatType(output_type)
    if from_space == to_space and input_type == output_type:
        return color  # No conversion needed
    result = _convert_core(
        np.asarray(color, dtype=float),
        from_space,
        to_space,
        input_type,
        output_type,
    )
    return cast(Tuple[float, ...], tuple(result.tolist()))

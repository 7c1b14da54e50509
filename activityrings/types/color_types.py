from __future__ import annotations
from enum import Enum
from typing import Tuple, Union

Scalar = int | float
IntVector = Tuple[int, ...]
ScalarVector = Tuple[Scalar, ...]
ColorElement = Union[IntVector, ScalarVector]


class ColorSpace(str, Enum):
    RGB = "rgb"
    RGBA = "rgba"

    @property
    def has_alpha(self) -> bool:
        return self is ColorSpace.RGBA

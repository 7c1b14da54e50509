from .patterns import (
    ColorStop,
    Pattern,
    SolidPattern,
    LinearGradient,
    RadialGradient,
)
from .ring_gradient import GradientDirection, build_ring_gradient

__all__ = [
    "ColorStop",
    "Pattern",
    "SolidPattern",
    "LinearGradient",
    "RadialGradient",
    "GradientDirection",
    "build_ring_gradient",
]

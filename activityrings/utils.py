import math
from typing import Any, Tuple
from collections.abc import Sized


def get_dimension(element: Any) -> int:
    if element is None:
        return 0
    if isinstance(element, Sized):
        return len(element)
    return 1


def arc_end(angle: float, radius: float, center: float) -> Tuple[float, float]:
    """Point on a circle around ``(center, center)``; angles grow clockwise on screen."""
    x = center + radius * math.cos(angle)
    y = center + radius * math.sin(angle)
    return x, y

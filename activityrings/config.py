"""
Fixed geometry for the activity rings image.

The defaults reproduce the reference 782px layout: 86px strokes, 6px
between rings and a 115px hole in the middle.
"""
from __future__ import annotations

from dataclasses import dataclass, replace

REFERENCE_IMAGE_SIZE = 782


@dataclass(frozen=True)
class RingLayout:
    line_width: float = 86.0
    ring_padding: float = 6.0
    inner_circle: float = 115.0
    image_size: int = REFERENCE_IMAGE_SIZE
    # Width of the soft edge of the overflow shadow disc
    shadow_falloff: float = 11.0

    def __post_init__(self) -> None:
        if self.line_width <= 0:
            raise ValueError(f"line_width must be positive, got {self.line_width}")
        if self.image_size <= 0:
            raise ValueError(f"image_size must be positive, got {self.image_size}")
        if self.ring_padding < 0 or self.inner_circle < 0 or self.shadow_falloff < 0:
            raise ValueError("ring_padding, inner_circle and shadow_falloff must not be negative")

    @property
    def center(self) -> float:
        return self.image_size / 2.0

    @property
    def half_width(self) -> float:
        return self.line_width / 2.0

    def ring_radius(self, index: int) -> float:
        """Radius of the stroke centerline for the ``index``-th ring from the middle."""
        return self.inner_circle + self.half_width + index * (self.line_width + self.ring_padding)

    def scaled_to(self, image_size: int) -> RingLayout:
        """Same proportions, laid out for a different square image size."""
        factor = image_size / self.image_size
        return replace(
            self,
            line_width=self.line_width * factor,
            ring_padding=self.ring_padding * factor,
            inner_circle=self.inner_circle * factor,
            shadow_falloff=self.shadow_falloff * factor,
            image_size=image_size,
        )


DEFAULT_LAYOUT = RingLayout()

import math

import numpy as np
import pytest

from activityrings.gradients.ring_gradient import GradientDirection
from activityrings.rings.model import RingType
from activityrings.rings.segments import (
    ArcStroke,
    ShadowDisc,
    SHADOW_ANGLE_OFFSET,
    render_progress,
    shadow_angle,
)


def arcs(commands):
    return [c for c in commands if isinstance(c, ArcStroke)]


def shadows(commands):
    return [c for c in commands if isinstance(c, ShadowDisc)]


def test_zero_draws_nothing(rings, center):
    assert render_progress(rings[RingType.MOVE], 0.0, center) == []


def test_negative_draws_nothing(rings, center):
    assert render_progress(rings[RingType.MOVE], -0.3, center) == []


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_is_rejected(rings, center, value):
    with pytest.raises(ValueError):
        render_progress(rings[RingType.MOVE], value, center)


def test_quarter_circle(rings, center):
    commands = render_progress(rings[RingType.STAND], 0.25, center)
    assert len(commands) == 1
    (arc,) = arcs(commands)
    assert arc.start_angle == pytest.approx(-0.5 * math.pi)
    assert arc.end_angle == pytest.approx(0.0)
    assert arc.direction is GradientDirection.TOP_DOWN
    assert arc.radius == rings[RingType.STAND].radius
    assert arc.center == center


def test_three_quarters_is_two_segments_without_shadow(rings, center):
    commands = render_progress(rings[RingType.EXERCISE], 0.75, center)
    assert shadows(commands) == []
    first, second = arcs(commands)
    assert (first.start_angle, first.end_angle) == pytest.approx((-0.5 * math.pi, 0.5 * math.pi))
    assert (second.start_angle, second.end_angle) == pytest.approx((0.5 * math.pi, math.pi))
    assert second.direction is GradientDirection.BOTTOM_UP


def test_exact_goal(rings, center):
    commands = render_progress(rings[RingType.MOVE], 1.0, center)
    assert len(arcs(commands)) == 2
    (shadow,) = shadows(commands)
    assert shadow.angle == pytest.approx(2.0 * math.pi - 0.5 * math.pi + 0.01 * math.pi)
    assert shadow.angle == pytest.approx(shadow_angle(1.0))
    # Shadow goes under the last segment
    assert isinstance(commands[1], ShadowDisc)
    assert isinstance(commands[-1], ArcStroke)


def test_overflow_segments(rings, center):
    commands = render_progress(rings[RingType.MOVE], 1.5, center)
    strokes = arcs(commands)
    assert len(strokes) == 3
    assert [s.direction for s in strokes] == [
        GradientDirection.TOP_DOWN,
        GradientDirection.BOTTOM_UP,
        GradientDirection.TOP_DOWN,
    ]
    for stroke in strokes:
        assert stroke.end_angle - stroke.start_angle == pytest.approx(math.pi)

    # Shadow only once remaining drops to half a goal, before the third stroke
    assert [type(c) for c in commands] == [ArcStroke, ArcStroke, ShadowDisc, ArcStroke]
    (shadow,) = shadows(commands)
    assert shadow.angle == pytest.approx(1.5 * 2.0 * math.pi - 0.5 * math.pi + SHADOW_ANGLE_OFFSET)


def test_shadow_geometry(rings, center):
    ring = rings[RingType.MOVE]
    (shadow,) = shadows(render_progress(ring, 1.0, center))
    assert shadow.x == pytest.approx(center + ring.radius * math.cos(shadow.angle))
    assert shadow.y == pytest.approx(center + ring.radius * math.sin(shadow.angle))
    assert shadow.radius == 43.0
    assert (shadow.gradient.r0, shadow.gradient.r1) == (32.0, 43.0)
    assert [s.color.value for s in shadow.gradient.stops] == [(0, 0, 0, 255), (0, 0, 0, 10)]


def test_colors_chain_between_segments(rings, center):
    ring = rings[RingType.MOVE]
    strokes = arcs(render_progress(ring, 1.5, center))

    assert strokes[0].gradient.stops[0].color == ring.start_color
    for previous, current in zip(strokes, strokes[1:]):
        assert current.gradient.stops[0].color == previous.stop_color
    for stroke in strokes:
        assert stroke.gradient.stops[-1].color == stroke.stop_color


def test_color_position_uses_full_value(rings, center):
    ring = rings[RingType.MOVE]
    strokes = arcs(render_progress(ring, 1.5, center))
    start = np.array(ring.start_color.convert("rgb", "int").value)
    end = np.array(ring.end_color.convert("rgb", "int").value)
    for stroke, fraction in zip(strokes, (1 / 3, 2 / 3, 1.0)):
        expected = (start + fraction * (end - start)).astype(int)
        assert stroke.stop_color.convert("rgb", "int").value == tuple(expected)
    assert strokes[-1].stop_color.convert("rgb", "int").value == tuple(end)


def test_gradients_follow_direction(rings, center):
    strokes = arcs(render_progress(rings[RingType.STAND], 1.0, center))
    top_down, bottom_up = strokes
    assert top_down.gradient.y0 < top_down.gradient.y1
    assert bottom_up.gradient.y0 > bottom_up.gradient.y1


def test_large_value_keeps_alternating(rings, center):
    strokes = arcs(render_progress(rings[RingType.EXERCISE], 2.2, center))
    assert len(strokes) == 5
    assert strokes[-1].end_angle - strokes[-1].start_angle == pytest.approx(0.2 / 0.5 * math.pi)
    directions = [s.direction for s in strokes]
    assert all(a is not b for a, b in zip(directions, directions[1:]))

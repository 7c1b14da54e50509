import io
import math

import numpy as np
import pytest
from PIL import Image

from activityrings.colors.rgb import ColorRGBAINT, TRANSPARENT
from activityrings.rings.image import ActivityRingsImage
from activityrings.rings.model import RingType
from ..utils import get_point

CENTER = 391.0


def pixels(img):
    return img.surface.to_array()


def test_idle_rings_are_drawn_on_construction():
    img = ActivityRingsImage()
    arr = pixels(img)
    assert arr.shape == (782, 782, 4)
    assert tuple(arr[0, 0]) == (0, 0, 0, 255)
    assert tuple(arr[391, 391]) == (0, 0, 0, 255)
    for ring in img.rings.values():
        for theta in (0.0, 0.5 * math.pi, math.pi, 1.5 * math.pi):
            assert tuple(get_point(arr, CENTER, ring.radius, theta)) == ring.inactive_color.rgba8


def test_transparent_background():
    arr = pixels(ActivityRingsImage(background=TRANSPARENT))
    assert tuple(arr[0, 0]) == (0, 0, 0, 0)
    assert arr[391 - 342, 391][3] == 255


def test_partial_progress_colors_only_the_swept_part():
    img = ActivityRingsImage()
    stand = img.rings[RingType.STAND]
    img.draw_activity({RingType.STAND: 0.25})
    arr = pixels(img)

    swept = get_point(arr, CENTER, stand.radius, -0.25 * math.pi)
    assert np.allclose(swept[:3], stand.start_color.rgba8[:3], atol=6)

    # Left half is past the sweep and its round cap
    untouched = get_point(arr, CENTER, stand.radius, math.pi)
    assert tuple(untouched) == stand.inactive_color.rgba8


def test_full_goal_covers_the_ring():
    img = ActivityRingsImage()
    exercise = img.rings[RingType.EXERCISE]
    img.draw_activity({RingType.EXERCISE: 1.0})
    arr = pixels(img)
    for theta in np.linspace(0.0, 2.0 * math.pi, 16, endpoint=False):
        assert tuple(get_point(arr, CENTER, exercise.radius, theta)) != exercise.inactive_color.rgba8


def test_overflow_draws_shadow():
    with_shadow = ActivityRingsImage()
    with_shadow.draw_activity({RingType.MOVE: 1.0})
    without_shadow = ActivityRingsImage()
    without_shadow.draw_activity({RingType.MOVE: 0.999})

    # Just clockwise of the shadow center, outside the final segment's cap
    shaded = pixels(with_shadow)[49, 441].astype(int)
    plain = pixels(without_shadow)[49, 441].astype(int)
    assert shaded[:3].sum() < plain[:3].sum() - 50


def test_unknown_ring_types_are_ignored():
    baseline = ActivityRingsImage()
    baseline.draw_activity({RingType.MOVE: 0.6})

    img = ActivityRingsImage()
    img.draw_activity({RingType.MOVE: 0.6, "sleep": 3.0, 7: 1.0})
    assert np.array_equal(pixels(img), pixels(baseline))


def test_ring_names_work_as_keys():
    by_enum = ActivityRingsImage()
    by_enum.draw_activity({RingType.STAND: 0.4, RingType.MOVE: 1.2})
    by_name = ActivityRingsImage()
    by_name.draw_activity({"move": 1.2, "stand": 0.4})
    assert by_enum.encode_png() == by_name.encode_png()


def test_empty_mapping_keeps_idle_state():
    img = ActivityRingsImage()
    before = img.encode_png()
    img.draw_activity({})
    assert img.encode_png() == before


def test_rendering_is_deterministic():
    values = {RingType.STAND: 0.3, RingType.EXERCISE: 1.0, RingType.MOVE: 1.7}
    first = ActivityRingsImage(400, ColorRGBAINT((20, 20, 20, 255)))
    first.draw_activity(values)
    second = ActivityRingsImage(400, ColorRGBAINT((20, 20, 20, 255)))
    second.draw_activity(values)
    assert first.encode_png() == second.encode_png()
    # Encoding does not consume or change the image
    assert first.encode_png() == first.encode_png()


def test_encode_png_writes_stream():
    img = ActivityRingsImage(120)
    stream = io.BytesIO()
    data = img.encode_png(stream)
    assert stream.getvalue() == data
    assert data.startswith(b"\x89PNG")
    assert Image.open(io.BytesIO(data)).size == (120, 120)


def test_save_png(tmp_path):
    path = tmp_path / "rings.png"
    img = ActivityRingsImage(200)
    img.draw_activity({RingType.MOVE: 0.5})
    img.save_png(path)
    with Image.open(path) as saved:
        assert saved.size == (200, 200)
        assert saved.mode == "RGBA"


def test_save_png_failure_propagates(tmp_path):
    img = ActivityRingsImage(50)
    with pytest.raises(OSError):
        img.save_png(tmp_path / "missing" / "rings.png")


def test_small_image_scales_layout():
    img = ActivityRingsImage(391)
    assert img.layout.line_width == pytest.approx(43.0)
    assert img.rings[RingType.MOVE].radius == pytest.approx(171.0)

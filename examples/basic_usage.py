"""Basic activity rings usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from activityrings import (
    ActivityRingsImage,
    ArcStroke,
    ColorRGBINT,
    RingType,
    TRANSPARENT,
    blend,
    render_progress,
    save_swatches,
)


def demonstrate_colors() -> None:
    # Blend is channel-wise and truncates.
    start = ColorRGBINT((225, 0, 20))
    end = ColorRGBINT((255, 50, 135))
    print("Halfway:", blend(start, end, 0.5).value)
    print("Clamped:", blend(start, end, 3.0).value)


def demonstrate_segments() -> None:
    # Inspect the draw commands behind an overflowing ring.
    img = ActivityRingsImage()
    move = img.rings[RingType.MOVE]
    for command in render_progress(move, 1.5, img.center):
        if isinstance(command, ArcStroke):
            print(f"Arc {command.start_angle:.3f} -> {command.end_angle:.3f} ({command.direction.value})")
        else:
            print(f"Shadow at ({command.x:.1f}, {command.y:.1f})")


def demonstrate_images() -> None:
    img = ActivityRingsImage()
    img.draw_activity({RingType.STAND: 0.75, RingType.EXERCISE: 1.0, RingType.MOVE: 1.3})
    img.save_png("rings.png")
    print("Wrote rings.png")

    small = ActivityRingsImage(200, TRANSPARENT)
    small.draw_activity({"stand": 0.2, "exercise": 0.4, "move": 0.6})
    small.save_png("rings_small.png")
    print("Wrote rings_small.png")

    save_swatches("sample.png")
    print("Wrote sample.png")


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_segments()
    demonstrate_images()

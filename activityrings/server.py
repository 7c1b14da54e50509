"""
HTTP endpoint serving activity ring images.

    GET /rings?stand=0.5&exercise=1.0&move=1.3  ->  image/png

Every request renders into its own ActivityRingsImage; nothing is shared
between requests but the read-only ring palette.
"""
from __future__ import annotations

import logging
import math
from typing import Any, Mapping, Optional

from flask import Flask, Response, request

from .colors.rgb import parse_color
from .config import DEFAULT_LAYOUT
from .rings.image import ActivityRingsImage
from .rings.model import RingType

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "IMAGE_SIZE": DEFAULT_LAYOUT.image_size,
    "BACKGROUND": "transparent",
    "MAX_PROGRESS": 50.0,
}


class BadProgressValue(ValueError):
    pass


def parse_progress(name: str, raw: Optional[str], max_progress: float) -> float:
    try:
        value = float(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise BadProgressValue(f"Bad request, could not parse {name} value as a float") from None
    if not math.isfinite(value) or value < 0.0 or value > max_progress:
        raise BadProgressValue(f"Bad request, {name} value is out of range")
    return value


def create_app(config: Optional[Mapping[str, Any]] = None) -> Flask:
    app = Flask(__name__)
    app.config.update(DEFAULT_CONFIG)
    app.config.from_prefixed_env(prefix="ACTIVITYRINGS")
    if config:
        app.config.update(config)

    @app.get("/rings")
    def rings() -> Response:
        max_progress = float(app.config["MAX_PROGRESS"])
        try:
            values = {
                ring_type: parse_progress(ring_type.value, request.args.get(ring_type.value), max_progress)
                for ring_type in RingType
            }
        except BadProgressValue as exc:
            logger.info("Rejected %s: %s", request.full_path, exc)
            return Response(str(exc), status=400, mimetype="text/plain")

        background = app.config["BACKGROUND"]
        if isinstance(background, str):
            background = parse_color(background)

        img = ActivityRingsImage(int(app.config["IMAGE_SIZE"]), background)
        img.draw_activity(values)
        logger.debug("Rendered rings %s", {k.value: v for k, v in values.items()})
        return Response(img.encode_png(), mimetype="image/png")

    return app

from __future__ import annotations

import logging
import math
import re
from typing import Optional, Sequence

from wallpaper.config import DEFAULT_CONFIG, DEFAULT_GOAL, WallpaperConfig
from wallpaper.days import classify_days
from wallpaper.errors import InvalidDimensionError
from wallpaper.imaging import render_wallpaper
from wallpaper.layout import compute_layout

_LEADING_INT = re.compile(r"^[+-]?\d+")


def parse_leading_int(raw: str | None) -> int | None:
    """Return the integer prefix of ``raw`` ('12abc' -> 12, '12.5' -> 12), or None."""
    if raw is None:
        return None
    m = _LEADING_INT.match(raw.strip())
    if not m:
        return None
    try:
        return int(m.group(0))
    except ValueError:
        # more digits than int() accepts
        return None


def parse_step_data(raw: str, total_days: int = 365) -> list[int]:
    """Parse a comma-separated step list like '8500, 12000,9500'.

    Tokens without a leading integer, and negative values, are dropped, which
    shifts the following days one slot earlier. Values past ``total_days`` are
    ignored.
    """
    steps: list[int] = []
    for token in raw.split(","):
        value = parse_leading_int(token)
        if value is None or value < 0:
            continue
        steps.append(value)
    if len(steps) > total_days:
        logging.info("Truncating step data from %s to %s days", len(steps), total_days)
        steps = steps[:total_days]
    return steps


def resolve_canvas_size(width_pt: int, height_pt: int, scale: float) -> tuple[int, int]:
    """Convert screen points to device pixels.

    Raises ``InvalidDimensionError`` when the product does not fit a float.
    """
    try:
        width = width_pt * scale
        height = height_pt * scale
    except OverflowError:
        width = height = math.inf
    if not (math.isfinite(width) and math.isfinite(height)):
        raise InvalidDimensionError(
            "Width and height are too large", width=None, height=None, reason="too_large"
        )
    return int(round(width)), int(round(height))


def validate_dimensions(width: int, height: int, max_dimension: int = 5000) -> None:
    if width <= 0 or height <= 0:
        raise InvalidDimensionError(
            "Width and height must be positive integers", width=width, height=height, reason="non_positive"
        )
    if width > max_dimension or height > max_dimension:
        raise InvalidDimensionError(
            f"Width and height must be {max_dimension} pixels or less",
            width=width,
            height=height,
            reason="too_large",
        )


def generate_image(
    width: int,
    height: int,
    daily_record: Sequence[int],
    goal: int = DEFAULT_GOAL,
    config: Optional[WallpaperConfig] = None,
) -> bytes:
    """Render the yearly step wallpaper as PNG bytes.

    Dimensions are expected to be validated by the caller (see
    ``validate_dimensions``). Raises ``SurfaceAllocationError`` if the canvas
    cannot be created.
    """
    config = config or DEFAULT_CONFIG
    layout = compute_layout(width, height, config)
    states = classify_days(daily_record, goal, config.total_days)
    buf = render_wallpaper(width, height, layout, states, daily_record, goal, config)
    return buf.getvalue()

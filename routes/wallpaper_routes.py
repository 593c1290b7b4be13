from __future__ import annotations

import logging
import math
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Query, Request, Response
from fastapi.responses import JSONResponse

from wallpaper.config import ServiceSettings
from wallpaper.errors import InvalidDimensionError
from wallpaper.generator import (
    generate_image,
    parse_leading_int,
    parse_step_data,
    resolve_canvas_size,
    validate_dimensions,
)

SERVICE_NAME = "10K Steps Wallpaper Generator"
SERVICE_VERSION = "2.0.0"
EXAMPLE_URL = "/wallpaper?width=393&height=852&data=8500,12000,9500&goal=10000&scale=3"

NO_CACHE_HEADERS = {
    "Cache-Control": "no-cache, no-store, must-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}

router = APIRouter()


def _settings(request: Request) -> ServiceSettings:
    return getattr(request.app.state, "settings", None) or ServiceSettings()


def _bad_request(error: str, message: str) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": error, "message": message})


def _parse_scale(raw: Optional[str], default: float) -> Optional[float]:
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        return None
    if not math.isfinite(value) or value <= 0:
        return None
    return value


def _render_response(
    settings: ServiceSettings,
    width: Optional[str],
    height: Optional[str],
    data: Optional[str],
    goal: Optional[str],
    scale: Optional[str],
) -> Response:
    if not width or not height or not data:
        return JSONResponse(
            status_code=400,
            content={
                "error": "Missing required parameters",
                "required": ["width", "height", "data"],
                "example": EXAMPLE_URL,
            },
        )

    scale_num = _parse_scale(scale, settings.default_scale)
    if scale_num is None:
        return _bad_request("Invalid scale value", "Scale must be a positive number")

    width_pt = parse_leading_int(width)
    height_pt = parse_leading_int(height)
    if width_pt is None or height_pt is None:
        return _bad_request("Invalid width or height values", "Width and height must be valid integers")

    goal_num = settings.default_goal
    if goal:
        goal_num = parse_leading_int(goal)
        if goal_num is None or goal_num <= 0:
            return _bad_request("Invalid goal value", "Goal must be a positive integer")

    try:
        width_px, height_px = resolve_canvas_size(width_pt, height_pt, scale_num)
        validate_dimensions(width_px, height_px, settings.max_dimension)
    except InvalidDimensionError as exc:
        error = "Dimensions too large" if exc.reason == "too_large" else "Invalid dimensions"
        return _bad_request(error, str(exc))

    steps: list[int] = []
    try:
        steps = parse_step_data(data)
        image = generate_image(width_px, height_px, steps, goal_num)
    except Exception:
        logging.exception("Error generating wallpaper (%sx%s)", width_px, height_px)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error", "message": "Failed to generate wallpaper"},
        )

    logging.info("Rendered wallpaper %sx%s days=%s goal=%s", width_px, height_px, len(steps), goal_num)
    return Response(content=image, media_type="image/png", headers=NO_CACHE_HEADERS)


@router.get("/wallpaper")
def wallpaper(
    request: Request,
    width: Optional[str] = Query(None, description="Screen width in points"),
    height: Optional[str] = Query(None, description="Screen height in points"),
    data: Optional[str] = Query(None, description="Comma-separated step counts starting from Jan 1st"),
    goal: Optional[str] = Query(None, description="Step goal threshold"),
    scale: Optional[str] = Query(None, description="Device pixel ratio"),
) -> Response:
    return _render_response(_settings(request), width, height, data, goal, scale)


@router.get("/")
def index(
    request: Request,
    width: Optional[str] = Query(None),
    height: Optional[str] = Query(None),
    data: Optional[str] = Query(None),
    goal: Optional[str] = Query(None),
    scale: Optional[str] = Query(None),
) -> Response:
    """Render when all required parameters are present, otherwise describe usage."""
    settings = _settings(request)
    if width and height and data:
        return _render_response(settings, width, height, data, goal, scale)

    return JSONResponse(
        content={
            "service": SERVICE_NAME,
            "version": SERVICE_VERSION,
            "description": "Generates a tapered grid visualization of your yearly step count",
            "usage": {
                "endpoint": "/wallpaper",
                "method": "GET",
                "parameters": {
                    "width": "Screen width in points (required)",
                    "height": "Screen height in points (required)",
                    "data": "Comma-separated step counts starting from Jan 1st (required)",
                    "goal": f"Step goal threshold (optional, defaults to {settings.default_goal})",
                    "scale": f"Device pixel ratio (optional, defaults to {settings.default_scale:g})",
                },
                "example": EXAMPLE_URL,
                "note": "Width/height are multiplied by scale to get actual pixel dimensions",
            },
            "legend": {
                "white": "Days where step goal was met",
                "red": "Days where step goal was missed",
                "white_number": "Current day (today)",
                "dark_grey": "Future days",
            },
        }
    )


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}

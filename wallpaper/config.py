from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Palette:
    background: str = "#000000"
    success: str = "#ffffff"  # goal met, summary line
    failure: str = "#ef4444"  # goal missed
    future: str = "#2a2a2c"
    today_text: str = "#ffffff"


@dataclass(frozen=True)
class WallpaperConfig:
    """Visual constants for one render.

    Everything that shapes the image lives here so a render can be repeated
    with alternate parameters. Padding and font values are fractions of the
    canvas size unless noted.
    """

    palette: Palette = field(default_factory=Palette)
    total_days: int = 365

    columns: int = 15
    rows: int = 25
    taper_rows: int = 3
    max_taper_reduction: int = 6

    top_padding: float = 0.32
    bottom_padding: float = 0.18
    side_padding: float = 0.10

    radius_factor: float = 0.42
    today_font_factor: float = 1.9
    today_font_factor_wide: float = 1.7  # once the day number has 3 digits

    stats_y: float = 0.92
    stats_font_size: float = 0.028

    @property
    def taper_start_row(self) -> int:
        return self.rows - self.taper_rows


DEFAULT_CONFIG = WallpaperConfig()
DEFAULT_GOAL = 10000


def get_env_int(name: str, default: int) -> int:
    """Read integer from environment variables with a safe fallback."""
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logging.warning("Ignoring non-integer %s=%r, using %s", name, raw, default)
        return default


def get_env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logging.warning("Ignoring non-numeric %s=%r, using %s", name, raw, default)
        return default


@dataclass(frozen=True)
class ServiceSettings:
    host: str = "0.0.0.0"
    port: int = 3000
    max_dimension: int = 5000
    default_goal: int = DEFAULT_GOAL
    default_scale: float = 3.0  # modern iPhones render at 3x


def load_service_settings() -> ServiceSettings:
    """Build service settings from the environment (.env is loaded by the caller).

    Non-positive overrides fall back to the defaults.
    """
    defaults = ServiceSettings()
    max_dimension = get_env_int("MAX_DIMENSION", defaults.max_dimension)
    default_goal = get_env_int("DEFAULT_GOAL", defaults.default_goal)
    default_scale = get_env_float("DEFAULT_SCALE", defaults.default_scale)
    return ServiceSettings(
        host=os.getenv("HOST", "").strip() or defaults.host,
        port=get_env_int("PORT", defaults.port),
        max_dimension=max_dimension if max_dimension > 0 else defaults.max_dimension,
        default_goal=default_goal if default_goal > 0 else defaults.default_goal,
        default_scale=default_scale if default_scale > 0 else defaults.default_scale,
    )

from __future__ import annotations

import math
from dataclasses import dataclass
from io import BytesIO
from pathlib import Path
from typing import Sequence

from PIL import Image, ImageDraw, ImageFont

from wallpaper.config import DEFAULT_CONFIG, WallpaperConfig
from wallpaper.days import DayState
from wallpaper.errors import SurfaceAllocationError
from wallpaper.layout import LayoutResult

_BOLD_FONT_CANDIDATES = [
    Path("assets/fonts/Inter-Bold.ttf"),
    Path("/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf"),
    Path("/usr/share/fonts/truetype/liberation/LiberationSans-Bold.ttf"),
    Path("/System/Library/Fonts/Supplemental/Arial Bold.ttf"),
    Path(r"C:/Windows/Fonts/arialbd.ttf"),
    Path("arialbd.ttf"),
]

_REGULAR_FONT_CANDIDATES = [
    Path("assets/fonts/Inter-Regular.ttf"),
    Path("/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf"),
    Path("/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf"),
    Path("/System/Library/Fonts/Supplemental/Arial.ttf"),
    Path(r"C:/Windows/Fonts/arial.ttf"),
    Path("arial.ttf"),
]


@dataclass(frozen=True)
class WallpaperStats:
    days_left: int
    percent_hit: int

    @property
    def summary(self) -> str:
        return f"{self.days_left}d left · {self.percent_hit}% hit"


def _hex_to_rgb(value: str) -> tuple[int, int, int]:
    h = value.strip().lstrip("#")
    if len(h) != 6:
        raise ValueError(f"Invalid hex color: {value}")
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def _load_font(size: float, bold: bool = False) -> ImageFont.FreeTypeFont:
    """Load a sans-serif font at ``size`` px.

    Tries project fonts under assets/fonts, then common Linux/macOS/Windows
    system fonts, then Pillow's bundled default font.
    """
    px = max(1, int(round(size)))
    candidates = _BOLD_FONT_CANDIDATES if bold else _REGULAR_FONT_CANDIDATES
    for p in candidates:
        try:
            return ImageFont.truetype(str(p), px)
        except OSError:
            continue
    return ImageFont.load_default(size=px)


def compute_stats(daily_record: Sequence[int], goal: int, total_days: int = 365) -> WallpaperStats:
    """Days remaining in the year and the share of finished days that hit the goal.

    Today is excluded from the hit rate since it is still in progress.
    """
    days_left = max(0, total_days - len(daily_record))
    past_days = list(daily_record[:-1])
    if not past_days:
        return WallpaperStats(days_left=days_left, percent_hit=0)
    hits = sum(1 for steps in past_days if steps >= goal)
    # round half up
    percent = int(math.floor((hits / len(past_days)) * 100 + 0.5))
    return WallpaperStats(days_left=days_left, percent_hit=percent)


def _new_surface(width: int, height: int, color: tuple[int, int, int]) -> Image.Image:
    try:
        return Image.new("RGB", (width, height), color)
    except (MemoryError, ValueError) as exc:
        raise SurfaceAllocationError(f"Cannot allocate {width}x{height} canvas: {exc}") from exc


def _draw_day_number(
    draw: ImageDraw.ImageDraw,
    x: float,
    y: float,
    day_number: int,
    radius: float,
    config: WallpaperConfig,
) -> None:
    factor = config.today_font_factor_wide if day_number >= 100 else config.today_font_factor
    font = _load_font(radius * factor, bold=True)
    draw.text((x, y), str(day_number), fill=_hex_to_rgb(config.palette.today_text), font=font, anchor="mm")


def _draw_summary(
    draw: ImageDraw.ImageDraw,
    width: int,
    height: int,
    stats: WallpaperStats,
    config: WallpaperConfig,
) -> None:
    font = _load_font(width * config.stats_font_size)
    text = stats.summary
    text_w = draw.textlength(text, font=font)
    x = (width - text_w) / 2
    y = height * config.stats_y
    draw.text((x, y), text, fill=_hex_to_rgb(config.palette.success), font=font, anchor="lm")


def render_wallpaper(
    width: int,
    height: int,
    layout: LayoutResult,
    states: Sequence[DayState],
    daily_record: Sequence[int],
    goal: int,
    config: WallpaperConfig = DEFAULT_CONFIG,
) -> BytesIO:
    """Draw the year grid plus the summary line and return a PNG buffer."""
    palette = config.palette
    circle_colors = {
        DayState.MET: _hex_to_rgb(palette.success),
        DayState.MISSED: _hex_to_rgb(palette.failure),
        DayState.FUTURE: _hex_to_rgb(palette.future),
    }

    img = _new_surface(width, height, _hex_to_rgb(palette.background))
    draw = ImageDraw.Draw(img)

    r = layout.circle_radius
    for day_index in range(min(len(layout.positions), len(states), config.total_days)):
        pos = layout.positions[day_index]
        state = states[day_index]
        if state is DayState.TODAY:
            _draw_day_number(draw, pos.x, pos.y, day_index + 1, r, config)
        elif state in circle_colors:
            draw.ellipse((pos.x - r, pos.y - r, pos.x + r, pos.y + r), fill=circle_colors[state])
        else:
            raise ValueError(f"Unhandled day state: {state!r}")

    stats = compute_stats(daily_record, goal, config.total_days)
    _draw_summary(draw, width, height, stats, config)

    buf = BytesIO()
    img.save(buf, format="PNG")
    buf.seek(0)
    return buf

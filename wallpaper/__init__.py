from wallpaper.config import DEFAULT_CONFIG, Palette, ServiceSettings, WallpaperConfig, load_service_settings
from wallpaper.days import DayState, classify_days
from wallpaper.errors import InvalidDimensionError, SurfaceAllocationError, WallpaperError
from wallpaper.generator import generate_image, parse_step_data, resolve_canvas_size, validate_dimensions
from wallpaper.imaging import WallpaperStats, compute_stats, render_wallpaper
from wallpaper.layout import CellPosition, LayoutResult, compute_layout

__all__ = [
    "DEFAULT_CONFIG",
    "CellPosition",
    "DayState",
    "InvalidDimensionError",
    "LayoutResult",
    "Palette",
    "ServiceSettings",
    "SurfaceAllocationError",
    "WallpaperConfig",
    "WallpaperError",
    "WallpaperStats",
    "classify_days",
    "compute_layout",
    "compute_stats",
    "generate_image",
    "load_service_settings",
    "parse_step_data",
    "render_wallpaper",
    "resolve_canvas_size",
    "validate_dimensions",
]

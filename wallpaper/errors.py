from __future__ import annotations


class WallpaperError(Exception):
    """Base class for failures surfaced by the wallpaper pipeline."""


class InvalidDimensionError(WallpaperError, ValueError):
    """Width or height is non-positive or above the configured maximum."""

    def __init__(self, message: str, *, width: int | None = None, height: int | None = None, reason: str = "invalid"):
        super().__init__(message)
        self.width = width
        self.height = height
        # one of: "invalid", "non_positive", "too_large"
        self.reason = reason


class SurfaceAllocationError(WallpaperError):
    """Pillow could not allocate a canvas of the requested size."""

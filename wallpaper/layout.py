from __future__ import annotations

import math
from dataclasses import dataclass

from wallpaper.config import DEFAULT_CONFIG, WallpaperConfig


@dataclass(frozen=True)
class CellPosition:
    x: float
    y: float


@dataclass(frozen=True)
class LayoutResult:
    positions: tuple[CellPosition, ...]
    circle_radius: float


def _columns_in_row(row: int, config: WallpaperConfig) -> int:
    """Number of cells in a row; the last ``taper_rows`` rows narrow progressively."""
    start = config.taper_start_row
    if row < start:
        return config.columns
    # rows past the grid keep the narrowest taper
    step = min(row - start + 1, config.taper_rows)
    progress = step / config.taper_rows
    reduction = math.floor(progress * config.max_taper_reduction)
    return max(1, config.columns - reduction)


def compute_layout(width: float, height: float, config: WallpaperConfig = DEFAULT_CONFIG) -> LayoutResult:
    """Place one cell per day of the year inside the padded canvas.

    Rows are filled top-to-bottom, left-to-right. Tapered rows are centered
    horizontally. Emission stops after exactly ``config.total_days`` cells; if
    the row schedule runs out first, extra rows at the final taper width are
    appended below the grid. With the default 15x25 schedule that is one row
    holding the last two days, centered half a cell into the bottom padding
    (0.83 of the height) and still above the summary line.
    """
    top = height * config.top_padding
    bottom = height * config.bottom_padding
    side = width * config.side_padding

    available_height = height - top - bottom
    available_width = width - side * 2

    cell_w = available_width / config.columns
    cell_h = available_height / config.rows
    radius = min(cell_w, cell_h) * config.radius_factor

    positions: list[CellPosition] = []
    row = 0
    while len(positions) < config.total_days:
        cols = _columns_in_row(row, config)
        row_x = side + ((config.columns - cols) / 2) * cell_w
        row_y = top + (row + 0.5) * cell_h
        for col in range(cols):
            if len(positions) >= config.total_days:
                break
            positions.append(CellPosition(x=row_x + (col + 0.5) * cell_w, y=row_y))
        row += 1

    return LayoutResult(positions=tuple(positions), circle_radius=radius)

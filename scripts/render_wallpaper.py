"""
Render a step wallpaper to a PNG file without starting the server.

Example:
    python scripts/render_wallpaper.py --width 393 --height 852 \
        --data 8500,12000,9500 --goal 10000 --scale 3 --out wallpaper.png
"""
import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

# Ensure repo root import path
repo_root = Path(__file__).resolve().parents[1]
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from wallpaper.config import load_service_settings  # noqa: E402
from wallpaper.errors import WallpaperError  # noqa: E402
from wallpaper.generator import (  # noqa: E402
    generate_image,
    parse_step_data,
    resolve_canvas_size,
    validate_dimensions,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render a yearly step-count wallpaper")
    parser.add_argument("--width", type=int, required=True, help="Screen width in points")
    parser.add_argument("--height", type=int, required=True, help="Screen height in points")
    parser.add_argument("--data", required=True, help="Comma-separated step counts starting from Jan 1st")
    parser.add_argument("--goal", type=int, default=None, help="Step goal threshold")
    parser.add_argument("--scale", type=float, default=None, help="Device pixel ratio")
    parser.add_argument("--out", type=Path, default=Path("wallpaper.png"), help="Output PNG path")
    return parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv(encoding="utf-8-sig")
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    args = build_parser().parse_args(argv)
    settings = load_service_settings()
    goal = args.goal if args.goal is not None else settings.default_goal
    scale = args.scale if args.scale is not None else settings.default_scale
    if goal <= 0 or scale <= 0:
        logging.error("Goal and scale must be positive")
        return 2

    width, height = resolve_canvas_size(args.width, args.height, scale)
    steps = parse_step_data(args.data)
    try:
        validate_dimensions(width, height, settings.max_dimension)
        image = generate_image(width, height, steps, goal)
    except WallpaperError as exc:
        logging.error("Failed to render wallpaper: %s", exc)
        return 1

    args.out.write_bytes(image)
    logging.info("Wrote %s (%sx%s, %s days, %s bytes)", args.out, width, height, len(steps), len(image))
    return 0


if __name__ == "__main__":
    sys.exit(main())

import logging
import sys
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

# Ensure repo root is importable so that 'routes' and 'wallpaper' (at project root) can be found
repo_root = Path(__file__).resolve().parents[1]
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from routes.app import create_app  # noqa: E402
from wallpaper.config import load_service_settings  # noqa: E402


def load_environment_variables() -> None:
    load_dotenv()


def configure_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def main() -> None:
    load_environment_variables()
    configure_logging()

    settings = load_service_settings()
    app = create_app(settings)

    logging.info("%s running on http://%s:%s", app.title, settings.host, settings.port)
    logging.info(
        "Example: http://localhost:%s/wallpaper?width=393&height=852&data=8500,12000,9500&goal=%s",
        settings.port,
        settings.default_goal,
    )
    uvicorn.run(app, host=settings.host, port=settings.port, log_level="info")


if __name__ == "__main__":
    main()

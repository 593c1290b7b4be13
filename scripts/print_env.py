import os
import sys
from io import StringIO
from pathlib import Path

from dotenv import load_dotenv

repo_root = Path(__file__).resolve().parents[1]
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from wallpaper.config import load_service_settings  # noqa: E402


def safe_load_dotenv() -> None:
    dotenv_path = Path(".env")
    if not dotenv_path.exists():
        return
    try:
        load_dotenv(dotenv_path=dotenv_path, encoding="utf-8")
    except UnicodeDecodeError:
        # Some editors save .env as utf-16
        content = dotenv_path.read_text(encoding="utf-16")
        load_dotenv(stream=StringIO(content))


def main() -> None:
    safe_load_dotenv()
    keys = ["HOST", "PORT", "MAX_DIMENSION", "DEFAULT_GOAL", "DEFAULT_SCALE"]
    for key in keys:
        value = os.getenv(key)
        print(f"{key}={value if value is not None else '<NOT SET>'}")
    settings = load_service_settings()
    print(f"effective settings: {settings}")


if __name__ == "__main__":
    main()

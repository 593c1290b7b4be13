from __future__ import annotations

from typing import Optional

from fastapi import FastAPI

from routes.wallpaper_routes import SERVICE_NAME, SERVICE_VERSION, router
from wallpaper.config import ServiceSettings, load_service_settings


def create_app(settings: Optional[ServiceSettings] = None) -> FastAPI:
    app = FastAPI(title=SERVICE_NAME, version=SERVICE_VERSION)
    app.state.settings = settings or load_service_settings()
    app.include_router(router)
    return app

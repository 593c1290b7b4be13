"""Shared fixtures for wallpaper tests."""

import pytest

from wallpaper.config import DEFAULT_CONFIG, ServiceSettings


@pytest.fixture
def config():
    return DEFAULT_CONFIG


@pytest.fixture
def settings():
    return ServiceSettings(max_dimension=5000, default_goal=10000, default_scale=3.0)


@pytest.fixture
def client(settings):
    from fastapi.testclient import TestClient

    from routes.app import create_app

    return TestClient(create_app(settings))

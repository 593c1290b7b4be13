"""HTTP tests for the wallpaper endpoints."""

from tests.helpers import decode_png

QUERY = "width=393&height=852&data=8500,12000,9500&goal=10000&scale=1"


def test_wallpaper_returns_png(client):
    response = client.get(f"/wallpaper?{QUERY}")
    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"
    assert response.headers["cache-control"] == "no-cache, no-store, must-revalidate"
    assert response.headers["pragma"] == "no-cache"
    assert response.headers["expires"] == "0"
    assert decode_png(response.content).size == (393, 852)


def test_default_scale_is_applied(client):
    response = client.get("/wallpaper?width=100&height=200&data=1,2")
    assert response.status_code == 200
    assert decode_png(response.content).size == (300, 600)


def test_missing_parameters(client):
    response = client.get("/wallpaper?width=393&height=852")
    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Missing required parameters"
    assert body["required"] == ["width", "height", "data"]


def test_non_numeric_dimensions(client):
    response = client.get("/wallpaper?width=abc&height=852&data=1")
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid width or height values"


def test_non_positive_dimensions(client):
    response = client.get("/wallpaper?width=0&height=852&data=1")
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid dimensions"


def test_dimensions_too_large(client):
    response = client.get("/wallpaper?width=2000&height=852&data=1&scale=3")
    assert response.status_code == 400
    assert response.json()["error"] == "Dimensions too large"


def test_invalid_goal(client):
    response = client.get("/wallpaper?width=100&height=100&data=1&goal=-3&scale=1")
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid goal value"


def test_invalid_scale(client):
    response = client.get("/wallpaper?width=100&height=100&data=1&scale=zero")
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid scale value"


def test_generation_failure_returns_500(client, monkeypatch):
    from wallpaper.errors import SurfaceAllocationError

    def fail(*args, **kwargs):
        raise SurfaceAllocationError("no surface")

    monkeypatch.setattr("routes.wallpaper_routes.generate_image", fail)
    response = client.get(f"/wallpaper?{QUERY}")
    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error", "message": "Failed to generate wallpaper"}


def test_root_renders_when_parameters_present(client):
    response = client.get(f"/?{QUERY}")
    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"


def test_root_describes_usage(client):
    response = client.get("/")
    assert response.status_code == 200
    body = response.json()
    assert body["usage"]["endpoint"] == "/wallpaper"
    assert "legend" in body


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_overflowing_scale_is_rejected(client):
    response = client.get("/wallpaper?width=10&height=10&data=1&scale=1e308")
    assert response.status_code == 400
    assert response.json()["error"] == "Dimensions too large"


def test_width_too_long_to_convert_is_rejected(client):
    response = client.get(f"/wallpaper?width={'9' * 5000}&height=10&data=1&scale=1")
    assert response.status_code == 400
    assert response.json()["error"] in ("Invalid width or height values", "Dimensions too large")


def test_width_too_large_for_float_is_rejected(client):
    response = client.get(f"/wallpaper?width={'9' * 400}&height=10&data=1&scale=3")
    assert response.status_code == 400
    assert response.json()["error"] == "Dimensions too large"


def test_oversized_step_token_still_renders(client):
    response = client.get(f"/wallpaper?width=100&height=100&data=1,{'9' * 5000},2&scale=1")
    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"

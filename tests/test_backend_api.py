"""Tests for the color wheel HTTP API."""

import dataclasses
import logging

import pytest

pytest.importorskip("fastapi")
pytest.importorskip("httpx")

from fastapi.testclient import TestClient  # noqa: E402

from backend.app_factory import AppContext, create_app  # noqa: E402
from core.wheel_config import WheelConfig  # noqa: E402


@pytest.fixture
def client(wheel_config):
    return TestClient(create_app(config=wheel_config))


class TestConfigEndpoint:
    def test_returns_wheel_placement(self, client):
        response = client.get("/api/wheel/config")
        assert response.status_code == 200
        assert response.json() == {
            "center_x": 512,
            "center_y": 400,
            "scale": 3.5,
            "lightness": 0.5,
            "outer_radius": 350,
        }

    def test_context_config_is_used(self):
        context = AppContext(config=WheelConfig.for_canvas(100, 100, scale=0.5))
        client = TestClient(create_app(context=context))
        assert client.get("/api/wheel/config").json()["outer_radius"] == 50


class TestPickEndpoint:
    def test_pick_inside(self, client):
        response = client.get("/api/wheel/pick", params={"x": 862, "y": 400})
        assert response.status_code == 200
        data = response.json()
        assert data["inside"] is True
        assert data["hsl"] == {"h": 0, "s": 1, "l": 0.5}
        assert data["rgb"] == {"r": 255, "g": 0, "b": 0}
        assert data["hex"] == "FF0000"
        assert data["lines"] == ["H: 0, S: 100%, L: 50%", "R: 255, G: 0, B: 0", "#FF0000"]

    def test_pick_outside_reports_white(self, client):
        data = client.get("/api/wheel/pick", params={"x": 0, "y": 0}).json()
        assert data["inside"] is False
        assert data["hex"] == "FFFFFF"
        assert data["hsl"] == {"h": 0, "s": 0, "l": 1}

    def test_pick_requires_coordinates(self, client):
        assert client.get("/api/wheel/pick", params={"x": 1}).status_code == 422


class TestPositionEndpoint:
    def test_hue_zero_full_saturation(self, client):
        data = client.get("/api/wheel/position", params={"hue": 0, "saturation": 100}).json()
        assert data["x"] == pytest.approx(862)
        assert data["y"] == pytest.approx(400)

    @pytest.mark.parametrize(
        "params",
        [{"hue": 400, "saturation": 10}, {"hue": -1, "saturation": 10}, {"hue": 10, "saturation": 101}],
    )
    def test_out_of_range_is_rejected(self, client, params):
        assert client.get("/api/wheel/position", params=params).status_code == 422


class TestConvertEndpoint:
    def test_green(self, client):
        data = client.get("/api/wheel/convert", params={"h": 120, "s": 1, "l": 0.5}).json()
        assert data["rgb"] == {"r": 0, "g": 255, "b": 0}
        assert data["hex"] == "00FF00"
        assert data["css"] == "hsl(120, 100%, 50%)"

    def test_gray_stays_fractional(self, client):
        data = client.get("/api/wheel/convert", params={"h": 0, "s": 0, "l": 0.5}).json()
        assert data["rgb"] == {"r": 127.5, "g": 127.5, "b": 127.5}
        assert data["hex"] == "7F7F7F"

    def test_saturation_must_be_a_fraction(self, client):
        assert client.get("/api/wheel/convert", params={"h": 0, "s": 50, "l": 0.5}).status_code == 422


class TestHealth:
    def test_health(self, client):
        data = client.get("/health").json()
        assert data["status"] == "ok"
        assert data["uptime_seconds"] >= 0


class TestAppFactory:
    def test_log_level_reaches_backend_loggers(self, wheel_config):
        try:
            create_app(config=wheel_config, log_level="DEBUG")
            for name in ("backend", "wheel.backend", "uvicorn"):
                assert logging.getLogger(name).getEffectiveLevel() == logging.DEBUG, name

            create_app(config=wheel_config, log_level="WARNING")
            assert logging.getLogger("backend").getEffectiveLevel() == logging.WARNING
        finally:
            create_app(config=wheel_config, log_level="INFO")

    def test_context_holds_only_runtime_state(self):
        names = {f.name for f in dataclasses.fields(AppContext)}
        assert names == {"config", "allowed_origins", "server_start_time"}

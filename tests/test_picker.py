"""Tests for picked color reporting."""

import pytest

from core.color import WHITE, HSLColor, RGBColor
from core.picker import (
    PickedColor,
    format_hex,
    format_hsl,
    format_mouse_position,
    format_rgb,
    pick_color,
)


class TestPickColor:
    """Tests for pick_color."""

    def test_rim_point_reports_red(self, wheel_config):
        picked = pick_color(862, 400, wheel_config)
        assert picked.inside
        assert picked.hsl == HSLColor(0, 1, 0.5)
        assert picked.rgb == RGBColor(255, 0, 0)
        assert picked.hex == "FF0000"

    def test_outside_reports_white_and_flags_it(self, wheel_config):
        picked = pick_color(5, 5, wheel_config)
        assert not picked.inside
        assert picked.hsl == WHITE
        assert picked.hex == "FFFFFF"

    def test_center_reports_gray(self, wheel_config):
        picked = pick_color(512, 400, wheel_config)
        assert picked.inside
        assert picked.rgb == RGBColor(127.5, 127.5, 127.5)
        assert picked.hex == "7F7F7F"

    def test_left_rim_is_cyan(self, wheel_config):
        picked = pick_color(162, 400, wheel_config)
        assert picked.hsl.h == pytest.approx(180)
        assert (picked.rgb.r, picked.rgb.g, picked.rgb.b) == pytest.approx((0, 255, 255), abs=1e-6)

    def test_same_point_same_result(self, wheel_config):
        """Picking has no hidden state or randomness."""
        first = pick_color(700, 250, wheel_config)
        second = pick_color(700, 250, wheel_config)
        assert first == second
        assert first.hex == second.hex


class TestDetailLines:
    """Tests for the text shown next to the swatch."""

    def test_detail_lines_for_red(self, wheel_config):
        assert pick_color(862, 400, wheel_config).detail_lines() == [
            "H: 0, S: 100%, L: 50%",
            "R: 255, G: 0, B: 0",
            "#FF0000",
        ]

    def test_detail_lines_for_outside(self, wheel_config):
        assert pick_color(0, 0, wheel_config).detail_lines() == [
            "H: 0, S: 0%, L: 100%",
            "R: 255, G: 255, B: 255",
            "#FFFFFF",
        ]

    def test_format_hsl_floors_hue_and_saturation(self):
        assert format_hsl(HSLColor(123.9, 0.456, 0.5)) == "H: 123, S: 45%, L: 50%"

    def test_format_hsl_keeps_fractional_lightness(self):
        assert format_hsl(HSLColor(10, 0.5, 0.125)) == "H: 10, S: 50%, L: 12.5%"

    def test_format_rgb_floors_components(self):
        assert format_rgb(RGBColor(127.5, 0.99, 254.2)) == "R: 127, G: 0, B: 254"

    def test_format_hex(self):
        assert format_hex("00FF00") == "#00FF00"

    def test_format_mouse_position(self):
        assert format_mouse_position(10, 20) == "X: 10, Y: 20"

    def test_picked_color_is_immutable(self, wheel_config):
        picked = pick_color(862, 400, wheel_config)
        assert isinstance(picked, PickedColor)
        with pytest.raises(AttributeError):
            picked.hex = "000000"

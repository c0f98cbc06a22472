"""Picked color reporting.

Bundles the color under a pointer position with its RGB and hex forms, and
formats the detail lines shown next to the swatch.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from core.color import WHITE, HSLColor, RGBColor
from core.geometry import locate
from core.wheel_config import DEFAULT_WHEEL_CONFIG, WheelConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PickedColor:
    """The color reported for a pointer position.

    Attributes:
        hsl: Color under the pointer (white when outside the wheel)
        rgb: RGB form of ``hsl``
        hex: Six character uppercase hex form, no ``#``
        inside: Whether the pointer was on the wheel
    """

    hsl: HSLColor
    rgb: RGBColor
    hex: str
    inside: bool

    def detail_lines(self) -> list[str]:
        return [format_hsl(self.hsl), format_rgb(self.rgb), format_hex(self.hex)]


def pick_color(x: float, y: float, config: WheelConfig = DEFAULT_WHEEL_CONFIG) -> PickedColor:
    """Resolve the color under (x, y) into all reported representations."""
    located = locate(x, y, config)
    hsl = located if located is not None else WHITE
    rgb = hsl.to_rgb()
    picked = PickedColor(hsl=hsl, rgb=rgb, hex=rgb.to_hex(), inside=located is not None)
    logger.debug("Picked %s at (%s, %s) inside=%s", picked.hex, x, y, picked.inside)
    return picked


def _percent(fraction: float) -> str:
    # 0.5 -> "50", 0.125 -> "12.5"
    return f"{fraction * 100:g}"


def format_hsl(color: HSLColor) -> str:
    """e.g. ``H: 120, S: 50%, L: 50%`` (hue and saturation floored)."""
    return f"H: {math.floor(color.h)}, S: {math.floor(color.s * 100)}%, L: {_percent(color.l)}%"


def format_rgb(color: RGBColor) -> str:
    """e.g. ``R: 255, G: 0, B: 0`` (components floored)."""
    return f"R: {math.floor(color.r)}, G: {math.floor(color.g)}, B: {math.floor(color.b)}"


def format_hex(hex_value: str) -> str:
    return f"#{hex_value}"


def format_mouse_position(x: float, y: float) -> str:
    return f"X: {x}, Y: {y}"

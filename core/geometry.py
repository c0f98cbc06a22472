"""Wheel geometry: mapping between canvas positions and (hue, saturation).

Hue is the angle around the wheel center, measured counter-clockwise from
the positive x axis as seen on screen (canvas y grows downwards). Saturation
is the distance from the center in percent, scaled by ``WheelConfig.scale``
pixels per percent.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from core.color import WHITE, HSLColor
from core.wheel_config import DEFAULT_WHEEL_CONFIG, WheelConfig

# Points forwarded onto the rim can land a rounding error past it
RIM_TOLERANCE = 1e-9


@dataclass(frozen=True)
class Point:
    """A canvas position in pixels."""

    x: float
    y: float


def degree_to_radian(deg: float) -> float:
    return deg * math.pi / 180


def radian_to_degree(rad: float) -> float:
    return rad * 180 / math.pi


def forward(hue: float, saturation: float, config: WheelConfig = DEFAULT_WHEEL_CONFIG) -> Point:
    """Return the canvas position of a (hue, saturation) pair.

    Args:
        hue: Hue in degrees, 0-360
        saturation: Saturation in percent, 0-100
        config: Wheel placement

    Returns:
        Point on the canvas
    """
    angle = degree_to_radian(hue)
    return Point(
        config.center_x + math.cos(angle) * saturation * config.scale,
        config.center_y - math.sin(angle) * saturation * config.scale,
    )


def distance_from_center(x: float, y: float, config: WheelConfig = DEFAULT_WHEEL_CONFIG) -> float:
    """Distance of (x, y) from the wheel center in pixels."""
    offset_x = abs(config.center_x - x)
    offset_y = abs(config.center_y - y)
    return math.sqrt(offset_x * offset_x + offset_y * offset_y)


def is_inside(x: float, y: float, config: WheelConfig = DEFAULT_WHEEL_CONFIG) -> bool:
    """Whether (x, y) lies on the wheel (the rim counts as inside)."""
    return locate(x, y, config) is not None


def locate(x: float, y: float, config: WheelConfig = DEFAULT_WHEEL_CONFIG) -> Optional[HSLColor]:
    """Return the wheel color under (x, y), or None outside the wheel.

    The hue comes from inverting ``x = cx + cos(h) * s * scale``. Since acos
    only covers 0-180 degrees, points below the center are mirrored to
    ``360 - h``. At the exact center the hue is undefined and reported as 0.
    ``RIM_TOLERANCE`` past the rim still counts as inside, with saturation
    capped at 1.
    """
    dist = distance_from_center(x, y, config)
    if dist > config.outer_radius + RIM_TOLERANCE:
        return None

    s_percent = dist / config.scale
    if s_percent == 0:
        return HSLColor(0.0, 0.0, config.lightness)

    cosine = (x - config.center_x) / s_percent / config.scale
    # Rounding can push the ratio a hair past +-1
    cosine = max(-1.0, min(1.0, cosine))
    hue = radian_to_degree(math.acos(cosine))
    if y > config.center_y:
        hue = 360 - hue

    return HSLColor(hue, min(s_percent, 100) / 100, config.lightness)


def inverse(x: float, y: float, config: WheelConfig = DEFAULT_WHEEL_CONFIG) -> HSLColor:
    """Return the wheel color under (x, y).

    Points outside the wheel map to white ``HSLColor(0, 0, 1)``. The same
    value is also a valid color, so callers that need to tell "outside"
    apart from a picked color should use ``locate`` instead.
    """
    color = locate(x, y, config)
    if color is None:
        return WHITE
    return color


__all__ = [
    "Point",
    "degree_to_radian",
    "distance_from_center",
    "forward",
    "inverse",
    "is_inside",
    "locate",
    "radian_to_degree",
]

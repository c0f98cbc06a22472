"""Dot lattice used to paint the wheel.

Instead of mapping every pixel back to a color, the wheel is painted as one
dot per integer (hue, saturation) pair: 361 x 101 dots. Dots grow with
saturation so the outer rings have no visible gaps, and a ring in the
background color is stroked over the rim afterwards to hide its bumps.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from core.color import HSLColor
from core.config.display import BACKGROUND_COLOR, BORDER_WIDTH, DOT_BASE_RADIUS
from core.geometry import Point, forward
from core.wheel_config import DEFAULT_WHEEL_CONFIG, WheelConfig

HUE_STEPS = 361  # 0..360 inclusive
SATURATION_STEPS = 101  # 0..100 inclusive


@dataclass(frozen=True)
class WheelDot:
    """One filled dot of the wheel lattice."""

    center: Point
    radius: float
    color: HSLColor


@dataclass(frozen=True)
class BorderRing:
    """The smoothing ring stroked around the wheel rim."""

    center: Point
    radius: float
    width: int
    color: tuple[int, int, int]


def dot_radius(saturation: float, config: WheelConfig = DEFAULT_WHEEL_CONFIG) -> float:
    """Radius of the lattice dot at the given saturation percent."""
    return config.scale * saturation / 100 + DOT_BASE_RADIUS


def iter_wheel_dots(config: WheelConfig = DEFAULT_WHEEL_CONFIG) -> Iterator[WheelDot]:
    """Yield every lattice dot, hue-major, saturation from center outwards."""
    for h in range(HUE_STEPS):
        for s in range(SATURATION_STEPS):
            yield WheelDot(
                center=forward(h, s, config),
                radius=dot_radius(s, config),
                color=HSLColor(float(h), s / 100, config.lightness),
            )


def border_ring(config: WheelConfig = DEFAULT_WHEEL_CONFIG) -> BorderRing:
    return BorderRing(
        center=Point(config.center_x, config.center_y),
        radius=config.outer_radius + BORDER_WIDTH / 2,
        width=BORDER_WIDTH,
        color=BACKGROUND_COLOR,
    )

"""Immutable wheel configuration."""

from __future__ import annotations

from dataclasses import dataclass

from core.config.display import SCREEN_HEIGHT, SCREEN_WIDTH, WHEEL_LIGHTNESS, WHEEL_SCALE
from core.exceptions import ConfigurationError


@dataclass(frozen=True)
class WheelConfig:
    """Where the wheel sits on the canvas and how big it is.

    Attributes:
        center_x: Horizontal center of the wheel in canvas pixels
        center_y: Vertical center of the wheel in canvas pixels
        scale: Pixels per saturation percent
        lightness: Fixed lightness (fraction) of every color on the wheel
    """

    center_x: float = SCREEN_WIDTH / 2
    center_y: float = SCREEN_HEIGHT / 2
    scale: float = WHEEL_SCALE
    lightness: float = WHEEL_LIGHTNESS

    def __post_init__(self) -> None:
        if self.scale <= 0:
            raise ConfigurationError(f"scale must be positive, got {self.scale}")
        if not 0.0 <= self.lightness <= 1.0:
            raise ConfigurationError(f"lightness must be within [0, 1], got {self.lightness}")

    @property
    def outer_radius(self) -> float:
        """Radius of the wheel at 100% saturation."""
        return 100 * self.scale

    @classmethod
    def for_canvas(
        cls,
        width: int = SCREEN_WIDTH,
        height: int = SCREEN_HEIGHT,
        scale: float = WHEEL_SCALE,
        lightness: float = WHEEL_LIGHTNESS,
    ) -> WheelConfig:
        """Build a config centered on a canvas of the given size."""
        if width <= 0 or height <= 0:
            raise ConfigurationError(f"canvas size must be positive, got {width}x{height}")
        return cls(center_x=width / 2, center_y=height / 2, scale=scale, lightness=lightness)

    def to_dict(self) -> dict:
        return {
            "center_x": self.center_x,
            "center_y": self.center_y,
            "scale": self.scale,
            "lightness": self.lightness,
            "outer_radius": self.outer_radius,
        }


DEFAULT_WHEEL_CONFIG = WheelConfig()

"""Color wheel API endpoints.

Thin JSON wrappers around the pure geometry and color functions so a
browser canvas can pick colors without reimplementing them.
"""

import logging

from fastapi import APIRouter, Query

from backend.models import (
    ConversionData,
    HSLData,
    PickedColorData,
    PointData,
    RGBData,
    WheelConfigData,
)
from core.color import HSLColor, css_hsl, hsl_to_rgb, rgb_to_hex
from core.geometry import forward
from core.picker import pick_color
from core.wheel_config import WheelConfig

logger = logging.getLogger(__name__)


def setup_wheel_router(config: WheelConfig) -> APIRouter:
    """Create and configure the wheel router.

    Args:
        config: Wheel placement used by every endpoint

    Returns:
        Configured APIRouter
    """
    router = APIRouter(prefix="/api/wheel", tags=["wheel"])

    @router.get("/config", response_model=WheelConfigData)
    def get_config():
        """Return the wheel placement clients should draw with."""
        return WheelConfigData.from_config(config)

    @router.get("/pick", response_model=PickedColorData)
    def pick(x: float, y: float):
        """Return the color under a canvas position.

        Positions outside the wheel report ``inside: false`` together with
        white as the color.
        """
        picked = pick_color(x, y, config)
        return PickedColorData.from_picked(x, y, picked)

    @router.get("/position", response_model=PointData)
    def position(
        hue: float = Query(..., ge=0, le=360),
        saturation: float = Query(..., ge=0, le=100),
    ):
        """Return the canvas position of a hue (degrees) and saturation (percent)."""
        point = forward(hue, saturation, config)
        return PointData(x=point.x, y=point.y)

    @router.get("/convert", response_model=ConversionData)
    def convert(
        h: float = Query(..., ge=0, le=360),
        s: float = Query(..., ge=0, le=1),
        l: float = Query(..., ge=0, le=1),  # noqa: E741
    ):
        """Convert an HSL color (fractions for s and l) to RGB and hex."""
        rgb = hsl_to_rgb(h, s, l)
        color = HSLColor(h, s, l)
        return ConversionData(
            hsl=HSLData.from_color(color),
            rgb=RGBData.from_color(rgb),
            hex=rgb_to_hex(rgb.r, rgb.g, rgb.b),
            css=css_hsl(color),
        )

    return router

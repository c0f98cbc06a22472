"""Core color wheel logic.

This package contains the pure coordinate and color transformations for the
HSL color picker wheel, with no UI dependencies. Key modules include:

- geometry: canvas position <-> (hue, saturation)
- color: HSL -> RGB -> hex conversions
- picker: picked color bundle and detail text
- lattice: dots and border ring used to paint the wheel
- interfaces: RenderSurface protocol implemented by front ends

Design note: this module exposes a small, explicit public API via ``__all__``.
"""

from core.color import HSLColor, RGBColor, hsl_to_rgb, rgb_to_hex
from core.geometry import Point, forward, inverse, locate
from core.wheel_config import WheelConfig

__all__ = [
    "HSLColor",
    "Point",
    "RGBColor",
    "WheelConfig",
    "forward",
    "hsl_to_rgb",
    "inverse",
    "locate",
    "rgb_to_hex",
]

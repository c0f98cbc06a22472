"""Color conversion utilities.

This module provides the HSL -> RGB -> hex conversions used to report a
picked color. Separating these from the wheel geometry enables reuse and
clearer testing.

Design Note:
    These are pure functions with no rendering dependencies.
    Hue is in degrees (0-360), saturation and lightness are fractions (0-1).
    RGB components stay fractional (0-255); truncation to integers is a
    display concern handled by rgb_to_hex and the text formatters.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class HSLColor:
    """A color in HSL notation.

    Attributes:
        h: Hue in degrees, 0-360
        s: Saturation as a fraction, 0-1
        l: Lightness as a fraction, 0-1
    """

    h: float
    s: float
    l: float  # noqa: E741

    def to_rgb(self) -> RGBColor:
        return hsl_to_rgb(self.h, self.s, self.l)

    def to_hex(self) -> str:
        return hsl_to_hex(self.h, self.s, self.l)


@dataclass(frozen=True)
class RGBColor:
    """A color in RGB notation with fractional 0-255 components."""

    r: float
    g: float
    b: float

    def to_hex(self) -> str:
        return rgb_to_hex(self.r, self.g, self.b)

    def as_ints(self) -> tuple[int, int, int]:
        """Return the components truncated to integers, ready for a surface."""
        return (int(self.r), int(self.g), int(self.b))


# Reported for points outside the wheel
WHITE = HSLColor(0.0, 0.0, 1.0)


def hsl_to_rgb(h: float, s: float, l: float) -> RGBColor:  # noqa: E741
    """Convert an HSL color to RGB.

    Uses the chroma / intermediate / match-value formulation: the hue circle
    is split into six 60 degree sectors, each assigning (c, x, 0) to (r, g, b)
    in a fixed order before the match value m is added to every channel.

    Args:
        h: Hue in degrees, 0-360. Anything from 300 up (including 360)
            falls into the last sector.
        s: Saturation, 0-1
        l: Lightness, 0-1

    Returns:
        RGBColor with fractional components in 0-255

    Example:
        >>> hsl_to_rgb(0, 1, 0.5)
        RGBColor(r=255.0, g=0.0, b=0.0)
        >>> hsl_to_rgb(0, 0, 0.5)
        RGBColor(r=127.5, g=127.5, b=127.5)
    """
    c = (1 - abs(2 * l - 1)) * s
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = l - c / 2

    if h < 60:
        r, g, b = c, x, 0.0
    elif h < 120:
        r, g, b = x, c, 0.0
    elif h < 180:
        r, g, b = 0.0, c, x
    elif h < 240:
        r, g, b = 0.0, x, c
    elif h < 300:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return RGBColor((r + m) * 255, (g + m) * 255, (b + m) * 255)


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Convert RGB components to a 6 character uppercase hex string.

    Each component is truncated to an integer and zero-padded to two digits.
    No leading ``#``; callers prepend it for display.

    Example:
        >>> rgb_to_hex(5, 5, 5)
        '050505'
    """
    return f"{int(r):02X}{int(g):02X}{int(b):02X}"


def hsl_to_hex(h: float, s: float, l: float) -> str:  # noqa: E741
    """Convert HSL directly to hex."""
    rgb = hsl_to_rgb(h, s, l)
    return rgb_to_hex(rgb.r, rgb.g, rgb.b)


def css_hsl(color: HSLColor) -> str:
    """Format a color as a CSS ``hsl()`` string, e.g. ``hsl(120, 50%, 50%)``."""
    return f"hsl({color.h:g}, {color.s * 100:g}%, {color.l * 100:g}%)"

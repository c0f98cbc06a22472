"""Data models for API responses."""

from typing import List

from pydantic import BaseModel

from core.color import HSLColor, RGBColor
from core.picker import PickedColor
from core.wheel_config import WheelConfig


class HSLData(BaseModel):
    """An HSL color. Saturation and lightness are fractions (0-1)."""

    h: float
    s: float
    l: float  # noqa: E741

    @classmethod
    def from_color(cls, color: HSLColor) -> "HSLData":
        return cls(h=color.h, s=color.s, l=color.l)


class RGBData(BaseModel):
    """An RGB color with fractional 0-255 components."""

    r: float
    g: float
    b: float

    @classmethod
    def from_color(cls, color: RGBColor) -> "RGBData":
        return cls(r=color.r, g=color.g, b=color.b)


class PointData(BaseModel):
    """A canvas position in pixels."""

    x: float
    y: float


class WheelConfigData(BaseModel):
    """Wheel placement on the canvas."""

    center_x: float
    center_y: float
    scale: float
    lightness: float
    outer_radius: float

    @classmethod
    def from_config(cls, config: WheelConfig) -> "WheelConfigData":
        return cls(**config.to_dict())


class PickedColorData(BaseModel):
    """The color under a canvas position."""

    x: float
    y: float
    inside: bool  # False means the hsl/rgb/hex fields hold the white fallback
    hsl: HSLData
    rgb: RGBData
    hex: str
    lines: List[str]

    @classmethod
    def from_picked(cls, x: float, y: float, picked: PickedColor) -> "PickedColorData":
        return cls(
            x=x,
            y=y,
            inside=picked.inside,
            hsl=HSLData.from_color(picked.hsl),
            rgb=RGBData.from_color(picked.rgb),
            hex=picked.hex,
            lines=picked.detail_lines(),
        )


class ConversionData(BaseModel):
    """An HSL color with its RGB and hex forms."""

    hsl: HSLData
    rgb: RGBData
    hex: str
    css: str

"""Re-export of all configuration constants.

Import from here when a module needs constants from more than one
configuration area.
"""

from core.config.display import (
    BACKGROUND_COLOR,
    BORDER_WIDTH,
    DETAILS_FONT_SIZE,
    DETAILS_TEXT_X,
    DETAILS_TEXT_Y,
    DOT_BASE_RADIUS,
    FRAME_RATE,
    INSTRUCTIONS_BOTTOM_MARGIN,
    INSTRUCTIONS_FONT_SIZE,
    INSTRUCTIONS_TEXT,
    POSITION_BOX_HEIGHT,
    POSITION_BOX_WIDTH,
    POSITION_TEXT_OFFSET,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    SEPARATOR_WIDTH,
    SWATCH_CLEAR_RECT,
    SWATCH_RECT,
    TEXT_COLOR,
    WHEEL_LIGHTNESS,
    WHEEL_SCALE,
)
from core.config.server import DEFAULT_API_HOST, DEFAULT_API_PORT

__all__ = [
    "BACKGROUND_COLOR",
    "BORDER_WIDTH",
    "DEFAULT_API_HOST",
    "DEFAULT_API_PORT",
    "DETAILS_FONT_SIZE",
    "DETAILS_TEXT_X",
    "DETAILS_TEXT_Y",
    "DOT_BASE_RADIUS",
    "FRAME_RATE",
    "INSTRUCTIONS_BOTTOM_MARGIN",
    "INSTRUCTIONS_FONT_SIZE",
    "INSTRUCTIONS_TEXT",
    "POSITION_BOX_HEIGHT",
    "POSITION_BOX_WIDTH",
    "POSITION_TEXT_OFFSET",
    "SCREEN_HEIGHT",
    "SCREEN_WIDTH",
    "SEPARATOR_WIDTH",
    "SWATCH_CLEAR_RECT",
    "SWATCH_RECT",
    "TEXT_COLOR",
    "WHEEL_LIGHTNESS",
    "WHEEL_SCALE",
]

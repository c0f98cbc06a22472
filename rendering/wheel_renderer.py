"""Wheel rendering on top of a RenderSurface.

This module paints the wheel, the instructions, the pointer position readout
and the picked color swatch. It only computes what to draw; the surface
does the drawing.
"""

import logging
from typing import Optional

from core.config.display import (
    DETAILS_FONT_SIZE,
    DETAILS_TEXT_X,
    DETAILS_TEXT_Y,
    INSTRUCTIONS_BOTTOM_MARGIN,
    INSTRUCTIONS_FONT_SIZE,
    INSTRUCTIONS_TEXT,
    POSITION_BOX_HEIGHT,
    POSITION_BOX_WIDTH,
    POSITION_TEXT_OFFSET,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    SWATCH_CLEAR_RECT,
    SWATCH_RECT,
    TEXT_COLOR,
)
from core.exceptions import SurfaceNotSetError
from core.interfaces import RenderSurface
from core.lattice import border_ring, iter_wheel_dots
from core.picker import PickedColor, format_mouse_position, pick_color
from core.wheel_config import DEFAULT_WHEEL_CONFIG, WheelConfig

logger = logging.getLogger(__name__)


class WheelRenderer:
    """Renders the color picker onto a surface.

    Attributes:
        surface: Surface to render to; every draw call requires it
        config: Wheel placement
        width: Canvas width in pixels
        height: Canvas height in pixels
    """

    def __init__(
        self,
        surface: Optional[RenderSurface],
        config: WheelConfig = DEFAULT_WHEEL_CONFIG,
        width: int = SCREEN_WIDTH,
        height: int = SCREEN_HEIGHT,
    ) -> None:
        self.surface = surface
        self.config = config
        self.width = width
        self.height = height

    def _require_surface(self) -> RenderSurface:
        if self.surface is None:
            raise SurfaceNotSetError("Render surface not set, pass one to WheelRenderer first.")
        return self.surface

    def draw_color_wheel(self) -> int:
        """Paint the dot lattice followed by the smoothing border ring.

        Returns:
            Number of dots painted
        """
        surface = self._require_surface()

        count = 0
        for dot in iter_wheel_dots(self.config):
            rgb = dot.color.to_rgb().as_ints()
            surface.fill_circle((dot.center.x, dot.center.y), dot.radius, rgb)
            count += 1

        ring = border_ring(self.config)
        surface.stroke_circle((ring.center.x, ring.center.y), ring.radius, ring.color, ring.width)
        logger.debug("Painted %d wheel dots", count)
        return count

    def draw_instructions(self) -> None:
        """Draw the centered instructions at the bottom of the canvas."""
        surface = self._require_surface()

        text_width = surface.measure_text(INSTRUCTIONS_TEXT, INSTRUCTIONS_FONT_SIZE)
        x = self.width / 2 - text_width // 2
        y = self.height - INSTRUCTIONS_BOTTOM_MARGIN
        surface.draw_text(INSTRUCTIONS_TEXT, (x, y), INSTRUCTIONS_FONT_SIZE, TEXT_COLOR)

    def draw_mouse_position(self, x: float, y: float) -> None:
        """Draw the pointer position in the top right corner."""
        surface = self._require_surface()

        surface.clear_rect(
            (self.width - POSITION_BOX_WIDTH, 0, POSITION_BOX_WIDTH, POSITION_BOX_HEIGHT)
        )
        offset_x, text_y = POSITION_TEXT_OFFSET
        surface.draw_text(
            format_mouse_position(x, y), (self.width - offset_x, text_y), DETAILS_FONT_SIZE, TEXT_COLOR
        )

    def draw_picked_color(self, x: float, y: float) -> PickedColor:
        """Draw the swatch and details of the color under (x, y) in the top left corner.

        Returns:
            The picked color, so callers can reuse it
        """
        surface = self._require_surface()

        surface.clear_rect(SWATCH_CLEAR_RECT)
        picked = pick_color(x, y, self.config)
        surface.fill_rect(SWATCH_RECT, picked.rgb.as_ints())
        for line, text_y in zip(picked.detail_lines(), DETAILS_TEXT_Y):
            surface.draw_text(line, (DETAILS_TEXT_X, text_y), DETAILS_FONT_SIZE, TEXT_COLOR)
        return picked

"""Desktop color picker window.

Paints the wheel once, then updates the pointer readout and the picked
color swatch whenever the pointer moves, clicks or taps.
"""

import logging
from typing import Optional, Tuple

import pygame

from core.config.display import BACKGROUND_COLOR, FRAME_RATE, SCREEN_HEIGHT, SCREEN_WIDTH
from core.picker import PickedColor
from core.wheel_config import WheelConfig
from rendering.pygame_surface import PygameSurface
from rendering.wheel_renderer import WheelRenderer

logger = logging.getLogger(__name__)


class ColorPickerApp:
    """Interactive HSL color picker.

    Attributes:
        config: Wheel placement
        width: Window width in pixels
        height: Window height in pixels
        screen: Pygame display surface, set by setup()
        renderer: Wheel renderer bound to the screen, set by setup()
        last_picked: Most recently picked color
    """

    def __init__(
        self,
        config: Optional[WheelConfig] = None,
        width: int = SCREEN_WIDTH,
        height: int = SCREEN_HEIGHT,
    ) -> None:
        self.width = width
        self.height = height
        self.config = config if config is not None else WheelConfig.for_canvas(width, height)
        self.clock: pygame.time.Clock = pygame.time.Clock()
        self.screen: Optional[pygame.Surface] = None
        self.renderer: Optional[WheelRenderer] = None
        self.last_picked: Optional[PickedColor] = None

    def setup(self) -> bool:
        """Open the window and paint the static parts.

        Returns:
            False if the display could not be opened
        """
        try:
            self.screen = pygame.display.set_mode((self.width, self.height))
            pygame.display.set_caption("HSL Color Wheel")
        except pygame.error as e:
            logger.error("Couldn't set the display mode: %s", e)
            return False

        pygame.font.init()
        self.screen.fill(BACKGROUND_COLOR)
        self.renderer = WheelRenderer(
            PygameSurface(self.screen), self.config, width=self.width, height=self.height
        )
        dots = self.renderer.draw_color_wheel()
        self.renderer.draw_instructions()
        logger.info("Wheel painted with %d dots", dots)
        return True

    def pointer_position(self, event: pygame.event.Event) -> Optional[Tuple[int, int]]:
        """Canvas position carried by a pointer event, or None for other events."""
        if event.type in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONDOWN):
            return event.pos
        if event.type == pygame.FINGERDOWN:
            # Touch coordinates are normalized to 0-1
            return int(event.x * self.width), int(event.y * self.height)
        return None

    def on_pointer(self, x: int, y: int) -> None:
        if self.renderer is None:
            return
        self.renderer.draw_mouse_position(x, y)
        self.last_picked = self.renderer.draw_picked_color(x, y)

    def handle_events(self) -> bool:
        """Handle user input. Returns False when the app should quit."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False
            position = self.pointer_position(event)
            if position is not None:
                self.on_pointer(*position)
        return True

    def run(self) -> None:
        if not self.setup():
            return

        logger.info("Controls: move or click to pick a color, ESC to quit")
        while self.handle_events():
            pygame.display.flip()
            self.clock.tick(FRAME_RATE)

        if self.last_picked is not None:
            logger.info("Last picked color: #%s", self.last_picked.hex)


def main(config: Optional[WheelConfig] = None, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT) -> None:
    """Entry point for the desktop picker."""
    pygame.init()
    app = ColorPickerApp(config=config, width=width, height=height)
    try:
        app.run()
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()

"""RenderSurface implementation backed by a pygame Surface."""

from typing import Dict, Tuple

import pygame

from core.config.display import BACKGROUND_COLOR
from core.interfaces import RGB, Rect


class PygameSurface:
    """Adapts a ``pygame.Surface`` to the RenderSurface protocol.

    Fonts are loaded lazily per size and cached, so ``pygame.font.init()``
    must have been called before any text is drawn.

    Attributes:
        screen: Pygame surface to render to
        background: Color used by clear_rect
    """

    def __init__(self, screen: pygame.Surface, background: RGB = BACKGROUND_COLOR) -> None:
        self.screen = screen
        self.background = background
        self._fonts: Dict[int, pygame.font.Font] = {}

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def fill_circle(self, center: Tuple[float, float], radius: float, color: RGB) -> None:
        pygame.draw.circle(self.screen, color, center, radius)

    def stroke_circle(
        self, center: Tuple[float, float], radius: float, color: RGB, width: int
    ) -> None:
        # pygame strokes inwards from the radius, canvas strokes centered on it
        pygame.draw.circle(self.screen, color, center, radius + width / 2, width)

    def fill_rect(self, rect: Rect, color: RGB) -> None:
        pygame.draw.rect(self.screen, color, pygame.Rect(*rect))

    def clear_rect(self, rect: Rect) -> None:
        pygame.draw.rect(self.screen, self.background, pygame.Rect(*rect))

    def draw_text(self, text: str, position: Tuple[float, float], size: int, color: RGB) -> None:
        font = self._font(size)
        text_surface = font.render(text, True, color)
        x, baseline = position
        self.screen.blit(text_surface, (x, baseline - font.get_ascent()))

    def measure_text(self, text: str, size: int) -> float:
        width, _ = self._font(size).size(text)
        return width

"""Protocol interfaces for type safety and better IDE support.

The wheel core never draws anything itself. Front ends implement
``RenderSurface`` and hand it to ``rendering.wheel_renderer.WheelRenderer``.
"""

from typing import Protocol, Tuple, runtime_checkable

RGB = Tuple[int, int, int]
Rect = Tuple[float, float, float, float]  # x, y, width, height


@runtime_checkable
class RenderSurface(Protocol):
    """A 2D raster surface the wheel can be painted on."""

    def fill_circle(self, center: Tuple[float, float], radius: float, color: RGB) -> None:
        """Plot a filled circular dot."""
        ...

    def stroke_circle(
        self, center: Tuple[float, float], radius: float, color: RGB, width: int
    ) -> None:
        """Stroke a circle outline of the given line width."""
        ...

    def fill_rect(self, rect: Rect, color: RGB) -> None:
        """Fill a rectangle."""
        ...

    def clear_rect(self, rect: Rect) -> None:
        """Reset a rectangle to the background."""
        ...

    def draw_text(self, text: str, position: Tuple[float, float], size: int, color: RGB) -> None:
        """Draw text with its baseline-left corner at ``position``."""
        ...

    def measure_text(self, text: str, size: int) -> float:
        """Width in pixels of ``text`` at the given font size."""
        ...

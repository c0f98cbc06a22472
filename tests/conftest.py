"""Pytest configuration and fixtures for color wheel tests."""

import pytest

from core.wheel_config import WheelConfig
from tests.fakes.recording_surface import RecordingSurface


@pytest.fixture
def wheel_config():
    """The standard 1024x800 canvas with a scale of 3.5."""
    return WheelConfig.for_canvas(1024, 800, scale=3.5)


@pytest.fixture
def small_config():
    """A 200x200 canvas with one pixel per saturation percent."""
    return WheelConfig.for_canvas(200, 200, scale=1.0)


@pytest.fixture
def recording_surface():
    """A RenderSurface that records every call instead of drawing."""
    return RecordingSurface()

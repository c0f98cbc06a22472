"""Color wheel exception hierarchy.

The pure geometry and color functions never raise for numeric input; these
classes cover the configuration and rendering seams around them.
"""


class ColorWheelError(Exception):
    """Root of all color wheel exceptions."""


class ConfigurationError(ColorWheelError):
    """Invalid or missing configuration."""


class SurfaceNotSetError(ConfigurationError):
    """A draw call was made before a render surface was supplied."""

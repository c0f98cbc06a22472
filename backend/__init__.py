"""Backend package for the Color Wheel API.

This package provides the FastAPI web server that exposes the wheel
geometry and color conversions to browser clients.
"""

__version__ = "1.0.0"

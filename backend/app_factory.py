"""Application factory and context for the Color Wheel API.

This module provides a factory for creating the FastAPI app, avoiding
import-time side effects. Runtime state lives in an AppContext attached to
``app.state.context`` rather than in module-level globals, so each test can
build its own app with its own wheel placement.

Usage:
------
    # For production (settings from environment)
    app = create_app()

    # For testing (custom configuration)
    app = create_app(config=WheelConfig.for_canvas(400, 400, scale=1.0))
"""

import os
import time
from dataclasses import dataclass, field
from typing import List, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend import __version__
from backend.logging_config import SERVER_FORMAT, configure_logging
from backend.routers.wheel import setup_wheel_router
from core.wheel_config import WheelConfig


@dataclass
class AppContext:
    """Runtime context holding all application state."""

    config: WheelConfig = field(default_factory=WheelConfig)

    # Configuration
    allowed_origins: List[str] = field(
        default_factory=lambda: os.getenv("ALLOWED_ORIGINS", "*").split(",")
    )

    # Timing
    server_start_time: float = field(default_factory=time.time)

    def uptime_seconds(self) -> float:
        return time.time() - self.server_start_time


def create_app(
    *,
    config: Optional[WheelConfig] = None,
    context: Optional[AppContext] = None,
    log_level: Optional[str] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        config: Override the wheel placement (default: the standard canvas)
        context: Pre-configured AppContext (for testing). If None, creates a new one.
        log_level: Log level for the backend and uvicorn loggers
            (default: WHEEL_LOG_LEVEL or INFO)

    Returns:
        Configured FastAPI application with context attached as app.state.context
    """
    logger = configure_logging(
        level=log_level, format=SERVER_FORMAT, include_uvicorn=True, extra_loggers=("backend",)
    )

    if context is None:
        context = AppContext()
    if config is not None:
        context.config = config

    app = FastAPI(title="Color Wheel API", version=__version__)
    app.state.context = context

    app.add_middleware(
        CORSMiddleware,
        allow_origins=context.allowed_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.include_router(setup_wheel_router(context.config))

    @app.get("/health")
    def health():
        """Liveness probe."""
        return {"status": "ok", "version": __version__, "uptime_seconds": context.uptime_seconds()}

    logger.info(
        "Color Wheel API ready (center=%.1f,%.1f scale=%.2f)",
        context.config.center_x,
        context.config.center_y,
        context.config.scale,
    )
    return app

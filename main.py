"""Main entry point for the HSL color wheel.

This module provides command-line options to run the picker:
- Desktop mode (default): pygame window with hover/tap picking
- Web mode: FastAPI backend serving the wheel API
- Pick mode: print the color under one canvas position and exit
"""

import argparse
import logging
import sys
from typing import Optional

from backend.logging_config import configure_logging
from core.constants import (
    DEFAULT_API_HOST,
    DEFAULT_API_PORT,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    SEPARATOR_WIDTH,
    WHEEL_SCALE,
)
from core.exceptions import ConfigurationError
from core.wheel_config import WheelConfig

logger = logging.getLogger(__name__)


def run_web_server(config: WheelConfig, port: int, log_level: Optional[str] = None) -> None:
    """Run the web server exposing the wheel API."""
    try:
        import uvicorn

        from backend.app_factory import create_app

        logger.info("=" * SEPARATOR_WIDTH)
        logger.info("COLOR WHEEL - WEB SERVER")
        logger.info("=" * SEPARATOR_WIDTH)
        logger.info("API docs available at http://localhost:%d/docs", port)
        logger.info("Press Ctrl+C to stop the server")
        logger.info("=" * SEPARATOR_WIDTH)

        uvicorn.run(create_app(config=config, log_level=log_level), host=DEFAULT_API_HOST, port=port)
    except ImportError as e:
        logger.error("Error: Required dependencies not installed: %s", e)
        logger.error("Install with: pip install -e .[backend]")
        sys.exit(1)


def run_desktop(config: WheelConfig, width: int, height: int) -> None:
    """Run the pygame picker window."""
    try:
        from rendering.picker_app import main as run_picker
    except ImportError as e:
        logger.error("Error: pygame is not installed: %s", e)
        logger.error("Install with: pip install -e .")
        sys.exit(1)

    run_picker(config=config, width=width, height=height)


def run_pick(config: WheelConfig, x: float, y: float) -> None:
    """Print the color details for one canvas position."""
    from core.picker import pick_color

    picked = pick_color(x, y, config)
    if not picked.inside:
        logger.warning("(%s, %s) is outside the wheel, reporting white", x, y)
    for line in picked.detail_lines():
        print(line)


def main():
    """Parse command-line arguments and run the appropriate mode."""
    parser = argparse.ArgumentParser(
        description="HSL Color Wheel Picker",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Open the desktop picker (default)
  python main.py

  # Serve the wheel API for a browser canvas
  python main.py --web --port 8000

  # Print the color under a canvas position
  python main.py --pick 612 400

  # Smaller wheel on a smaller canvas
  python main.py --width 600 --height 500 --scale 2
        """,
    )

    parser.add_argument("--web", action="store_true", help="Run the FastAPI backend instead of the window")
    parser.add_argument(
        "--pick",
        nargs=2,
        type=float,
        metavar=("X", "Y"),
        default=None,
        help="Print the color under canvas position X Y and exit",
    )
    parser.add_argument(
        "--port", type=int, default=DEFAULT_API_PORT, help=f"API port in web mode (default: {DEFAULT_API_PORT})"
    )
    parser.add_argument(
        "--width", type=int, default=SCREEN_WIDTH, help=f"Canvas width in pixels (default: {SCREEN_WIDTH})"
    )
    parser.add_argument(
        "--height", type=int, default=SCREEN_HEIGHT, help=f"Canvas height in pixels (default: {SCREEN_HEIGHT})"
    )
    parser.add_argument(
        "--scale",
        type=float,
        default=WHEEL_SCALE,
        help=f"Pixels per saturation percent (default: {WHEEL_SCALE})",
    )
    parser.add_argument(
        "--log-level", default=None, help="Logging level, e.g. DEBUG (default: WHEEL_LOG_LEVEL or INFO)"
    )

    args = parser.parse_args()
    configure_logging(level=args.log_level)

    try:
        config = WheelConfig.for_canvas(args.width, args.height, scale=args.scale)
    except ConfigurationError as e:
        parser.error(str(e))

    if args.pick is not None:
        run_pick(config, *args.pick)
    elif args.web:
        run_web_server(config, args.port, log_level=args.log_level)
    else:
        run_desktop(config, args.width, args.height)


if __name__ == "__main__":
    main()

"""Display and UI configuration constants."""

# Canvas dimensions in pixels (must match the canvas size used by web clients)
SCREEN_WIDTH = 1024
SCREEN_HEIGHT = 800

# The frame rate for the desktop event loop, in frames per second
FRAME_RATE = 30

# Pixels per saturation percent. The wheel radius is 100 * WHEEL_SCALE.
WHEEL_SCALE = 3.5

# Lightness is fixed for the whole wheel (fraction, not percent)
WHEEL_LIGHTNESS = 0.5

# Each lattice dot is this big at the center and grows with saturation
DOT_BASE_RADIUS = 1.5

# Smoothing ring painted over the jagged rim of the lattice
BORDER_WIDTH = 10
BACKGROUND_COLOR = (254, 254, 254)  # #fefefe

# Text
TEXT_COLOR = (0, 0, 0)
INSTRUCTIONS_FONT_SIZE = 26
DETAILS_FONT_SIZE = 14
INSTRUCTIONS_TEXT = "Hover over any color or tap anywhere on the wheel"
INSTRUCTIONS_BOTTOM_MARGIN = 15

# Picked color swatch (top left)
SWATCH_RECT = (10, 10, 200, 160)
SWATCH_CLEAR_RECT = (10, 10, 200, 210)
DETAILS_TEXT_X = 15
DETAILS_TEXT_Y = (185, 200, 215)

# Mouse position readout (top right)
POSITION_BOX_WIDTH = 105
POSITION_BOX_HEIGHT = 40
POSITION_TEXT_OFFSET = (100, 25)

# UI Display Constants
SEPARATOR_WIDTH = 60  # Width of separator lines in console output

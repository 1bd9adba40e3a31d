GRID_SIZE = 4

# Cell values are drawn uniformly from this inclusive range.
CELL_VALUE_MIN = 1
CELL_VALUE_MAX = 9

# Division results are rounded to this many decimal places.
DIVIDE_PRECISION = 2

WINDOW_WIDTH = 480
WINDOW_HEIGHT = 720
WINDOW_TITLE = "Math Swipe"

BOTTOM_MARGIN = 120

# Board footprint caps: width relative to the window, height relative to the space
# left between the reset button strip and the header.
BOARD_MAX_WIDTH_PCT = 0.90
BOARD_MAX_HEIGHT_PCT = 0.95
# Vertical space above the board reserved for the running value / score header.
HEADER_HEIGHT = 120
# Gap between adjacent tiles.
TILE_PADDING = 8

# Reset ("New Game" / "Play Again") button, centred horizontally.
RESET_BUTTON_WIDTH = 200
RESET_BUTTON_HEIGHT = 48
RESET_BUTTON_BOTTOM = 36

BACKGROUND_COLOR = (26, 26, 26)
BOARD_COLOR = (68, 68, 68)
CELL_COLOR = (42, 42, 42)
CELL_BORDER_COLOR = (85, 85, 85)
CELL_USED_COLOR = (58, 58, 58)
CELL_SELECTED_COLOR = (74, 144, 226)
CELL_AVAILABLE_BORDER_COLOR = (0, 170, 255)
TEXT_COLOR = (224, 224, 224)
TEXT_MUTED_COLOR = (170, 170, 170)
TEXT_USED_COLOR = (119, 119, 119)
ACCENT_COLOR = (74, 144, 226)

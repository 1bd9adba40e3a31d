from __future__ import annotations

from typing import NamedTuple, Optional

from mathswipe.components.coordinate import Coordinate
from mathswipe.constants import (
    BOARD_MAX_HEIGHT_PCT,
    BOARD_MAX_WIDTH_PCT,
    BOTTOM_MARGIN,
    GRID_SIZE,
    HEADER_HEIGHT,
    RESET_BUTTON_BOTTOM,
    RESET_BUTTON_HEIGHT,
    RESET_BUTTON_WIDTH,
)

MIN_TILE_SIZE = 20


class BoardGeometry(NamedTuple):
    tile_size: int
    start_x: float
    start_y: float
    size: int

    @property
    def width(self) -> int:
        return self.tile_size * self.size

    @property
    def top(self) -> float:
        return self.start_y + self.width


def compute_board_geometry(window_width: int, window_height: int, grid_size: int = GRID_SIZE) -> BoardGeometry:
    """Return (tile_size, start_x, start_y, size) for the board in a window of the given size.

    start_x/start_y are the board's bottom-left corner in arcade coordinates (y grows upward).
    Shared by input mapping and rendering so taps always land on the drawn tile.
    """
    max_board_w = window_width * BOARD_MAX_WIDTH_PCT
    max_board_h = (window_height - BOTTOM_MARGIN - HEADER_HEIGHT) * BOARD_MAX_HEIGHT_PCT
    tile_size = int(min(max_board_w, max_board_h) / grid_size)
    if tile_size < MIN_TILE_SIZE:
        tile_size = MIN_TILE_SIZE
    total_width = grid_size * tile_size
    start_x = (window_width - total_width) / 2
    start_y = BOTTOM_MARGIN
    return BoardGeometry(tile_size, start_x, start_y, grid_size)


def cell_center(geometry: BoardGeometry, coord: tuple[int, int]) -> tuple[float, float]:
    # Row 0 is drawn at the top of the board.
    row, col = coord
    x = geometry.start_x + (col + 0.5) * geometry.tile_size
    y = geometry.top - (row + 0.5) * geometry.tile_size
    return x, y


def cell_at_point(geometry: BoardGeometry, x: float, y: float) -> Optional[Coordinate]:
    if x < geometry.start_x or x >= geometry.start_x + geometry.width:
        return None
    if y < geometry.start_y or y >= geometry.top:
        return None
    col = int((x - geometry.start_x) // geometry.tile_size)
    row = int((geometry.top - y) // geometry.tile_size)
    if 0 <= row < geometry.size and 0 <= col < geometry.size:
        return Coordinate(row, col)
    return None


def reset_button_rect(window_width: int) -> tuple[float, float, float, float]:
    """Return (left, bottom, width, height) of the New Game / Play Again button."""
    left = (window_width - RESET_BUTTON_WIDTH) / 2
    return left, RESET_BUTTON_BOTTOM, RESET_BUTTON_WIDTH, RESET_BUTTON_HEIGHT


def point_in_rect(x: float, y: float, rect: tuple[float, float, float, float]) -> bool:
    left, bottom, width, height = rect
    return left <= x <= left + width and bottom <= y <= bottom + height

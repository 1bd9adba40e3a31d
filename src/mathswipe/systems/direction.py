"""Direction of travel between two cells and the operation it selects.

Moving right or up adds, left or down subtracts, diagonally toward a higher
column multiplies and diagonally toward a lower column divides. Row 0 is the
top of the board, so "up" means a smaller row index.
"""
from __future__ import annotations

from typing import Iterator, Optional, Tuple

from mathswipe.components.coordinate import Coordinate
from mathswipe.components.operation import Operation

# (d_row, d_col) -> operation
_OPERATION_BY_OFFSET = {
    (0, 1): Operation.ADD,          # right
    (-1, 0): Operation.ADD,         # up
    (0, -1): Operation.SUBTRACT,    # left
    (1, 0): Operation.SUBTRACT,     # down
    (-1, 1): Operation.MULTIPLY,    # up-right
    (1, 1): Operation.MULTIPLY,     # down-right
    (-1, -1): Operation.DIVIDE,     # up-left
    (1, -1): Operation.DIVIDE,      # down-left
}

# Row-major neighbour offsets, used wherever neighbourhood order matters.
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (d_row, d_col)
    for d_row in (-1, 0, 1)
    for d_col in (-1, 0, 1)
    if (d_row, d_col) != (0, 0)
)


def is_adjacent(a: Tuple[int, int], b: Tuple[int, int]) -> bool:
    ar, ac = a
    br, bc = b
    return max(abs(ar - br), abs(ac - bc)) == 1


def resolve_operation(src: Tuple[int, int], dst: Tuple[int, int]) -> Optional[Operation]:
    """Return the operation for moving from ``src`` to ``dst``, or None when they are not 8-adjacent."""
    d_row = dst[0] - src[0]
    d_col = dst[1] - src[1]
    return _OPERATION_BY_OFFSET.get((d_row, d_col))


def neighbors(coord: Tuple[int, int], size: int) -> Iterator[Coordinate]:
    """Yield the in-bounds 8-neighbours of ``coord`` in row-major order."""
    origin = Coordinate(*coord)
    for d_row, d_col in NEIGHBOR_OFFSETS:
        candidate = origin.offset(d_row, d_col)
        if 0 <= candidate.row < size and 0 <= candidate.col < size:
            yield candidate

from typing import NamedTuple


class Coordinate(NamedTuple):
    """Grid position; row 0 is the top row, col 0 the leftmost column.

    A plain ``(row, col)`` tuple compares equal to the matching Coordinate, so
    event payloads and tests can pass tuples straight through.
    """
    row: int
    col: int

    def offset(self, d_row: int, d_col: int) -> "Coordinate":
        return Coordinate(self.row + d_row, self.col + d_col)

"""Game state snapshot stored on the singleton state entity."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from mathswipe.components.coordinate import Coordinate
from mathswipe.components.grid import Grid

Value = Union[int, float]


@dataclass(frozen=True, slots=True)
class GameState:
    """One immutable snapshot of a session.

    ``current_value`` and ``selected_cell`` are both None before the first
    selection. Once a cell is selected it is always marked used in ``grid``.
    ``score`` holds the best running value reached so far.
    """
    grid: Grid
    current_value: Optional[Value] = None
    selected_cell: Optional[Coordinate] = None
    score: Value = 0
    move_count: int = 0
    game_over: bool = False

    def __post_init__(self) -> None:
        if (self.current_value is None) != (self.selected_cell is None):
            raise ValueError(
                "current_value and selected_cell must be set together; "
                f"got current_value={self.current_value!r}, selected_cell={self.selected_cell!r}"
            )
        if self.selected_cell is not None:
            if not self.grid.in_bounds(self.selected_cell):
                raise ValueError(f"Selected cell {tuple(self.selected_cell)} is outside the grid")
            if not self.grid.cell_at(self.selected_cell).used:
                raise ValueError(f"Selected cell {tuple(self.selected_cell)} must be marked used")

    @property
    def has_selection(self) -> bool:
        return self.selected_cell is not None

    @property
    def cells_used(self) -> int:
        return self.grid.used_count

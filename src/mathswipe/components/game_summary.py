from dataclasses import dataclass

from mathswipe.components.game_state import Value

ALL_USED_MESSAGE = "Amazing! You used all numbers!"
NO_MOVES_MESSAGE = "No more moves available"


@dataclass(frozen=True, slots=True)
class GameSummary:
    """Figures shown on the end screen.

    final_value is the running value at the end of the chain; best_score is the
    highest running value reached along the way.
    """
    final_value: Value
    best_score: Value
    move_count: int
    cells_used: int
    total_cells: int

    @property
    def all_cells_used(self) -> bool:
        return self.cells_used == self.total_cells

    @property
    def message(self) -> str:
        return ALL_USED_MESSAGE if self.all_cells_used else NO_MOVES_MESSAGE

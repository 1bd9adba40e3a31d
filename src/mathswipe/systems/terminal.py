"""End-of-game detection and the read-only move queries used by the presentation layer."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from mathswipe.components.coordinate import Coordinate
from mathswipe.components.game_state import GameState
from mathswipe.components.game_summary import GameSummary
from mathswipe.components.operation import Operation
from mathswipe.systems.direction import neighbors, resolve_operation


@dataclass(frozen=True, slots=True)
class AvailableMove:
    coord: Coordinate
    operation: Operation


def available_moves(state: GameState) -> List[AvailableMove]:
    """Unused neighbours of the selected cell paired with their operation, row-major."""
    selected = state.selected_cell
    if selected is None:
        return []
    grid = state.grid
    moves: List[AvailableMove] = []
    for coord in neighbors(selected, grid.size):
        if grid.cell_at(coord).used:
            continue
        operation = resolve_operation(selected, coord)
        if operation is not None:
            moves.append(AvailableMove(coord=coord, operation=operation))
    return moves


def is_available_target(state: GameState, coord: Tuple[int, int]) -> bool:
    return operation_for_cell(state, coord) is not None


def operation_for_cell(state: GameState, coord: Tuple[int, int]) -> Optional[Operation]:
    for move in available_moves(state):
        if move.coord == coord:
            return move.operation
    return None


def is_terminal(state: GameState) -> bool:
    """True once a chain has started and cannot continue from the selected cell."""
    if state.selected_cell is None:
        return False
    if state.grid.all_used:
        return True
    return not available_moves(state)


def game_summary(state: GameState) -> GameSummary:
    final_value = state.current_value if state.current_value is not None else 0
    return GameSummary(
        final_value=final_value,
        best_score=state.score,
        move_count=state.move_count,
        cells_used=state.cells_used,
        total_cells=state.grid.total_cells,
    )

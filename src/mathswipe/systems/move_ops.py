"""Pure state transitions for the move engine.

Every function here takes a GameState and returns a GameState. A rejected
action returns the very same object it was given, so callers can detect a
no-op with ``new is old``.
"""
from __future__ import annotations

import math
import random
from dataclasses import replace
from typing import Optional, Tuple

from mathswipe.components.coordinate import Coordinate
from mathswipe.components.game_state import GameState, Value
from mathswipe.components.operation import Operation
from mathswipe.constants import DIVIDE_PRECISION, GRID_SIZE
from mathswipe.systems.direction import resolve_operation
from mathswipe.systems.grid_generator import generate_grid
from mathswipe.systems.terminal import is_terminal

REJECT_GAME_OVER = "game_over"
REJECT_OUT_OF_BOUNDS = "out_of_bounds"
REJECT_USED = "used"
REJECT_NOT_ADJACENT = "not_adjacent"
REJECT_NO_SELECTION = "no_selection"
REJECT_ALREADY_SELECTED = "already_selected"


def new_game_state(size: int = GRID_SIZE, rng: random.Random | None = None) -> GameState:
    return GameState(grid=generate_grid(size, rng))


def round_half_up(value: float, places: int = DIVIDE_PRECISION) -> float:
    """Round to ``places`` decimals, ties toward positive infinity (x.xx5 -> up)."""
    factor = 10 ** places
    return math.floor(value * factor + 0.5) / factor


def apply_operation(operation: Operation, current: Value, operand: Value) -> Value:
    if operation is Operation.ADD:
        return current + operand
    if operation is Operation.SUBTRACT:
        return current - operand
    if operation is Operation.MULTIPLY:
        return current * operand
    if operation is Operation.DIVIDE:
        # Unreachable with generated values (1..9); a zero operand leaves the value alone.
        if operand == 0:
            return current
        return round_half_up(current / operand)
    raise ValueError(f"Unknown operation: {operation}")


def first_selection_rejection(state: GameState, coord: Tuple[int, int]) -> Optional[str]:
    """Return why ``coord`` cannot start a chain, or None when it can."""
    if state.game_over:
        return REJECT_GAME_OVER
    if state.has_selection:
        return REJECT_ALREADY_SELECTED
    if not state.grid.in_bounds(coord):
        return REJECT_OUT_OF_BOUNDS
    if state.grid.cell_at(coord).used:
        return REJECT_USED
    return None


def move_rejection(state: GameState, coord: Tuple[int, int]) -> Optional[str]:
    """Return why the selected cell cannot move to ``coord``, or None when it can."""
    if state.game_over:
        return REJECT_GAME_OVER
    if state.selected_cell is None or state.current_value is None:
        return REJECT_NO_SELECTION
    if not state.grid.in_bounds(coord):
        return REJECT_OUT_OF_BOUNDS
    if resolve_operation(state.selected_cell, coord) is None:
        return REJECT_NOT_ADJACENT
    if state.grid.cell_at(coord).used:
        return REJECT_USED
    return None


def select_first(state: GameState, coord: Tuple[int, int]) -> GameState:
    if first_selection_rejection(state, coord) is not None:
        return state
    target = Coordinate(*coord)
    cell = state.grid.cell_at(target)
    selected = replace(
        state,
        grid=state.grid.with_cell_used(target),
        current_value=cell.value,
        selected_cell=target,
        move_count=state.move_count + 1,
    )
    # A 1x1 board has nowhere to go after the opening tap.
    return replace(selected, game_over=is_terminal(selected))


def attempt_move(state: GameState, coord: Tuple[int, int]) -> GameState:
    if move_rejection(state, coord) is not None:
        return state
    target = Coordinate(*coord)
    operation = resolve_operation(state.selected_cell, target)
    operand = state.grid.cell_at(target).value
    value = apply_operation(operation, state.current_value, operand)
    moved = replace(
        state,
        grid=state.grid.with_cell_used(target),
        current_value=value,
        selected_cell=target,
        move_count=state.move_count + 1,
        score=value if value > state.score else state.score,
    )
    return replace(moved, game_over=is_terminal(moved))

import itertools

from mathswipe.components.coordinate import Coordinate
from mathswipe.components.game_state import GameState
from mathswipe.components.game_summary import ALL_USED_MESSAGE, NO_MOVES_MESSAGE
from mathswipe.components.grid import Grid
from mathswipe.components.operation import Operation
from mathswipe.systems.terminal import (
    available_moves,
    game_summary,
    is_available_target,
    is_terminal,
    operation_for_cell,
)
from tests.helpers import scenario_grid


def selected_state(selected, used=(), current_value=1, **kwargs) -> GameState:
    used = set(used) | {selected}
    return GameState(
        grid=scenario_grid(used=sorted(used)),
        current_value=current_value,
        selected_cell=Coordinate(*selected),
        **kwargs,
    )


def test_no_selection_is_never_terminal():
    state = GameState(grid=scenario_grid())
    assert not is_terminal(state)
    assert available_moves(state) == []
    assert not is_available_target(state, (0, 0))
    assert operation_for_cell(state, (0, 0)) is None


def test_surrounded_cell_is_terminal_before_grid_is_full():
    ring = [(r, c) for r in range(3) for c in range(3)]
    state = selected_state((1, 1), used=ring)
    assert state.grid.used_count == 9
    assert is_terminal(state)
    assert available_moves(state) == []


def test_corner_boxed_in():
    state = selected_state((0, 0), used=[(0, 1), (1, 0), (1, 1)])
    assert is_terminal(state)


def test_one_free_neighbour_keeps_game_alive():
    ring = [(r, c) for r in range(3) for c in range(3) if (r, c) != (2, 2)]
    state = selected_state((1, 1), used=ring)
    assert not is_terminal(state)
    moves = available_moves(state)
    assert [(m.coord, m.operation) for m in moves] == [((2, 2), Operation.MULTIPLY)]


def test_unused_cells_elsewhere_do_not_matter():
    # Plenty of unused cells on the far side of the board.
    state = selected_state((3, 3), used=[(2, 2), (2, 3), (3, 2)])
    assert state.grid.unused_count == 12
    assert is_terminal(state)


def test_all_used_is_terminal():
    grid = Grid.from_values([[1, 2], [3, 4]], used=[(0, 0), (0, 1), (1, 0), (1, 1)])
    state = GameState(grid=grid, current_value=3, selected_cell=Coordinate(1, 1))
    assert is_terminal(state)


def test_terminal_iff_no_unused_neighbour():
    # Exhaustive over every selected cell with each neighbour individually free.
    for selected in itertools.product(range(4), repeat=2):
        everything = [(r, c) for r in range(4) for c in range(4)]
        blocked = selected_state(selected, used=everything)
        assert is_terminal(blocked)
        for free in everything:
            if free == selected:
                continue
            state = selected_state(selected, used=[pos for pos in everything if pos != free])
            adjacent = max(abs(free[0] - selected[0]), abs(free[1] - selected[1])) == 1
            assert is_terminal(state) is not adjacent


def test_available_moves_row_major_with_operations():
    state = selected_state((1, 1))
    moves = available_moves(state)
    assert [m.coord for m in moves] == [(0, 0), (0, 1), (0, 2), (1, 0), (1, 2), (2, 0), (2, 1), (2, 2)]
    assert [m.operation.symbol for m in moves] == ["÷", "+", "×", "−", "+", "÷", "−", "×"]


def test_target_queries_follow_available_moves():
    state = selected_state((0, 0), used=[(1, 1)])
    assert is_available_target(state, (0, 1))
    assert operation_for_cell(state, (0, 1)) is Operation.ADD
    assert operation_for_cell(state, (1, 0)) is Operation.SUBTRACT
    assert not is_available_target(state, (1, 1))
    assert not is_available_target(state, (2, 2))
    assert operation_for_cell(state, (0, 0)) is None


def test_summary_for_boxed_in_game():
    ring = [(r, c) for r in range(3) for c in range(3)]
    state = selected_state((1, 1), used=ring, current_value=12, score=20, move_count=9, game_over=True)
    summary = game_summary(state)
    assert summary.final_value == 12
    assert summary.best_score == 20
    assert summary.move_count == 9
    assert summary.cells_used == 9
    assert summary.total_cells == 16
    assert not summary.all_cells_used
    assert summary.message == NO_MOVES_MESSAGE


def test_summary_when_every_cell_used():
    grid = Grid.from_values([[1, 2], [3, 4]], used=[(0, 0), (0, 1), (1, 0), (1, 1)])
    state = GameState(grid=grid, current_value=3, selected_cell=Coordinate(1, 0), score=6, move_count=4)
    summary = game_summary(state)
    assert summary.all_cells_used
    assert summary.message == ALL_USED_MESSAGE

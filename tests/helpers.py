from __future__ import annotations

from typing import Sequence

from esper import World

from mathswipe.components.game_state import GameState
from mathswipe.components.grid import Grid
from mathswipe.utils.game_state import replace_game_state

# Opening chain: (0,0)=5 -> right to (0,1) (+3) -> down-right to (1,2) (x2).
SCENARIO_VALUES = (
    (5, 3, 4, 1),
    (6, 7, 2, 8),
    (9, 1, 3, 2),
    (4, 6, 5, 7),
)


def scenario_grid(used: Sequence[tuple[int, int]] = ()) -> Grid:
    return Grid.from_values(SCENARIO_VALUES, used=used)


def install_grid(
    world: World,
    values: Sequence[Sequence[int]] = SCENARIO_VALUES,
    used: Sequence[tuple[int, int]] = (),
) -> GameState:
    """Replace the world's snapshot with a fresh state over a known grid."""

    state = GameState(grid=Grid.from_values(values, used=used))
    replace_game_state(world, state)
    return state

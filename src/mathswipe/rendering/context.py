from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple

from mathswipe.components.game_state import GameState
from mathswipe.components.operation import Operation
from mathswipe.systems.terminal import available_moves
from mathswipe.ui.layout import BoardGeometry

BoardPos = Tuple[int, int]


@dataclass(slots=True)
class RenderContext:
    """Frame-scoped rendering data shared across renderer subcomponents."""

    state: GameState
    window_width: int
    window_height: int
    geometry: BoardGeometry
    available: Dict[BoardPos, Operation] = field(default_factory=dict)

    @property
    def tile_size(self) -> int:
        return self.geometry.tile_size

    @property
    def board_left(self) -> float:
        return self.geometry.start_x

    @property
    def board_bottom(self) -> float:
        return self.geometry.start_y

    @property
    def board_top(self) -> float:
        return self.geometry.top

    @property
    def board_right(self) -> float:
        return self.geometry.start_x + self.geometry.width


def build_render_context(
    state: GameState,
    window_width: int,
    window_height: int,
    geometry: BoardGeometry,
) -> RenderContext:
    """Populate a RenderContext for the current frame."""
    available = {
        (move.coord.row, move.coord.col): move.operation
        for move in available_moves(state)
    }
    return RenderContext(
        state=state,
        window_width=window_width,
        window_height=window_height,
        geometry=geometry,
        available=available,
    )

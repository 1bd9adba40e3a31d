from mathswipe.events.bus import (
    EventBus,
    EVENT_MOUSE_PRESS,
    EVENT_CELL_TAPPED,
    EVENT_RESET_REQUESTED,
)
from mathswipe.constants import GRID_SIZE
from mathswipe.components.game_state import GameState
from mathswipe.ui.layout import cell_at_point, compute_board_geometry, point_in_rect, reset_button_rect

LEFT_MOUSE_BUTTON = 1  # arcade.MOUSE_BUTTON_LEFT


class InputSystem:
    """Translates raw mouse presses into cell taps and reset requests."""

    def __init__(self, event_bus: EventBus, window, world=None):
        self.event_bus = event_bus
        self.window = window
        self.world = world  # optional; used to read the board size and game-over flag
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button')
        if x is None or y is None:
            return
        if button != LEFT_MOUSE_BUTTON:
            return
        if point_in_rect(x, y, reset_button_rect(self.window.width)):
            self.event_bus.emit(EVENT_RESET_REQUESTED)
            return
        # The board is hidden behind the end screen.
        if self._game_over():
            return
        geometry = compute_board_geometry(self.window.width, self.window.height, self._grid_size())
        coord = cell_at_point(geometry, x, y)
        if coord is not None:
            self.event_bus.emit(EVENT_CELL_TAPPED, row=coord.row, col=coord.col)

    def _state(self):
        if self.world is None:
            return None
        states = list(self.world.get_component(GameState))
        if not states:
            return None
        return states[0][1]

    def _grid_size(self) -> int:
        state = self._state()
        if state is None:
            return GRID_SIZE
        return state.grid.size

    def _game_over(self) -> bool:
        state = self._state()
        return state is not None and state.game_over

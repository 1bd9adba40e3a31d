from typing import Any

from esper import World

from mathswipe.constants import ACCENT_COLOR, TEXT_COLOR, TEXT_MUTED_COLOR, TILE_PADDING, WINDOW_TITLE
from mathswipe.components.operation import Operation
from mathswipe.events.bus import EventBus, EVENT_GAME_RESET
from mathswipe.rendering.board_renderer import BoardRenderer
from mathswipe.rendering.context import RenderContext, build_render_context
from mathswipe.rendering.game_over_renderer import GameOverRenderer
from mathswipe.ui.layout import compute_board_geometry, reset_button_rect
from mathswipe.utils.formatting import format_value
from mathswipe.utils.game_state import get_game_state

# Direction of travel picks the operation.
HOW_TO_PLAY = (
    f"Right/Up {Operation.ADD.symbol}   Left/Down {Operation.SUBTRACT.symbol}   "
    f"Diag right {Operation.MULTIPLY.symbol}   Diag left {Operation.DIVIDE.symbol}"
)


class RenderSystem:
    """Draws the latest GameState snapshot; holds no game rules of its own."""

    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.event_bus.subscribe(EVENT_GAME_RESET, self.on_game_reset)
        self._last_cell_layout: dict[tuple[int, int], dict[str, Any]] = {}
        self._header_cache: dict[str, str] = {}
        self._game_over_cache: dict[str, str] = {}
        self._board_renderer = BoardRenderer(self, padding=TILE_PADDING)
        self._game_over_renderer = GameOverRenderer(self)

    def on_game_reset(self, sender, **kwargs):
        self._game_over_cache = {}

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True

        state = get_game_state(self.world)
        geometry = compute_board_geometry(self.window.width, self.window.height, state.grid.size)
        ctx = build_render_context(state, self.window.width, self.window.height, geometry)

        if state.game_over:
            self._last_cell_layout = {}
            self._game_over_renderer.render(arcade, ctx, headless=headless)
            self._render_reset_button(arcade, "Play Again", headless)
        else:
            self._render_header(arcade, ctx, headless)
            self._board_renderer.render(arcade, ctx, headless=headless)
            self._render_reset_button(arcade, "New Game", headless)

    def get_cell_layout(self, row: int, col: int):
        """Return the last drawn layout entry for a cell, if any."""
        return self._last_cell_layout.get((row, col))

    def _render_header(self, arcade, ctx: RenderContext, headless: bool) -> None:
        state = ctx.state
        self._header_cache = {
            "title": WINDOW_TITLE,
            "value": f"Score: {format_value(state.current_value)}",
            "best": f"Best: {format_value(state.score)}",
            "moves": f"Moves: {state.move_count}",
            "instructions": HOW_TO_PLAY,
        }
        if headless:
            return
        cx = ctx.window_width / 2
        base = ctx.board_top
        arcade.draw_text(self._header_cache["title"], cx, base + 80, TEXT_COLOR, 26, anchor_x="center", anchor_y="center", bold=True)
        arcade.draw_text(self._header_cache["value"], cx, base + 45, TEXT_MUTED_COLOR, 16, anchor_x="center", anchor_y="center")
        summary = f"{self._header_cache['best']}   {self._header_cache['moves']}"
        arcade.draw_text(summary, cx, base + 20, TEXT_MUTED_COLOR, 12, anchor_x="center", anchor_y="center")
        arcade.draw_text(
            self._header_cache["instructions"], cx, ctx.board_bottom - 18, TEXT_MUTED_COLOR, 11,
            anchor_x="center", anchor_y="center",
        )

    def _render_reset_button(self, arcade, label: str, headless: bool) -> None:
        if headless:
            return
        left, bottom, width, height = reset_button_rect(self.window.width)
        arcade.draw_lrbt_rectangle_filled(left, left + width, bottom, bottom + height, ACCENT_COLOR)
        arcade.draw_text(
            label, left + width / 2, bottom + height / 2, (255, 255, 255), 16,
            anchor_x="center", anchor_y="center", bold=True,
        )

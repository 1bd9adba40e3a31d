from __future__ import annotations

from typing import TYPE_CHECKING

from mathswipe.constants import (
    BOARD_COLOR,
    CELL_AVAILABLE_BORDER_COLOR,
    CELL_BORDER_COLOR,
    CELL_COLOR,
    CELL_SELECTED_COLOR,
    CELL_USED_COLOR,
    TEXT_COLOR,
    TEXT_USED_COLOR,
)
from mathswipe.ui.layout import cell_center

if TYPE_CHECKING:
    from mathswipe.rendering.context import RenderContext
    from mathswipe.systems.render import RenderSystem


class BoardRenderer:
    def __init__(self, render_system: RenderSystem, padding: int = 8):
        self._rs = render_system
        self._padding = padding

    def render(self, arcade, ctx: RenderContext, headless: bool) -> None:
        rs = self._rs
        state = ctx.state
        rs._last_cell_layout = {}
        draw_size = max(ctx.tile_size - self._padding, 4)
        half = draw_size / 2

        if not headless:
            arcade.draw_lrbt_rectangle_filled(
                ctx.board_left, ctx.board_right, ctx.board_bottom, ctx.board_top, BOARD_COLOR
            )

        for coord, cell in state.grid:
            key = (coord.row, coord.col)
            center_x, center_y = cell_center(ctx.geometry, key)
            selected = state.selected_cell == coord
            operation = ctx.available.get(key)
            rs._last_cell_layout[key] = {
                "id": cell.id,
                "center": (center_x, center_y),
                "size": draw_size,
                "value": cell.value,
                "used": cell.used,
                "selected": selected,
                "symbol": operation.symbol if operation is not None else None,
            }
            if headless:
                continue

            left, right = center_x - half, center_x + half
            bottom, top = center_y - half, center_y + half
            if selected:
                fill, border, border_width = CELL_SELECTED_COLOR, CELL_SELECTED_COLOR, 3
            elif operation is not None:
                fill, border, border_width = CELL_COLOR, CELL_AVAILABLE_BORDER_COLOR, 4
            elif cell.used:
                fill, border, border_width = CELL_USED_COLOR, CELL_USED_COLOR, 2
            else:
                fill, border, border_width = CELL_COLOR, CELL_BORDER_COLOR, 2
            arcade.draw_lrbt_rectangle_filled(left, right, bottom, top, fill)
            arcade.draw_lrbt_rectangle_outline(left, right, bottom, top, border, border_width)

            text_color = TEXT_USED_COLOR if cell.used and not selected else TEXT_COLOR
            arcade.draw_text(
                str(cell.value), center_x, center_y, text_color, draw_size * 0.33,
                anchor_x="center", anchor_y="center", bold=True,
            )
            if operation is not None:
                # Operation glyph in the top-left corner of each legal target.
                arcade.draw_text(
                    operation.symbol, left + 8, top - 8, CELL_AVAILABLE_BORDER_COLOR, draw_size * 0.18,
                    anchor_x="left", anchor_y="top", bold=True,
                )

from __future__ import annotations

from typing import TYPE_CHECKING

from mathswipe.constants import ACCENT_COLOR, TEXT_COLOR, TEXT_MUTED_COLOR
from mathswipe.systems.terminal import game_summary
from mathswipe.utils.formatting import format_value

if TYPE_CHECKING:
    from mathswipe.rendering.context import RenderContext
    from mathswipe.systems.render import RenderSystem


class GameOverRenderer:
    """End screen: final value, moves, numbers used and the outcome message."""

    def __init__(self, render_system: RenderSystem):
        self._rs = render_system

    def render(self, arcade, ctx: RenderContext, headless: bool) -> None:
        summary = game_summary(ctx.state)
        lines = {
            "title": "Game Over!",
            "final_score": format_value(summary.final_value),
            "moves": str(summary.move_count),
            "cells_used": str(summary.cells_used),
            "message": summary.message,
        }
        self._rs._game_over_cache = lines
        if headless:
            return
        cx = ctx.window_width / 2
        h = ctx.window_height
        arcade.draw_text(lines["title"], cx, h * 0.85, TEXT_COLOR, 36, anchor_x="center", anchor_y="center", bold=True)
        arcade.draw_text("Final Score", cx, h * 0.70, TEXT_MUTED_COLOR, 16, anchor_x="center", anchor_y="center")
        arcade.draw_text(lines["final_score"], cx, h * 0.62, ACCENT_COLOR, 56, anchor_x="center", anchor_y="center", bold=True)
        arcade.draw_text(lines["moves"], cx - 80, h * 0.48, TEXT_COLOR, 26, anchor_x="center", anchor_y="center", bold=True)
        arcade.draw_text("Moves", cx - 80, h * 0.43, TEXT_MUTED_COLOR, 13, anchor_x="center", anchor_y="center")
        arcade.draw_text(lines["cells_used"], cx + 80, h * 0.48, TEXT_COLOR, 26, anchor_x="center", anchor_y="center", bold=True)
        arcade.draw_text("Numbers Used", cx + 80, h * 0.43, TEXT_MUTED_COLOR, 13, anchor_x="center", anchor_y="center")
        arcade.draw_text(lines["message"], cx, h * 0.32, TEXT_MUTED_COLOR, 16, anchor_x="center", anchor_y="center")

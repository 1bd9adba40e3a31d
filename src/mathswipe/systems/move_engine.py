from __future__ import annotations

import logging
import random
from typing import Tuple

from esper import World

from mathswipe.components.coordinate import Coordinate
from mathswipe.components.game_state import GameState
from mathswipe.events.bus import (
    EventBus,
    EVENT_CELL_SELECTED,
    EVENT_CELL_TAPPED,
    EVENT_GAME_OVER,
    EVENT_GAME_RESET,
    EVENT_MOVE_APPLIED,
    EVENT_MOVE_REJECTED,
    EVENT_RESET_REQUESTED,
    EVENT_SCORE_CHANGED,
    EVENT_STATE_CHANGED,
)
from mathswipe.systems import move_ops
from mathswipe.systems.direction import resolve_operation
from mathswipe.systems.terminal import game_summary
from mathswipe.utils.game_state import board_size, get_game_state, replace_game_state

logger = logging.getLogger(__name__)


class MoveEngineSystem:
    """Owns the live GameState and turns cell taps into state transitions.

    Taps arrive as EVENT_CELL_TAPPED. The first tap of a game starts the chain
    via ``select_first``; later taps go through ``attempt_move``. Illegal taps
    leave the snapshot untouched and only emit EVENT_MOVE_REJECTED.
    """

    def __init__(self, world: World, event_bus: EventBus, *, rng: random.Random | None = None):
        self.world = world
        self.event_bus = event_bus
        self._rng = rng or getattr(world, "random", None) or random.Random()
        self.event_bus.subscribe(EVENT_CELL_TAPPED, self.on_cell_tapped)
        self.event_bus.subscribe(EVENT_RESET_REQUESTED, self.on_reset_requested)

    @property
    def state(self) -> GameState:
        return get_game_state(self.world)

    def on_cell_tapped(self, sender, **kwargs):
        row = kwargs.get('row')
        col = kwargs.get('col')
        if row is None or col is None:
            return
        coord = (int(row), int(col))
        if self.state.has_selection:
            self.attempt_move(coord)
        else:
            self.select_first(coord)

    def on_reset_requested(self, sender, **kwargs):
        self.reset()

    def select_first(self, coord: Tuple[int, int]) -> GameState:
        state = self.state
        reason = move_ops.first_selection_rejection(state, coord)
        if reason is not None:
            return self._reject(state, coord, reason)
        new_state = move_ops.select_first(state, coord)
        replace_game_state(self.world, new_state)
        target = Coordinate(*coord)
        logger.debug("Chain started at %s with value %s", tuple(target), new_state.current_value)
        self.event_bus.emit(
            EVENT_CELL_SELECTED,
            row=target.row,
            col=target.col,
            value=new_state.current_value,
        )
        self._after_transition(state, new_state)
        return new_state

    def attempt_move(self, coord: Tuple[int, int]) -> GameState:
        state = self.state
        reason = move_ops.move_rejection(state, coord)
        if reason is not None:
            return self._reject(state, coord, reason)
        src = state.selected_cell
        dst = Coordinate(*coord)
        operation = resolve_operation(src, dst)
        operand = state.grid.cell_at(dst).value
        new_state = move_ops.attempt_move(state, dst)
        replace_game_state(self.world, new_state)
        logger.debug(
            "Move %s -> %s: %s %s %s = %s",
            tuple(src), tuple(dst), state.current_value, operation.symbol, operand, new_state.current_value,
        )
        self.event_bus.emit(
            EVENT_MOVE_APPLIED,
            src=src,
            dst=dst,
            operation=operation,
            operand=operand,
            previous_value=state.current_value,
            value=new_state.current_value,
        )
        self._after_transition(state, new_state)
        return new_state

    def reset(self) -> GameState:
        previous = self.state
        new_state = move_ops.new_game_state(board_size(self.world), self._rng)
        replace_game_state(self.world, new_state)
        logger.info("Game reset after %d moves (best score %s)", previous.move_count, previous.score)
        self.event_bus.emit(EVENT_GAME_RESET, state=new_state)
        self.event_bus.emit(EVENT_STATE_CHANGED, previous=previous, state=new_state)
        return new_state

    def _after_transition(self, previous: GameState, new_state: GameState) -> None:
        if new_state.score != previous.score:
            self.event_bus.emit(EVENT_SCORE_CHANGED, previous=previous.score, score=new_state.score)
        self.event_bus.emit(EVENT_STATE_CHANGED, previous=previous, state=new_state)
        if new_state.game_over and not previous.game_over:
            summary = game_summary(new_state)
            logger.info(
                "Game over: value %s, best %s, %d moves, %d/%d cells used",
                summary.final_value, summary.best_score, summary.move_count,
                summary.cells_used, summary.total_cells,
            )
            self.event_bus.emit(EVENT_GAME_OVER, summary=summary)

    def _reject(self, state: GameState, coord: Tuple[int, int], reason: str) -> GameState:
        row, col = coord
        logger.debug("Rejected tap at (%s, %s): %s", row, col, reason)
        self.event_bus.emit(EVENT_MOVE_REJECTED, row=row, col=col, reason=reason)
        return state

from typing import Any, Callable, Dict

from blinker import Signal

Handler = Callable[..., Any]


class EventBus:
    """Named blinker signals; handlers receive ``(sender, **payload)``."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn: Handler):
        sig = self._signals.setdefault(name, Signal(name))
        # Systems register bound methods and are otherwise unreferenced.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"            # payload: x, y, button
EVENT_CELL_TAPPED = "cell_tapped"            # payload: row, col
EVENT_RESET_REQUESTED = "reset_requested"    # payload: (none)


# ============================================================================
# MOVES & STATE
# ============================================================================
EVENT_CELL_SELECTED = "cell_selected"        # payload: row, col, value
EVENT_MOVE_APPLIED = "move_applied"          # payload: src=(r,c), dst=(r,c), operation=Operation, operand, previous_value, value
EVENT_MOVE_REJECTED = "move_rejected"        # payload: row, col, reason=str
EVENT_SCORE_CHANGED = "score_changed"        # payload: previous, score
EVENT_STATE_CHANGED = "state_changed"        # payload: previous=GameState|None, state=GameState


# ============================================================================
# GAME LIFECYCLE
# ============================================================================
EVENT_GAME_OVER = "game_over"                # payload: summary=GameSummary
EVENT_GAME_RESET = "game_reset"              # payload: state=GameState


ENGINE_EVENTS = (
    EVENT_CELL_TAPPED,
    EVENT_RESET_REQUESTED,
    EVENT_CELL_SELECTED,
    EVENT_MOVE_APPLIED,
    EVENT_MOVE_REJECTED,
    EVENT_SCORE_CHANGED,
    EVENT_GAME_OVER,
    EVENT_GAME_RESET,
)

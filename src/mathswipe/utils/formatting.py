from __future__ import annotations

from mathswipe.components.game_state import Value

EMPTY_VALUE = "--"


def format_value(value: Value | None) -> str:
    """Render a running value the way the board shows it: ``8``, ``2.5``, ``-1.33``."""
    if value is None:
        return EMPTY_VALUE
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return f"{value:.2f}".rstrip("0").rstrip(".")
    return str(value)

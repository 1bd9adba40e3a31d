from __future__ import annotations

import logging
from typing import Iterable

from mathswipe.events.bus import ENGINE_EVENTS, EventBus

_default_logger = logging.getLogger("mathswipe.events")


def attach_event_trace(
    event_bus: EventBus,
    logger: logging.Logger | None = None,
    names: Iterable[str] | None = None,
    level: int = logging.DEBUG,
) -> list[str]:
    """Log every emission of the given events (engine events by default).

    Returns the event names that were hooked so callers can report them.
    """
    target = logger or _default_logger
    hooked: list[str] = []
    for name in names or ENGINE_EVENTS:
        event_bus.subscribe(name, _make_handler(target, name, level))
        hooked.append(name)
    return hooked


def _make_handler(logger: logging.Logger, name: str, level: int):
    def handler(sender, **payload):
        if not logger.isEnabledFor(level):
            return
        details = ", ".join(f"{key}={value!r}" for key, value in sorted(payload.items()))
        logger.log(level, "event %s(%s)", name, details)
    return handler

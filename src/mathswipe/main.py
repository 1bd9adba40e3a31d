"""Entry point for the Math Swipe puzzle.

Sets up ECS world, event bus, systems, and Arcade window.
"""
import logging
import os

from arcade import Window, key, run, set_background_color

from mathswipe.constants import BACKGROUND_COLOR, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from mathswipe.events.bus import EventBus, EVENT_MOUSE_PRESS, EVENT_RESET_REQUESTED
from mathswipe.systems.input import InputSystem
from mathswipe.systems.move_engine import MoveEngineSystem
from mathswipe.systems.render import RenderSystem
from mathswipe.utils.event_trace import attach_event_trace
from mathswipe.world import create_world


class MathSwipeWindow(Window):
    def __init__(self, width: int = WINDOW_WIDTH, height: int = WINDOW_HEIGHT):
        super().__init__(width, height, WINDOW_TITLE)
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        self.world = create_world(self.event_bus)
        self.move_engine = MoveEngineSystem(self.world, self.event_bus)
        self.render_system = RenderSystem(self.world, self.event_bus, self)
        self.input_system = InputSystem(self.event_bus, self, world=self.world)
        attach_event_trace(self.event_bus)
        set_background_color(BACKGROUND_COLOR)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol == key.R:
            self.event_bus.emit(EVENT_RESET_REQUESTED)


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logging.getLogger(__name__).warning("Ignoring non-integer %s=%r", name, raw)
        return default


def main():
    level = logging.DEBUG if os.environ.get("MATHSWIPE_DEBUG") else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    MathSwipeWindow(
        width=_env_int("MATHSWIPE_WINDOW_WIDTH", WINDOW_WIDTH),
        height=_env_int("MATHSWIPE_WINDOW_HEIGHT", WINDOW_HEIGHT),
    )
    run()

if __name__ == "__main__":
    main()

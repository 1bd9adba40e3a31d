import pytest

pytest.importorskip("arcade")

from mathswipe.events.bus import EventBus, EVENT_CELL_TAPPED, EVENT_RESET_REQUESTED
from mathswipe.systems.move_engine import MoveEngineSystem
from mathswipe.systems.render import RenderSystem
from mathswipe.world import create_world
from tests.helpers import install_grid


class DummyWindow:
    def __init__(self, width=480, height=720):
        self.width = width
        self.height = height


def build(grid_size=4):
    bus = EventBus()
    world = create_world(bus, grid_size=grid_size)
    MoveEngineSystem(world, bus)
    render = RenderSystem(world, bus, DummyWindow())
    return bus, world, render


def test_headless_process_builds_cell_layout():
    bus, world, render = build()
    install_grid(world)
    render.process()
    assert len(render._last_cell_layout) == 16
    entry = render.get_cell_layout(0, 0)
    assert entry["value"] == 5
    assert entry["used"] is False
    assert entry["symbol"] is None
    assert render._header_cache["value"] == "Score: --"


def test_available_targets_carry_operation_glyphs():
    bus, world, render = build()
    install_grid(world)
    bus.emit(EVENT_CELL_TAPPED, row=1, col=1)
    render.process()
    assert render.get_cell_layout(1, 1)["selected"] is True
    assert render.get_cell_layout(0, 2)["symbol"] == "×"
    assert render.get_cell_layout(2, 0)["symbol"] == "÷"
    assert render.get_cell_layout(3, 3)["symbol"] is None
    assert render._header_cache["value"] == "Score: 7"


def test_game_over_screen_summary_and_reset():
    bus, world, render = build(grid_size=1)
    bus.emit(EVENT_CELL_TAPPED, row=0, col=0)
    render.process()
    assert render._last_cell_layout == {}
    assert render._game_over_cache["title"] == "Game Over!"
    assert render._game_over_cache["moves"] == "1"
    assert render._game_over_cache["cells_used"] == "1"

    bus.emit(EVENT_RESET_REQUESTED)
    assert render._game_over_cache == {}
    render.process()
    assert len(render._last_cell_layout) == 1


def test_header_lists_direction_instructions():
    bus, world, render = build()
    render.process()
    instructions = render._header_cache["instructions"]
    for glyph in ["+", "−", "×", "÷"]:
        assert glyph in instructions
    assert instructions.index("+") < instructions.index("−") < instructions.index("×") < instructions.index("÷")

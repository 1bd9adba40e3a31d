import logging

from mathswipe.events.bus import ENGINE_EVENTS, EVENT_CELL_TAPPED, EVENT_MOVE_REJECTED, EventBus
from mathswipe.systems.move_engine import MoveEngineSystem
from mathswipe.utils.event_trace import attach_event_trace
from mathswipe.world import create_world
from tests.helpers import install_grid


def test_trace_hooks_engine_events_by_default():
    bus = EventBus()
    hooked = attach_event_trace(bus)
    assert hooked == list(ENGINE_EVENTS)


def test_trace_logs_rejections(caplog):
    bus = EventBus()
    world = create_world(bus)
    MoveEngineSystem(world, bus)
    install_grid(world)
    logger = logging.getLogger("tests.trace")
    attach_event_trace(bus, logger=logger, names=[EVENT_MOVE_REJECTED])

    with caplog.at_level(logging.DEBUG, logger="tests.trace"):
        bus.emit(EVENT_CELL_TAPPED, row=0, col=0)
        bus.emit(EVENT_CELL_TAPPED, row=3, col=3)

    messages = [r.getMessage() for r in caplog.records if r.name == "tests.trace"]
    assert messages == ["event move_rejected(col=3, reason='not_adjacent', row=3)"]


def test_trace_quiet_when_level_disabled(caplog):
    bus = EventBus()
    logger = logging.getLogger("tests.trace.quiet")
    attach_event_trace(bus, logger=logger, names=["ping"])
    with caplog.at_level(logging.INFO, logger="tests.trace.quiet"):
        bus.emit("ping", value=1)
    assert not [r for r in caplog.records if r.name == "tests.trace.quiet"]

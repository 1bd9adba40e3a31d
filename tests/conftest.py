import sys, os

# Ensure src (and the repo root, for tests.helpers) is on path for test imports
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
SRC = os.path.join(ROOT, 'src')
for path in (SRC, ROOT):
    if path not in sys.path:
        sys.path.insert(0, path)

import pytest

from mathswipe.events.bus import EventBus
from mathswipe.systems.move_engine import MoveEngineSystem
from mathswipe.world import create_world
from tests.helpers import install_grid, scenario_grid

__all__ = [
    "install_grid",
    "scenario_grid",
]


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def world(bus):
    return create_world(bus)


@pytest.fixture
def engine(world, bus):
    return MoveEngineSystem(world, bus)

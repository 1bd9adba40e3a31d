import random

from esper import World
from .events.bus import EventBus
from mathswipe.components.board import Board
from mathswipe.constants import GRID_SIZE
from mathswipe.systems.move_ops import new_game_state


def create_world(
    event_bus: EventBus,
    *,
    grid_size: int = GRID_SIZE,
    rng: random.Random | None = None,
) -> World:
    world = World()
    setattr(world, "random", rng or random.Random())

    # Single state entity: board dimensions plus the current snapshot.
    state_entity = world.create_entity()
    world.add_component(state_entity, Board(size=grid_size))
    world.add_component(state_entity, new_game_state(grid_size, world.random))
    return world

from __future__ import annotations

from esper import World

from mathswipe.components.board import Board
from mathswipe.components.game_state import GameState


def state_entity(world: World) -> int:
    for entity, _ in world.get_component(GameState):
        return entity
    raise RuntimeError("GameState component not found; was the world built with create_world?")


def get_game_state(world: World) -> GameState:
    return world.component_for_entity(state_entity(world), GameState)


def replace_game_state(world: World, state: GameState) -> GameState:
    """Swap in a new snapshot and return the one it replaced."""
    entity = state_entity(world)
    previous = world.component_for_entity(entity, GameState)
    # esper replaces an existing component of the same type in place.
    world.add_component(entity, state)
    return previous


def board_size(world: World) -> int:
    for _, board in world.get_component(Board):
        return board.size
    return get_game_state(world).grid.size

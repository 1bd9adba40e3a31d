import itertools

import pytest

from mathswipe.components.operation import Operation
from mathswipe.systems.direction import is_adjacent, neighbors, resolve_operation


@pytest.mark.parametrize(
    "dst, expected",
    [
        ((1, 2), Operation.ADD),        # right
        ((0, 1), Operation.ADD),        # up
        ((1, 0), Operation.SUBTRACT),   # left
        ((2, 1), Operation.SUBTRACT),   # down
        ((0, 2), Operation.MULTIPLY),   # up-right
        ((2, 2), Operation.MULTIPLY),   # down-right
        ((0, 0), Operation.DIVIDE),     # up-left
        ((2, 0), Operation.DIVIDE),     # down-left
    ],
)
def test_direction_maps_to_operation(dst, expected):
    assert resolve_operation((1, 1), dst) is expected


def test_same_cell_resolves_to_none():
    assert resolve_operation((2, 2), (2, 2)) is None


@pytest.mark.parametrize("dst", [(1, 3), (3, 1), (3, 3), (0, 3), (1, 4)])
def test_distance_two_or_more_resolves_to_none(dst):
    assert resolve_operation((1, 1), dst) is None


def test_resolver_is_total_and_consistent_with_adjacency():
    coords = list(itertools.product(range(4), repeat=2))
    for src, dst in itertools.product(coords, coords):
        first = resolve_operation(src, dst)
        assert first == resolve_operation(src, dst)
        assert (first is not None) == is_adjacent(src, dst)


def test_direction_not_operand_order():
    # Moving right always adds, moving left always subtracts.
    assert resolve_operation((0, 0), (0, 1)) is Operation.ADD
    assert resolve_operation((0, 1), (0, 0)) is Operation.SUBTRACT


def test_neighbors_are_clipped_and_row_major():
    assert list(neighbors((0, 0), 4)) == [(0, 1), (1, 0), (1, 1)]
    assert len(list(neighbors((1, 1), 4))) == 8
    assert list(neighbors((3, 3), 4)) == [(2, 2), (2, 3), (3, 2)]


def test_operation_symbols():
    assert [op.symbol for op in Operation] == ["+", "−", "×", "÷"]

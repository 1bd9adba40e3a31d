from __future__ import annotations

import random

from mathswipe.components.cell import Cell
from mathswipe.components.grid import Grid
from mathswipe.constants import CELL_VALUE_MAX, CELL_VALUE_MIN, GRID_SIZE


def generate_grid(size: int = GRID_SIZE, rng: random.Random | None = None) -> Grid:
    """Return a fresh size x size grid of unused cells with values drawn uniformly from 1..9."""
    if size < 1:
        raise ValueError(f"Grid size must be positive, got {size}")
    rand = rng or random
    counter = 0
    rows: list[tuple[Cell, ...]] = []
    for r in range(size):
        row: list[Cell] = []
        for c in range(size):
            value = rand.randint(CELL_VALUE_MIN, CELL_VALUE_MAX)
            row.append(Cell(value=value, used=False, id=f"{r}-{c}-{counter}"))
            counter += 1
        rows.append(tuple(row))
    return Grid(cells=tuple(rows))

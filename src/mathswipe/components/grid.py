from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence

from mathswipe.components.cell import Cell
from mathswipe.components.coordinate import Coordinate


@dataclass(frozen=True, slots=True)
class Grid:
    """Immutable square matrix of cells in row-major order.

    Grids are values: ``with_cell_used`` returns a new grid and leaves the
    receiver untouched. Rows that did not change are shared between the old
    and new grid, so holding on to a previous snapshot is cheap and safe.
    """
    cells: tuple[tuple[Cell, ...], ...]

    def __post_init__(self) -> None:
        size = len(self.cells)
        if size == 0:
            raise ValueError("Grid must contain at least one row")
        for row in self.cells:
            if len(row) != size:
                raise ValueError(f"Grid must be square; expected {size} cells per row, got {len(row)}")

    @classmethod
    def from_values(cls, values: Sequence[Sequence[int]], used: Sequence[tuple[int, int]] = ()) -> Grid:
        """Build a grid from plain integers, optionally pre-marking some cells used."""
        used_set = {Coordinate(*pos) for pos in used}
        counter = 0
        rows: list[tuple[Cell, ...]] = []
        for r, row_values in enumerate(values):
            row: list[Cell] = []
            for c, value in enumerate(row_values):
                row.append(Cell(value=int(value), used=(r, c) in used_set, id=f"{r}-{c}-{counter}"))
                counter += 1
            rows.append(tuple(row))
        return cls(cells=tuple(rows))

    @property
    def size(self) -> int:
        return len(self.cells)

    @property
    def total_cells(self) -> int:
        return self.size * self.size

    def in_bounds(self, coord: tuple[int, int]) -> bool:
        row, col = coord
        return 0 <= row < self.size and 0 <= col < self.size

    def cell_at(self, coord: tuple[int, int]) -> Cell:
        if not self.in_bounds(coord):
            raise IndexError(f"Coordinate {tuple(coord)} outside {self.size}x{self.size} grid")
        row, col = coord
        return self.cells[row][col]

    def __iter__(self) -> Iterator[tuple[Coordinate, Cell]]:
        for r, row in enumerate(self.cells):
            for c, cell in enumerate(row):
                yield Coordinate(r, c), cell

    @property
    def used_count(self) -> int:
        return sum(1 for _, cell in self if cell.used)

    @property
    def unused_count(self) -> int:
        return self.total_cells - self.used_count

    @property
    def all_used(self) -> bool:
        return all(cell.used for _, cell in self)

    def with_cell_used(self, coord: tuple[int, int]) -> Grid:
        cell = self.cell_at(coord)
        if cell.used:
            return self
        row, col = coord
        old_row = self.cells[row]
        new_row = old_row[:col] + (cell.mark_used(),) + old_row[col + 1:]
        return Grid(cells=self.cells[:row] + (new_row,) + self.cells[row + 1:])

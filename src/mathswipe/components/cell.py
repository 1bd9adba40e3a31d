from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True)
class Cell:
    """A single numbered tile.

    value: the operand contributed when the cell is consumed (1..9 when generated).
    used: flips to True once the cell has been selected; never flips back within a game.
    id: stable key for the presentation layer, unique within one grid.
    """
    value: int
    used: bool = False
    id: str = ""

    def mark_used(self) -> "Cell":
        if self.used:
            return self
        return replace(self, used=True)

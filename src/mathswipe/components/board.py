from dataclasses import dataclass

@dataclass(slots=True)
class Board:
    """Board dimensions for the active session (square, size x size)."""
    size: int

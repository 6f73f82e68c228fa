"""Search node and result dataclasses for the mine driller."""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .grid import Move

# Parent index of a root node
NO_PARENT = -1


@dataclass(frozen=True)
class SearchNode:
    """Immutable path prefix stored in the search arena."""
    row: int
    col: int
    total: int                    # sum of values from the root to this cell
    parent: int = NO_PARENT       # arena index of the parent node
    move: Optional[Move] = None   # move taken from the parent

    @property
    def is_root(self) -> bool:
        return self.parent == NO_PARENT


@dataclass(frozen=True)
class PathStep:
    """One visited cell and the move that reached it (None at the start)."""
    row: int
    col: int
    move: Optional[Move]
    value: int


@dataclass(frozen=True)
class MinePath:
    """Winning descent from the surface to the bottom row."""
    steps: Tuple[PathStep, ...]
    total: int

    @property
    def cells(self) -> List[Tuple[int, int]]:
        return [(s.row, s.col) for s in self.steps]

    @property
    def moves(self) -> List[Move]:
        return [s.move for s in self.steps if s.move is not None]

    @property
    def start(self) -> PathStep:
        return self.steps[0]

    def contains(self, row: int, col: int) -> bool:
        return any(s.row == row and s.col == col for s in self.steps)

    def __len__(self) -> int:
        return len(self.steps)

    def to_csv_rows(self) -> List[Dict]:
        """Convert to CSV-compatible format, one row per step."""
        rows = []
        running = 0
        for i, s in enumerate(self.steps):
            running += s.value
            rows.append({
                "step": i,
                "row": s.row,
                "col": s.col,
                "move": s.move.value if s.move else "start",
                "value": s.value,
                "total": running,
            })
        return rows

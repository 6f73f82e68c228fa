"""Grid map management for the mine driller."""

from enum import Enum
from typing import List, Optional, Sequence, Set, Tuple, Union

import numpy as np

from ..errors import MalformedInputError, OutOfBoundsError


class Move(Enum):
    """Diagonal step from one row to the next."""
    DOWN_LEFT = "down-left"
    DOWN_RIGHT = "down-right"

    @property
    def col_offset(self) -> int:
        return -1 if self is Move.DOWN_LEFT else 1


# Expansion order; the search pushes children in this order.
MOVE_ORDER = (Move.DOWN_LEFT, Move.DOWN_RIGHT)

# Cell values must fit the int64 backing array
CELL_MIN = int(np.iinfo(np.int64).min)
CELL_MAX = int(np.iinfo(np.int64).max)


class GridMap:
    """
    Immutable n x n matrix of resource values.

    Coordinate convention: (row, col) for both API and array indexing.
    Row 0 is the surface, row n-1 the bottom of the mine.
    """

    def __init__(self, rows: Sequence[Sequence[Union[int, str]]],
                 size: Optional[int] = None):
        n = len(rows) if size is None else size
        if len(rows) != n:
            raise MalformedInputError(
                f"Expected {n} rows, got {len(rows)}")

        values = np.zeros((n, n), dtype=np.int64)
        for r, row in enumerate(rows):
            if len(row) != n:
                raise MalformedInputError(
                    f"Row {r} has {len(row)} values, expected {n}")
            for c, token in enumerate(row):
                values[r, c] = self._parse_cell(token, r, c)

        # Read-only after construction
        values.flags.writeable = False
        self._values = values
        self._size = n

    @staticmethod
    def _parse_cell(token: Union[int, str], row: int, col: int) -> int:
        if isinstance(token, (bool, float)):
            raise MalformedInputError(
                f"Cell ({row}, {col}) is not an integer: {token!r}")
        try:
            value = int(token)
        except (TypeError, ValueError):
            raise MalformedInputError(
                f"Cell ({row}, {col}) is not an integer: {token!r}") from None
        if not CELL_MIN <= value <= CELL_MAX:
            raise MalformedInputError(
                f"Cell ({row}, {col}) is out of range: {token!r}")
        return value

    @property
    def size(self) -> int:
        return self._size

    @property
    def values(self) -> np.ndarray:
        """Read-only view of the underlying matrix."""
        return self._values

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if cell is within the grid."""
        return 0 <= row < self._size and 0 <= col < self._size

    def _check_bounds(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise OutOfBoundsError(
                f"Cell ({row}, {col}) outside grid of size {self._size}")

    def value_at(self, row: int, col: int) -> int:
        """Return the resource claimed at (row, col)."""
        self._check_bounds(row, col)
        return int(self._values[row, col])

    def valid_moves(self, row: int, col: int) -> Set[Move]:
        """
        Moves that keep the driller inside the grid.
        The bottom row has none.
        """
        self._check_bounds(row, col)
        moves = set()
        if row < self._size - 1:
            if col > 0:
                moves.add(Move.DOWN_LEFT)
            if col < self._size - 1:
                moves.add(Move.DOWN_RIGHT)
        return moves

    def target(self, row: int, col: int, move: Move) -> Tuple[int, int]:
        """Cell reached by applying move at (row, col)."""
        if move not in self.valid_moves(row, col):
            raise OutOfBoundsError(
                f"{move.value} from ({row}, {col}) leaves the grid")
        return row + 1, col + move.col_offset

    def rows(self) -> List[List[int]]:
        """Return the grid as nested lists of ints."""
        return self._values.tolist()

    def __repr__(self) -> str:
        return f"GridMap(size={self._size})"

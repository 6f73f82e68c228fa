"""Exhaustive depth-first path search for the mine driller."""

import logging
from typing import Dict, List

from ..errors import EmptyGridError
from .grid import GridMap, MOVE_ORDER
from .state import NO_PARENT, MinePath, PathStep, SearchNode

logger = logging.getLogger(__name__)


class PathSearch:
    """
    Enumerates every descent from the surface to the bottom row.

    Implements:
    1. One depth-first traversal per starting column, left to right
    2. An explicit LIFO frontier of arena indices
    3. Goal collection in discovery order
    4. Best-path selection (highest total, earliest discovered on ties)
    5. Path reconstruction from parent indices
    """

    def __init__(self, grid: GridMap):
        self.grid = grid
        self.nodes: List[SearchNode] = []
        self.goals: List[int] = []
        self.goal_counts: List[int] = []
        self.best: int = NO_PARENT

    def _reset(self) -> None:
        self.nodes = []
        self.goals = []
        self.goal_counts = []
        self.best = NO_PARENT

    def _add_node(self, node: SearchNode) -> int:
        self.nodes.append(node)
        return len(self.nodes) - 1

    def _search_column(self, col: int) -> int:
        """Run one traversal from (0, col). Returns goals found."""
        n = self.grid.size
        found = 0
        root = SearchNode(row=0, col=col, total=self.grid.value_at(0, col))
        frontier = [self._add_node(root)]

        while frontier:
            index = frontier.pop()
            node = self.nodes[index]

            # Goal state: bottom row reached
            if node.row == n - 1:
                self.goals.append(index)
                found += 1
                continue

            moves = self.grid.valid_moves(node.row, node.col)
            for move in MOVE_ORDER:
                if move not in moves:
                    continue
                child_row, child_col = self.grid.target(node.row, node.col, move)
                child = SearchNode(
                    row=child_row,
                    col=child_col,
                    total=node.total + self.grid.value_at(child_row, child_col),
                    parent=index,
                    move=move,
                )
                frontier.append(self._add_node(child))

        return found

    def solve(self) -> MinePath:
        """Search all starting columns and return the best path."""
        if self.grid.size == 0:
            raise EmptyGridError("Grid has no cells to start from")

        self._reset()
        for col in range(self.grid.size):
            found = self._search_column(col)
            self.goal_counts.append(found)
            logger.debug("Column %d: %d goal paths", col, found)

        # max() keeps the first of equal keys, so discovery order breaks ties
        self.best = max(self.goals, key=lambda i: self.nodes[i].total)
        logger.debug("Explored %d nodes, best total %d",
                     len(self.nodes), self.nodes[self.best].total)
        return self.reconstruct(self.best)

    def reconstruct(self, index: int) -> MinePath:
        """Walk parent indices from a goal node back to its root."""
        total = self.nodes[index].total
        steps = []
        while True:
            node = self.nodes[index]
            steps.append(PathStep(
                row=node.row,
                col=node.col,
                move=node.move,
                value=self.grid.value_at(node.row, node.col),
            ))
            if node.is_root:
                break
            index = node.parent
        steps.reverse()
        return MinePath(steps=tuple(steps), total=total)

    def candidates(self) -> List[MinePath]:
        """All goal paths of the last solve, in discovery order."""
        return [self.reconstruct(i) for i in self.goals]

    def get_summary(self) -> Dict:
        """Get summary statistics for the last search."""
        return {
            'columns_searched': len(self.goal_counts),
            'nodes_created': len(self.nodes),
            'goal_paths': len(self.goals),
            'best_total': (self.nodes[self.best].total
                           if self.best != NO_PARENT else None),
        }

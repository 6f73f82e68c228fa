"""Model package for the mine driller."""

from .grid import GridMap, Move, MOVE_ORDER
from .state import SearchNode, PathStep, MinePath, NO_PARENT
from .search import PathSearch

__all__ = [
    'GridMap',
    'Move',
    'MOVE_ORDER',
    'SearchNode',
    'PathStep',
    'MinePath',
    'NO_PARENT',
    'PathSearch',
]

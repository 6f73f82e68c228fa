"""Maximum-resource descent search through a square mine grid."""

from .errors import (
    MineDrillerError,
    MalformedInputError,
    OutOfBoundsError,
    EmptyGridError,
)
from .loader import load_grid, parse_grid
from .model import GridMap, Move, MinePath, PathSearch

__version__ = "0.1.0"

__all__ = [
    'MineDrillerError',
    'MalformedInputError',
    'OutOfBoundsError',
    'EmptyGridError',
    'load_grid',
    'parse_grid',
    'GridMap',
    'Move',
    'MinePath',
    'PathSearch',
]

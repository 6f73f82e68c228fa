"""Text map loader for the mine driller."""

import logging
from pathlib import Path
from typing import List, Optional

from .errors import MalformedInputError
from .model.grid import GridMap

logger = logging.getLogger(__name__)


def parse_grid(text: str, size: Optional[int] = None) -> GridMap:
    """
    Parse whitespace-separated integers, one grid row per line.
    Blank lines are skipped.
    """
    rows: List[List[str]] = [line.split() for line in text.splitlines()
                             if line.strip()]
    return GridMap(rows, size=size)


def load_grid(map_path: Path, size: Optional[int] = None) -> GridMap:
    """Load a square grid from a text file."""
    map_path = Path(map_path)
    try:
        text = map_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MalformedInputError(f"Cannot read map {map_path}: {e}") from e

    grid = parse_grid(text, size=size)
    logger.debug("Loaded %dx%d map from %s", grid.size, grid.size, map_path)
    return grid

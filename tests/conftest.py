"""Shared pytest fixtures for mine_driller tests.

GRIDS:
    sample_grid: the 3x3 example map. Best descent (0,0) -> (1,1) -> (2,2) = 16.
    tie_grid: two descents from column 1 both claim 6; columns 0 and 2 are
        poisoned with -9 so only the within-column tie-break matters.
"""

from pathlib import Path

import pytest

from mine_driller.model.grid import GridMap
from mine_driller.model.search import PathSearch


SAMPLE_ROWS = [
    [3, 0, 0],
    [1, 5, 0],
    [2, 6, 8],
]

TIE_ROWS = [
    [-9, 5, -9],
    [1, 0, 1],
    [0, 0, 0],
]


@pytest.fixture
def sample_grid() -> GridMap:
    return GridMap(SAMPLE_ROWS)


@pytest.fixture
def tie_grid() -> GridMap:
    return GridMap(TIE_ROWS)


@pytest.fixture
def sample_path(sample_grid):
    return PathSearch(sample_grid).solve()


@pytest.fixture
def sample_map_file(tmp_path: Path) -> Path:
    """Sample grid written the way map files are stored on disk."""
    path = tmp_path / "mine.txt"
    path.write_text("3 0 0\n1 5 0\n2 6 8\n")
    return path

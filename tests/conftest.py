"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

import numpy as np

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from game import Board, BoardConfig, Cell, load_board


BOARDS_DIR = Path(__file__).parent / "boards"


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def row_board() -> Board:
    """Create a 3x1 board with no bombs."""
    return Board(np.zeros((1, 3), dtype=bool))


@pytest.fixture
def empty_board() -> Board:
    """Create a 5x5 board with no bombs for flood fill testing."""
    return Board(np.zeros((5, 5), dtype=bool))


@pytest.fixture
def corners_board() -> Board:
    """3x3 board with bombs at (0, 0) and (2, 2)."""
    return load_board(BOARDS_DIR / "corners.txt")


@pytest.fixture
def single_bomb_board() -> Board:
    """5x5 board with one bomb at (4, 1)."""
    return load_board(BOARDS_DIR / "single_bomb.txt")


@pytest.fixture
def random_board() -> Board:
    """Reproducible dense 9x9 random board."""
    return Board.random(BoardConfig(9, 9, bomb_probability=0.3, seed=7))


@pytest.fixture
def boards_dir() -> Path:
    """Directory holding the test board files."""
    return BOARDS_DIR


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def untouched_cell() -> Cell:
    """Create an untouched cell."""
    return Cell()


@pytest.fixture
def flagged_cell() -> Cell:
    """Create a flagged cell."""
    cell = Cell()
    cell.flag()
    return cell


@pytest.fixture
def numbered_cell() -> Cell:
    """Create a dug cell with bomb neighbors."""
    cell = Cell(bomb_neighbors=3)
    cell.dig()
    return cell


# ============================================================================
# Invariant Helpers
# ============================================================================

def _expected_neighbor_counts(bombs: np.ndarray) -> np.ndarray:
    """Count bomb neighbors of every cell by summing shifted copies."""
    height, width = bombs.shape
    padded = np.pad(bombs.astype(np.int8), 1)
    counts = np.zeros((height, width), dtype=np.int8)
    for delta_y in (-1, 0, 1):
        for delta_x in (-1, 0, 1):
            if delta_x == 0 and delta_y == 0:
                continue
            counts += padded[
                1 + delta_y:1 + delta_y + height,
                1 + delta_x:1 + delta_x + width,
            ]
    return counts


@pytest.fixture
def assert_counts_consistent():
    """Check every cell's neighbor count against the live bomb layout."""
    def check(board: Board) -> None:
        expected = _expected_neighbor_counts(board.bomb_layout())
        for y in range(board.height):
            for x in range(board.width):
                cell = board.get_cell(x, y)
                assert cell.bomb_neighbors == expected[y, x], (x, y)
    return check

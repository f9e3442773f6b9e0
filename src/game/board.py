"""
Board module for Minesweeper game.

Implements the shared game board with bomb placement, digging with
flood fill, flagging, and text rendering. Every public operation runs
under a single per-board lock, so concurrent callers always observe
some serial order of whole operations.
"""
import threading
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import List, Tuple, Optional

import numpy as np

from .cell import Cell, CellState


# ============================================================================
# Constants
# ============================================================================

DEFAULT_SIZE = 12
DEFAULT_BOMB_PROBABILITY = 0.25


class DigOutcome(Enum):
    """Result of a dig request."""

    NO_CHANGE = auto()
    REVEALED = auto()
    BOMB = auto()

    @property
    def revealed(self) -> bool:
        """Check if the dig changed the board."""
        return self is not DigOutcome.NO_CHANGE


@dataclass
class BoardConfig:
    """
    Configuration for a randomly generated board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        bomb_probability: Chance that any single cell holds a bomb.
        seed: Optional seed for a reproducible layout.
    """

    width: int = DEFAULT_SIZE
    height: int = DEFAULT_SIZE
    bomb_probability: float = DEFAULT_BOMB_PROBABILITY
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise ValueError("Board dimensions must be positive")
        if not 0.0 <= self.bomb_probability <= 1.0:
            raise ValueError("Bomb probability must be between 0 and 1")


# ============================================================================
# Board Class
# ============================================================================

class Board:
    """
    Thread-safe Minesweeper board shared by every connected player.

    Cells are addressed by column x and row y. The grid is never exposed:
    accessors hand out copies and the render text only.

    Invariant: every cell's bomb_neighbors equals the number of its
    neighbors with has_bomb set. It is maintained incrementally whenever a
    bomb is placed or removed.
    """

    def __init__(self, layout: np.ndarray) -> None:
        """
        Create a board from a bomb layout.

        Args:
            layout: 2D array of shape (rows, cols); truthy entries are bombs.

        Raises:
            ValueError: If the layout is not a non-empty 2D array.
        """
        bombs = np.array(layout, dtype=bool)
        if bombs.ndim != 2:
            raise ValueError("Bomb layout must be two-dimensional")
        if bombs.shape[0] < 1 or bombs.shape[1] < 1:
            raise ValueError("Board dimensions must be positive")

        self._height, self._width = bombs.shape
        self._lock = threading.Lock()
        self._grid: List[List[Cell]] = [
            [Cell() for _ in range(self._width)]
            for _ in range(self._height)
        ]
        for y, x in np.argwhere(bombs):
            self._place_bomb(int(x), int(y))

    @classmethod
    def random(cls, config: Optional[BoardConfig] = None) -> "Board":
        """
        Create a board where each cell independently holds a bomb.

        Args:
            config: Board configuration (default: 12x12, one in four bombs).

        Returns:
            New board.
        """
        config = config or BoardConfig()
        rng = np.random.default_rng(config.seed)
        layout = rng.random((config.height, config.width)) < config.bomb_probability
        return cls(layout)

    # ========================================================================
    # Bomb Bookkeeping (Low-level, caller holds the lock)
    # ========================================================================

    def _place_bomb(self, x: int, y: int) -> None:
        """Put a bomb on a cell and bump its neighbors' counts."""
        self._grid[y][x].has_bomb = True
        self._update_neighbors(x, y, 1)

    def _remove_bomb(self, x: int, y: int) -> None:
        """Take the bomb off a cell and lower its neighbors' counts."""
        self._grid[y][x].has_bomb = False
        self._update_neighbors(x, y, -1)

    def _update_neighbors(self, x: int, y: int, delta: int) -> None:
        """Add delta to the bomb count of every neighbor of (x, y)."""
        for neighbor_x, neighbor_y in self._get_neighbors(x, y):
            self._grid[neighbor_y][neighbor_x].bomb_neighbors += delta

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _get_neighbors(self, x: int, y: int) -> List[Tuple[int, int]]:
        """
        Get valid neighboring cell positions.

        Args:
            x: Column of center cell.
            y: Row of center cell.

        Returns:
            List of (x, y) tuples for neighbors inside the grid.
        """
        neighbors = []
        for delta_y in (-1, 0, 1):
            for delta_x in (-1, 0, 1):
                if delta_x == 0 and delta_y == 0:
                    continue
                new_x = x + delta_x
                new_y = y + delta_y
                if self._is_valid_position(new_x, new_y):
                    neighbors.append((new_x, new_y))
        return neighbors

    def _is_valid_position(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self._width and 0 <= y < self._height

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def dig(self, x: int, y: int) -> DigOutcome:
        """
        Dig the cell at (x, y).

        Out-of-range, flagged and already dug cells are left alone. If the
        cell holds a bomb, the bomb is removed before the flood fill, so the
        fill starts from the cell's updated neighbor count.

        Args:
            x: Column to dig.
            y: Row to dig.

        Returns:
            NO_CHANGE, REVEALED, or BOMB when the dug cell held a bomb.
        """
        with self._lock:
            if not self._is_valid_position(x, y):
                return DigOutcome.NO_CHANGE
            cell = self._grid[y][x]
            if not cell.dig():
                return DigOutcome.NO_CHANGE

            outcome = DigOutcome.REVEALED
            if cell.has_bomb:
                self._remove_bomb(x, y)
                outcome = DigOutcome.BOMB

            self._flood_fill(x, y)
            return outcome

    def _flood_fill(self, x: int, y: int) -> None:
        """
        Dig outward from a freshly dug cell across zero-count cells.

        Uses an explicit stack so large grids cannot exhaust the call
        stack. Each cell is pushed at most once because it is marked dug
        before it is pushed.
        """
        stack = [(x, y)]
        while stack:
            cell_x, cell_y = stack.pop()
            if self._grid[cell_y][cell_x].bomb_neighbors != 0:
                continue
            for neighbor_x, neighbor_y in self._get_neighbors(cell_x, cell_y):
                if self._grid[neighbor_y][neighbor_x].dig():
                    stack.append((neighbor_x, neighbor_y))

    def flag(self, x: int, y: int) -> None:
        """Flag an untouched cell; anything else is ignored."""
        with self._lock:
            if self._is_valid_position(x, y):
                self._grid[y][x].flag()

    def deflag(self, x: int, y: int) -> None:
        """Unflag a flagged cell; anything else is ignored."""
        with self._lock:
            if self._is_valid_position(x, y):
                self._grid[y][x].deflag()

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def width(self) -> int:
        """Number of columns."""
        return self._width

    @property
    def height(self) -> int:
        """Number of rows."""
        return self._height

    def status(self, x: int, y: int) -> CellState:
        """Get the visibility of a cell, or INVALID if out of range."""
        with self._lock:
            if not self._is_valid_position(x, y):
                return CellState.INVALID
            return self._grid[y][x].state

    def get_cell(self, x: int, y: int) -> Optional[Cell]:
        """Get a copy of the cell at position, or None if invalid."""
        with self._lock:
            if not self._is_valid_position(x, y):
                return None
            return replace(self._grid[y][x])

    def bomb_layout(self) -> np.ndarray:
        """
        Get the current bomb positions.

        Returns:
            Boolean array of shape (height, width), True where a bomb is.
        """
        with self._lock:
            return np.array(
                [[cell.has_bomb for cell in row] for row in self._grid],
                dtype=bool,
            )

    def get_observation(self) -> np.ndarray:
        """
        Get the visible board state as a numpy array.

        Returns:
            2D int8 array of shape (height, width) where:
                -1 = untouched
                -2 = flagged
                0-8 = dug with bomb neighbor count
        """
        with self._lock:
            obs = np.zeros((self._height, self._width), dtype=np.int8)
            for y, row in enumerate(self._grid):
                for x, cell in enumerate(row):
                    obs[y, x] = cell.to_observation()
            return obs

    def render(self) -> str:
        """
        Render the board as text.

        Rows are newline-separated and cells within a row are separated by
        single spaces. There is no trailing newline.
        """
        with self._lock:
            return "\n".join(
                " ".join(cell.symbol() for cell in row)
                for row in self._grid
            )

    def __str__(self) -> str:
        return self.render()

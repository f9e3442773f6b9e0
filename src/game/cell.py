"""
Cell module for Minesweeper game.

Represents individual cells on the shared board with their visibility
(untouched/flagged/dug) and content (bomb/neighbor count).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """
    Possible visibility states of a cell.

    INVALID is only ever reported by Board.status for coordinates outside
    the grid; no cell holds it.
    """

    UNTOUCHED = auto()
    FLAGGED = auto()
    DUG = auto()
    INVALID = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Allowed transitions: UNTOUCHED -> FLAGGED, FLAGGED -> UNTOUCHED and
    UNTOUCHED -> DUG. DUG is terminal.

    Attributes:
        has_bomb: Whether this cell currently contains a bomb.
        bomb_neighbors: Count of bombs in neighboring cells (0-8).
        state: Current visibility state.
    """

    has_bomb: bool = False
    bomb_neighbors: int = 0
    state: CellState = CellState.UNTOUCHED

    def dig(self) -> bool:
        """
        Dig this cell.

        Returns:
            True if the cell was untouched and is now dug, False otherwise.
        """
        if self.state != CellState.UNTOUCHED:
            return False
        self.state = CellState.DUG
        return True

    def flag(self) -> bool:
        """
        Flag this cell.

        Returns:
            True if the cell was untouched and is now flagged.
        """
        if self.state != CellState.UNTOUCHED:
            return False
        self.state = CellState.FLAGGED
        return True

    def deflag(self) -> bool:
        """
        Remove the flag from this cell.

        Returns:
            True if the cell was flagged and is now untouched.
        """
        if self.state != CellState.FLAGGED:
            return False
        self.state = CellState.UNTOUCHED
        return True

    @property
    def is_untouched(self) -> bool:
        """Check if cell is untouched."""
        return self.state == CellState.UNTOUCHED

    @property
    def is_dug(self) -> bool:
        """Check if cell is dug."""
        return self.state == CellState.DUG

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    def symbol(self) -> str:
        """
        Convert cell to its board-text symbol.

        Returns:
            "-": Untouched cell
            "F": Flagged cell
            " ": Dug cell with no bomb neighbors
            "1"-"8": Dug cell with that many bomb neighbors
        """
        if self.state == CellState.UNTOUCHED:
            return "-"
        if self.state == CellState.FLAGGED:
            return "F"
        if self.bomb_neighbors == 0:
            return " "
        return str(self.bomb_neighbors)

    def to_observation(self) -> int:
        """
        Convert cell to a numeric observation value.

        Returns:
            -1: Untouched cell
            -2: Flagged cell
            0-8: Dug cell with bomb neighbor count
        """
        if self.state == CellState.UNTOUCHED:
            return -1
        if self.state == CellState.FLAGGED:
            return -2
        return self.bomb_neighbors

"""
Unit tests for Cell class.

Tests the per-cell state machine and symbol conversion.
"""
import pytest
from game import Cell, CellState


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_has_no_bomb(self) -> None:
        """New cell should not hold a bomb by default."""
        cell = Cell()
        assert cell.has_bomb is False

    def test_default_cell_is_untouched(self) -> None:
        """New cell should be untouched by default."""
        cell = Cell()
        assert cell.state == CellState.UNTOUCHED
        assert cell.is_untouched is True

    def test_default_cell_has_zero_bomb_neighbors(self) -> None:
        """New cell should have 0 bomb neighbors by default."""
        cell = Cell()
        assert cell.bomb_neighbors == 0


# ============================================================================
# Cell Dig Tests
# ============================================================================

class TestCellDig:
    """Test cell dig behavior."""

    def test_dig_untouched_cell_returns_true(self, untouched_cell: Cell) -> None:
        """Digging an untouched cell should succeed."""
        assert untouched_cell.dig() is True
        assert untouched_cell.is_dug is True

    def test_dig_dug_cell_returns_false(self, numbered_cell: Cell) -> None:
        """Dug is terminal; digging again does nothing."""
        assert numbered_cell.dig() is False
        assert numbered_cell.is_dug is True

    def test_dig_flagged_cell_returns_false(self, flagged_cell: Cell) -> None:
        """Flagged cells are protected from digging."""
        assert flagged_cell.dig() is False
        assert flagged_cell.is_flagged is True

    def test_dig_does_not_touch_bomb(self) -> None:
        """Cell dig only changes visibility; bomb removal is the board's job."""
        cell = Cell(has_bomb=True)
        cell.dig()
        assert cell.has_bomb is True


# ============================================================================
# Cell Flag Tests
# ============================================================================

class TestCellFlag:
    """Test flag and deflag behavior."""

    def test_flag_untouched_cell(self, untouched_cell: Cell) -> None:
        """Flagging an untouched cell should succeed."""
        assert untouched_cell.flag() is True
        assert untouched_cell.is_flagged is True

    def test_flag_flagged_cell_is_noop(self, flagged_cell: Cell) -> None:
        """Flagging twice keeps the flag and reports no change."""
        assert flagged_cell.flag() is False
        assert flagged_cell.is_flagged is True

    def test_flag_dug_cell_fails(self, numbered_cell: Cell) -> None:
        """Cannot flag a dug cell."""
        assert numbered_cell.flag() is False
        assert numbered_cell.is_dug is True

    def test_deflag_flagged_cell(self, flagged_cell: Cell) -> None:
        """Deflagging returns the cell to untouched."""
        assert flagged_cell.deflag() is True
        assert flagged_cell.is_untouched is True

    def test_deflag_untouched_cell_is_noop(self, untouched_cell: Cell) -> None:
        """Deflagging an untouched cell changes nothing."""
        assert untouched_cell.deflag() is False
        assert untouched_cell.is_untouched is True

    def test_deflag_dug_cell_is_noop(self, numbered_cell: Cell) -> None:
        """Deflagging a dug cell changes nothing."""
        assert numbered_cell.deflag() is False
        assert numbered_cell.is_dug is True


# ============================================================================
# Symbol Tests
# ============================================================================

class TestCellSymbol:
    """Test board-text symbols and observation values."""

    def test_untouched_symbol(self, untouched_cell: Cell) -> None:
        """Untouched cell renders as a dash."""
        assert untouched_cell.symbol() == "-"

    def test_flagged_symbol(self, flagged_cell: Cell) -> None:
        """Flagged cell renders as F."""
        assert flagged_cell.symbol() == "F"

    def test_dug_zero_symbol_is_blank(self, untouched_cell: Cell) -> None:
        """Dug cell without bomb neighbors renders as a space."""
        untouched_cell.dig()
        assert untouched_cell.symbol() == " "

    def test_dug_numbered_symbol(self, numbered_cell: Cell) -> None:
        """Dug cell shows its bomb neighbor count."""
        assert numbered_cell.symbol() == "3"

    @pytest.mark.parametrize(
        "cell_factory, expected",
        [
            (lambda: Cell(), -1),
            (lambda: Cell(state=CellState.FLAGGED), -2),
            (lambda: Cell(bomb_neighbors=5, state=CellState.DUG), 5),
        ],
    )
    def test_observation_values(self, cell_factory, expected: int) -> None:
        """Observation encodes visibility and visible count."""
        assert cell_factory().to_observation() == expected

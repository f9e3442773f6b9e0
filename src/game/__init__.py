"""
Minesweeper game module.

Provides the shared board, cell state, and board-file loading.
"""
from .cell import Cell, CellState
from .board import Board, BoardConfig, DigOutcome
from .loader import parse_layout, load_layout, load_board

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "DigOutcome",
    "parse_layout",
    "load_layout",
    "load_board",
]

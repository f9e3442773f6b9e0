"""
Board file loading.

A board file is a header line "COLS ROWS" followed by ROWS lines, each
holding COLS space-separated values, where 1 marks a bomb and 0 a safe
cell.
"""
from pathlib import Path
from typing import Iterable, List, Tuple, Union

import numpy as np

from .board import Board


def parse_layout(lines: Iterable[str]) -> np.ndarray:
    """
    Parse board-file text into a bomb layout.

    Args:
        lines: Lines of the board file, with or without line endings.

    Returns:
        Boolean array of shape (rows, cols).

    Raises:
        ValueError: If the text does not follow the board-file format.
    """
    rows = [line.rstrip("\r\n") for line in lines]
    while rows and not rows[-1].strip():
        rows.pop()
    if not rows:
        raise ValueError("Board file is empty")

    cols, height = _parse_header(rows[0])
    body = rows[1:]
    if len(body) != height:
        raise ValueError(f"Expected {height} rows, found {len(body)}")

    values: List[List[int]] = []
    for line_number, line in enumerate(body, start=2):
        tokens = line.split()
        if len(tokens) != cols:
            raise ValueError(
                f"Line {line_number}: expected {cols} values, found {len(tokens)}"
            )
        if any(token not in ("0", "1") for token in tokens):
            raise ValueError(f"Line {line_number}: values must be 0 or 1")
        values.append([int(token) for token in tokens])

    return np.array(values, dtype=np.int8).astype(bool)


def _parse_header(line: str) -> Tuple[int, int]:
    """Parse the "COLS ROWS" header line."""
    tokens = line.split()
    if len(tokens) != 2:
        raise ValueError(f"Line 1: expected 'COLS ROWS', found {line!r}")
    try:
        cols, rows = int(tokens[0]), int(tokens[1])
    except ValueError:
        raise ValueError(
            f"Line 1: board size must be integers, found {line!r}"
        ) from None
    if cols < 1 or rows < 1:
        raise ValueError("Board dimensions must be positive")
    return cols, rows


def load_layout(path: Union[str, Path]) -> np.ndarray:
    """Read and parse a board file."""
    with open(path, encoding="utf-8") as board_file:
        return parse_layout(board_file)


def load_board(path: Union[str, Path]) -> Board:
    """
    Build a board from a board file.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the file is malformed.
    """
    return Board(load_layout(path))

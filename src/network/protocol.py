"""
Text protocol spoken between the server and its clients.

One command per line:

    look
    help
    bye
    dig X Y
    flag X Y
    deflag X Y

Keywords are case-sensitive; X and Y are signed integers.
"""
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional


# ============================================================================
# Replies
# ============================================================================

BOOM_MESSAGE = "BOOM!"

HELP_MESSAGE = (
    "Please enter one of the following commands: "
    "'look' to see the board, "
    "'dig X Y' to dig the cell at column X and row Y, "
    "'flag X Y' to flag it, "
    "'deflag X Y' to remove a flag, "
    "'help' to show this message, "
    "'bye' to leave the game."
)


def welcome_message(players: int, columns: int, rows: int) -> str:
    """Build the greeting sent to a client when it connects."""
    return (
        f"Welcome to Minesweeper. Players: {players} including you. "
        f"Board: {columns} columns by {rows} rows. Type 'help' for help."
    )


# ============================================================================
# Commands
# ============================================================================

class CommandType(Enum):
    """Commands a client may send."""

    LOOK = "look"
    HELP = "help"
    BYE = "bye"
    DIG = "dig"
    FLAG = "flag"
    DEFLAG = "deflag"


@dataclass(frozen=True)
class Command:
    """
    A parsed client command.

    Attributes:
        type: Which command was sent.
        x: Column argument, for dig/flag/deflag.
        y: Row argument, for dig/flag/deflag.
    """

    type: CommandType
    x: Optional[int] = None
    y: Optional[int] = None


_SIMPLE_COMMAND = re.compile(r"(look|help|bye)")
_CELL_COMMAND = re.compile(r"(dig|flag|deflag)\s+(-?[0-9]+)\s+(-?[0-9]+)")

# Longer coordinates are off any board; clamping keeps int() within its
# string-conversion limit.
MAX_COORDINATE_DIGITS = 18


def _parse_coordinate(text: str) -> int:
    """Convert a coordinate, clamping huge magnitudes to an off-board value."""
    sign = -1 if text.startswith("-") else 1
    digits = text.lstrip("-").lstrip("0")
    if len(digits) > MAX_COORDINATE_DIGITS:
        return sign * 10 ** MAX_COORDINATE_DIGITS
    return sign * int(digits or "0")


def parse_command(line: str) -> Optional[Command]:
    """
    Parse one line of client input.

    Args:
        line: Raw line, line ending included or not.

    Returns:
        The command, or None if the line does not match the grammar.
    """
    text = line.strip()

    match = _SIMPLE_COMMAND.fullmatch(text)
    if match:
        return Command(CommandType(match.group(1)))

    match = _CELL_COMMAND.fullmatch(text)
    if match:
        return Command(
            CommandType(match.group(1)),
            _parse_coordinate(match.group(2)),
            _parse_coordinate(match.group(3)),
        )

    return None

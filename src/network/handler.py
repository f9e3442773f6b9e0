"""
Per-client connection handling.

A handler owns one client socket. It greets the client, then reads one
command per line, applies it to the shared board, and writes the reply.
"""
import logging
import socket
from dataclasses import dataclass
from typing import Optional, TextIO, Tuple

from game import Board, DigOutcome

from .protocol import (
    BOOM_MESSAGE,
    HELP_MESSAGE,
    Command,
    CommandType,
    parse_command,
    welcome_message,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Reply:
    """
    Outcome of handling one request line.

    Attributes:
        text: Message to send back, or None to send nothing.
        close: Whether the connection should be closed afterwards.
    """

    text: Optional[str] = None
    close: bool = False


class ConnectionHandler:
    """
    Serves a single client against the shared board.

    The connection moves from connected to closed exactly once: on end of
    stream, on 'bye', after a bomb hit, or on any I/O failure. I/O failures
    are logged and never propagate to the caller.
    """

    def __init__(
        self,
        board: Board,
        conn: socket.socket,
        address: Optional[Tuple] = None,
        players: int = 1,
    ) -> None:
        """
        Initialize the handler.

        Args:
            board: Board shared with every other connection.
            conn: Connected client socket; the handler closes it.
            address: Peer address, used for logging.
            players: Number of connected players, this one included.
        """
        self.board = board
        self.conn = conn
        self.address = address
        self.players = players

    def run(self) -> None:
        """Handle the connection until it closes."""
        try:
            self._converse()
        except OSError as error:
            logger.warning("Connection %s failed: %s", self.address, error)
        finally:
            self.conn.close()

    def _converse(self) -> None:
        """Greet the client, then answer requests until the session ends."""
        reader = self.conn.makefile("r", encoding="utf-8", errors="replace")
        writer = self.conn.makefile("w", encoding="utf-8", newline="\n")
        with reader, writer:
            self._send(writer, welcome_message(
                self.players, self.board.width, self.board.height
            ))
            for line in reader:
                reply = self.handle_request(line)
                if reply.text is not None:
                    self._send(writer, reply.text)
                if reply.close:
                    return

    @staticmethod
    def _send(writer: TextIO, text: str) -> None:
        """Write one reply and push it to the client."""
        writer.write(text + "\n")
        writer.flush()

    # ========================================================================
    # Request Dispatch
    # ========================================================================

    def handle_request(self, line: str) -> Reply:
        """
        Apply one line of client input to the board.

        Args:
            line: Raw input line.

        Returns:
            The reply to send and whether to close afterwards.
        """
        command = parse_command(line)
        if command is None:
            logger.debug("Unrecognised command from %s: %r", self.address, line)
            return Reply(HELP_MESSAGE)
        return self._dispatch(command)

    def _dispatch(self, command: Command) -> Reply:
        """Run a parsed command."""
        if command.type is CommandType.LOOK:
            return Reply(self.board.render())
        if command.type is CommandType.HELP:
            return Reply(HELP_MESSAGE)
        if command.type is CommandType.BYE:
            return Reply(close=True)
        if command.type is CommandType.DIG:
            return self._dig(command.x, command.y)
        if command.type is CommandType.FLAG:
            self.board.flag(command.x, command.y)
        else:
            self.board.deflag(command.x, command.y)
        return Reply(self.board.render())

    def _dig(self, x: int, y: int) -> Reply:
        """Dig a cell; a bomb hit ends the session."""
        outcome = self.board.dig(x, y)
        if outcome is DigOutcome.BOMB:
            logger.info("Player %s hit a bomb at (%d, %d)", self.address, x, y)
            return Reply(BOOM_MESSAGE, close=True)
        return Reply(self.board.render())

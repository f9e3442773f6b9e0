"""
Multiplayer Minesweeper server.

Accepts TCP connections forever and serves each one on its own thread,
all against a single shared board.
"""
import logging
import socket
import threading
from dataclasses import dataclass
from typing import Optional, Tuple

from game import Board

from .handler import ConnectionHandler

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 4444


@dataclass
class ServerConfig:
    """
    Configuration for the listening socket.

    Attributes:
        host: Interface to bind to.
        port: Port to listen on; 0 lets the OS pick a free one.
        backlog: Pending connection queue length.
    """

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    backlog: int = 50

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if not 0 <= self.port <= 65535:
            raise ValueError("Port must be between 0 and 65535")
        if self.backlog < 1:
            raise ValueError("Backlog must be positive")


# ============================================================================
# Server
# ============================================================================

class MinesweeperServer:
    """
    Accept loop handing each client to a ConnectionHandler thread.

    The board is the only state shared between handlers. The player count
    is kept here, under its own lock, and only feeds the welcome line.
    """

    def __init__(self, board: Board, config: Optional[ServerConfig] = None) -> None:
        """
        Bind the listening socket.

        Args:
            board: Board shared by every connection.
            config: Server configuration (default: port 4444 on all interfaces).

        Raises:
            OSError: If the socket cannot be bound.
        """
        self.board = board
        self.config = config or ServerConfig()
        self._players = 0
        self._players_lock = threading.Lock()
        self._stopping = threading.Event()

        self._socket = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            self._socket.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            self._socket.bind((self.config.host, self.config.port))
            self._socket.listen(self.config.backlog)
        except OSError:
            self._socket.close()
            raise

        host, port = self.address
        logger.info(
            "Serving %dx%d board on %s:%d",
            board.width, board.height, host, port,
        )

    @property
    def address(self) -> Tuple[str, int]:
        """Address the server is listening on."""
        return self._socket.getsockname()[:2]

    @property
    def players(self) -> int:
        """Number of currently connected players."""
        with self._players_lock:
            return self._players

    def serve(self) -> None:
        """
        Accept connections until shutdown() is called.

        Raises:
            OSError: If accepting fails for any reason other than shutdown.
                Errors on individual connections never reach here.
        """
        while True:
            try:
                conn, address = self._socket.accept()
            except OSError:
                if self._stopping.is_set():
                    return
                raise
            with self._players_lock:
                self._players += 1
                players = self._players
            logger.info("Client %s connected (%d players)", address, players)
            thread = threading.Thread(
                target=self._handle_connection,
                args=(conn, address, players),
                daemon=True,
            )
            thread.start()

    def _handle_connection(
        self, conn: socket.socket, address: Tuple, players: int
    ) -> None:
        """Run one client's session, releasing its player slot afterwards."""
        try:
            ConnectionHandler(self.board, conn, address, players).run()
        finally:
            with self._players_lock:
                self._players -= 1
                players = self._players
            logger.info("Client %s disconnected (%d players)", address, players)

    def shutdown(self) -> None:
        """Stop accepting connections; open sessions keep running."""
        self._stopping.set()
        try:
            self._socket.shutdown(socket.SHUT_RDWR)
        except OSError:
            # some platforms reject shutdown() on a listening socket
            pass
        self._socket.close()

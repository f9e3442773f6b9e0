#!/usr/bin/env python3
"""
Multiplayer Minesweeper server - Main entry point.

Usage:
    python main.py [--port PORT] [--size X,Y | --file FILE] [--log-level LEVEL]

With neither --size nor --file, a random 12x12 board is served.
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import Tuple

sys.path.insert(0, str(Path(__file__).parent / "src"))

from game import Board, BoardConfig, load_board
from network import MinesweeperServer, ServerConfig
from network.server import DEFAULT_PORT

logger = logging.getLogger("minesweeper")


def parse_size(value: str) -> Tuple[int, int]:
    """Parse an "X,Y" board size."""
    try:
        width, height = (int(part) for part in value.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"expected SIZE_X,SIZE_Y, got {value!r}"
        ) from None
    if width < 1 or height < 1:
        raise argparse.ArgumentTypeError("board dimensions must be positive")
    return width, height


def existing_file(value: str) -> Path:
    """Check that a board file path points at a file."""
    path = Path(value)
    if not path.is_file():
        raise argparse.ArgumentTypeError(f"file not found: {value!r}")
    return path


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser."""
    parser = argparse.ArgumentParser(
        description="Multiplayer Minesweeper server"
    )
    parser.add_argument(
        "--port", type=int, default=DEFAULT_PORT,
        help="Port to listen on (0-65535)",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--size", type=parse_size, metavar="SIZE_X,SIZE_Y",
        help="Serve a random board of this size",
    )
    source.add_argument(
        "--file", type=existing_file,
        help="Serve the board stored in this file",
    )
    parser.add_argument(
        "--log-level", default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    return parser


def create_board(args: argparse.Namespace) -> Board:
    """Build the starting board from the parsed arguments."""
    if args.file is not None:
        board = load_board(args.file)
        logger.info("Loaded %dx%d board from %s", board.width, board.height, args.file)
        return board
    if args.size is not None:
        width, height = args.size
        return Board.random(BoardConfig(width=width, height=height))
    return Board.random()


def main() -> int:
    """Parse arguments and run the server until interrupted."""
    parser = build_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        config = ServerConfig(port=args.port)
        board = create_board(args)
        server = MinesweeperServer(board, config)
    except (OSError, ValueError) as error:
        logger.error("Could not start server: %s", error)
        return 1

    try:
        server.serve()
    except KeyboardInterrupt:
        logger.info("Shutting down")
        server.shutdown()
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
Network module.

Provides the line-oriented text protocol, per-client connection handling,
and the multi-threaded TCP server.
"""
from .protocol import (
    BOOM_MESSAGE,
    HELP_MESSAGE,
    MAX_COORDINATE_DIGITS,
    Command,
    CommandType,
    parse_command,
    welcome_message,
)
from .handler import ConnectionHandler, Reply
from .server import MinesweeperServer, ServerConfig

__all__ = [
    "BOOM_MESSAGE",
    "HELP_MESSAGE",
    "MAX_COORDINATE_DIGITS",
    "Command",
    "CommandType",
    "parse_command",
    "welcome_message",
    "ConnectionHandler",
    "Reply",
    "MinesweeperServer",
    "ServerConfig",
]

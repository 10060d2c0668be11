# Area: Shared
"""
Shared utilities used by the round engine, the session and the CLI.

This package contains:
- Logging configuration
- SQLite connection helpers
"""

from .logging_config import setup_logging, log_engine_error
from .database import BaseRepository, get_connection, init_database

__all__ = [
    "setup_logging",
    "log_engine_error",
    "BaseRepository",
    "get_connection",
    "init_database",
]

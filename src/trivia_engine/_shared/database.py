# Area: Shared
"""
trivia_engine._shared.database — Database Initialization
========================================================

Handles SQLite database initialization and connection management
for the score ledger.
"""

import sqlite3
import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

logger = logging.getLogger("trivia_engine.database")

SCHEMA = """
CREATE TABLE IF NOT EXISTS participant_scores (
    participant_id TEXT PRIMARY KEY,
    display_name   TEXT NOT NULL,
    score          INTEGER NOT NULL DEFAULT 0 CHECK (score >= 0),
    created_at     TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    updated_at     TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);
"""


def get_connection(db_path: str = "trivia_scores.db") -> sqlite3.Connection:
    """
    Get a database connection.

    Args:
        db_path: Path to the SQLite database file

    Returns:
        SQLite connection with row factory set
    """
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn


def init_database(db_path: str = "trivia_scores.db") -> None:
    """
    Initialize the database with schema.

    Args:
        db_path: Path to the SQLite database file
    """
    conn = get_connection(db_path)
    try:
        conn.executescript(SCHEMA)
        conn.commit()
        logger.info(f"Database initialized at {db_path}")
    finally:
        conn.close()


class BaseRepository:
    """
    Base class for database repositories.

    Every call opens its own connection, so a repository can be used
    from worker threads.
    """

    def __init__(self, db_path: str = "trivia_scores.db"):
        self.db_path = db_path

    @contextmanager
    def _connection(self) -> Iterator[sqlite3.Connection]:
        """Yield a connection that commits on success and always closes."""
        conn = get_connection(self.db_path)
        try:
            yield conn
            conn.commit()
        except sqlite3.Error:
            conn.rollback()
            raise
        finally:
            conn.close()

    def _execute(self, query: str, params: tuple = ()) -> None:
        """Execute a write query."""
        with self._connection() as conn:
            conn.execute(query, params)

    def _fetch_all(self, query: str, params: tuple = ()) -> List[Dict[str, Any]]:
        """Execute a read query and return rows as dicts."""
        with self._connection() as conn:
            return [dict(row) for row in conn.execute(query, params).fetchall()]

    def _fetch_one(self, query: str, params: tuple = ()) -> Optional[Dict[str, Any]]:
        """Execute query and return single result."""
        rows = self._fetch_all(query, params)
        return rows[0] if rows else None

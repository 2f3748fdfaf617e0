"""
Connection Manager - The single SQLite connection behind the repositories.

All database access happens on the thread that handles user actions, one
action at a time, so one connection is enough. It is opened on first use
and reopened on the next use after close().
"""
import sqlite3
from pathlib import Path
from contextlib import contextmanager
from typing import Optional
import logging

logger = logging.getLogger(__name__)


class ConnectionManager:
    """
    Lazily opened connection shared by the repositories.

    Usage:
        connection = ConnectionManager(db_path)

        with connection.get_connection() as conn:
            rows = conn.execute("SELECT * FROM saved_queries").fetchall()

        with connection.transaction() as conn:
            conn.execute("DELETE FROM saved_queries WHERE id = ?", (query_id,))

    sqlite3.Error from opening or using the connection propagates; the
    repositories turn it into StorageError.
    """

    def __init__(self, db_path: Path):
        self.db_path = db_path
        self._conn: Optional[sqlite3.Connection] = None

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    def _open(self) -> sqlite3.Connection:
        if self._conn is None:
            conn = sqlite3.connect(self.db_path)
            conn.row_factory = sqlite3.Row
            self._conn = conn
            logger.debug(f"Opened connection to {self.db_path}")
        return self._conn

    @contextmanager
    def get_connection(self):
        """
        Yields:
            sqlite3.Connection: The shared connection, opened if needed
        """
        yield self._open()

    @contextmanager
    def transaction(self):
        """
        Yields the shared connection inside a transaction.

        Commits on successful exit, rolls back and re-raises on exception.
        """
        conn = self._open()
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise

    def close(self):
        """Close the connection; the next access reopens it."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None
            logger.debug(f"Closed connection to {self.db_path}")

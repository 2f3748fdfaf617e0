"""
Base Repository - Abstract base class for all repositories.

Reads go straight to the database. Writes are staged with insert()/delete()
and flushed atomically by commit(), so a caller can keep its in-memory view
untouched until the database has accepted the change.
"""
import sqlite3
from abc import ABC, abstractmethod
from typing import TypeVar, Generic, List, Optional, Tuple
import logging

from ..connection_manager import ConnectionManager
from ...errors import StorageError

logger = logging.getLogger(__name__)

T = TypeVar('T')


class BaseRepository(ABC, Generic[T]):
    """
    Abstract base repository providing common database operations.

    Subclasses must implement:
    - table_name: Name of the database table
    - default_order: ORDER BY clause used by fetch_all()
    - _row_to_model: Convert database row to model instance
    - _get_insert_sql / _model_to_insert_tuple: INSERT statement and values

    Every sqlite3.Error is logged and re-raised as StorageError.
    """

    def __init__(self, connection: ConnectionManager):
        """
        Args:
            connection: ConnectionManager instance for database access
        """
        self.connection = connection
        self._pending: List[Tuple[str, tuple]] = []

    @property
    @abstractmethod
    def table_name(self) -> str:
        """Return the name of the database table."""
        pass

    @property
    def default_order(self) -> str:
        return "id"

    @abstractmethod
    def _row_to_model(self, row: sqlite3.Row) -> T:
        """Convert a database row to a model instance."""
        pass

    @abstractmethod
    def _get_insert_sql(self) -> str:
        """Return the INSERT SQL statement."""
        pass

    @abstractmethod
    def _model_to_insert_tuple(self, model: T) -> tuple:
        """Convert model to tuple for INSERT."""
        pass

    def _model_id(self, model: T) -> str:
        return model.id

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def fetch_all(self) -> List[T]:
        """
        Get all records in default order.

        Returns:
            List of model instances

        Raises:
            StorageError: If the table cannot be read
        """
        try:
            with self.connection.get_connection() as conn:
                cursor = conn.cursor()
                cursor.execute(f"SELECT * FROM {self.table_name} ORDER BY {self.default_order}")
                rows = cursor.fetchall()
                return [self._row_to_model(row) for row in rows]
        except sqlite3.Error as e:
            logger.error(f"Error reading {self.table_name}: {e}")
            raise StorageError(f"Could not read {self.table_name}: {e}") from e

    def get_by_id(self, id: str) -> Optional[T]:
        """
        Get a record by ID.

        Returns:
            Model instance or None if not found
        """
        try:
            with self.connection.get_connection() as conn:
                cursor = conn.cursor()
                cursor.execute(f"SELECT * FROM {self.table_name} WHERE id = ?", (id,))
                row = cursor.fetchone()
                return self._row_to_model(row) if row else None
        except sqlite3.Error as e:
            logger.error(f"Error reading {self.table_name} record {id}: {e}")
            raise StorageError(f"Could not read {self.table_name} record {id}: {e}") from e

    def count(self) -> int:
        """Count all records in the table."""
        try:
            with self.connection.get_connection() as conn:
                cursor = conn.cursor()
                cursor.execute(f"SELECT COUNT(*) FROM {self.table_name}")
                return cursor.fetchone()[0]
        except sqlite3.Error as e:
            logger.error(f"Error counting {self.table_name}: {e}")
            raise StorageError(f"Could not count {self.table_name}: {e}") from e

    # ------------------------------------------------------------------
    # Staged writes
    # ------------------------------------------------------------------

    @property
    def has_pending(self) -> bool:
        """True if staged writes are waiting for commit()."""
        return bool(self._pending)

    def insert(self, model: T):
        """Stage an INSERT for the next commit()."""
        self._pending.append((self._get_insert_sql(), self._model_to_insert_tuple(model)))

    def delete(self, model: T):
        """Stage a DELETE of the model's row for the next commit()."""
        self._pending.append(
            (f"DELETE FROM {self.table_name} WHERE id = ?", (self._model_id(model),))
        )

    def commit(self):
        """
        Flush all staged writes in a single transaction.

        The staged writes are discarded whether or not the commit succeeds.

        Raises:
            StorageError: If any statement fails; nothing is written
        """
        pending, self._pending = self._pending, []
        if not pending:
            return

        try:
            with self.connection.transaction() as conn:
                for sql, params in pending:
                    conn.execute(sql, params)
            logger.debug(f"Committed {len(pending)} change(s) to {self.table_name}")
        except sqlite3.Error as e:
            logger.error(f"Error writing {self.table_name}: {e}")
            raise StorageError(f"Could not save changes to {self.table_name}: {e}") from e

    def rollback(self):
        """Discard staged writes."""
        if self._pending:
            logger.debug(f"Discarding {len(self._pending)} staged change(s) to {self.table_name}")
        self._pending = []

    # ------------------------------------------------------------------
    # One-shot helpers
    # ------------------------------------------------------------------

    def add(self, model: T):
        """Insert a record immediately."""
        self.insert(model)
        self.commit()

    def remove(self, model: T):
        """Delete a record immediately."""
        self.delete(model)
        self.commit()

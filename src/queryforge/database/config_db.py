"""
Configuration Database Module - Facade over the SQLite configuration database.

Owns the connection and hands out the repositories. Create one per
process (or per test) and pass it to whoever needs persistence.
"""
import sqlite3
from pathlib import Path
import logging

from .connection_manager import ConnectionManager
from .schema_manager import SchemaManager
from .repositories import SavedQueryRepository, UserPreferencesRepository
from ..errors import StorageError

logger = logging.getLogger(__name__)


class ConfigDatabase:
    """
    SQLite database for saved queries and user preferences.

    Usage:
        db = ConfigDatabase(settings.db_path)
        store = QueryStore(db.saved_queries)
        ...
        db.close()
    """

    def __init__(self, db_path: Path):
        self.db_path = Path(db_path)
        try:
            SchemaManager(self.db_path).initialize()
        except (sqlite3.Error, OSError) as e:
            logger.error(f"Cannot open configuration database {self.db_path}: {e}")
            raise StorageError(f"Cannot open configuration database {self.db_path}: {e}") from e
        self.connection = ConnectionManager(self.db_path)
        self.saved_queries = SavedQueryRepository(self.connection)
        self.preferences = UserPreferencesRepository(self.connection)
        logger.info(f"Configuration database ready: {self.db_path}")

    def close(self):
        """Close the database connection."""
        self.connection.close()

    def __enter__(self) -> "ConfigDatabase":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

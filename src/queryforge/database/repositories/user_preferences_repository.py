"""
User Preferences Repository - Key-value store for user settings.
"""
import sqlite3
from typing import Optional, Dict
from datetime import datetime
import logging

from ..connection_manager import ConnectionManager
from ...errors import StorageError

logger = logging.getLogger(__name__)


class UserPreferencesRepository:
    """
    Repository for user preferences (key-value store).

    Preferences are plain strings, so there is no model class and writes
    are applied immediately rather than staged.
    """

    def __init__(self, connection: ConnectionManager):
        self.connection = connection

    def get(self, key: str, default: str = None) -> Optional[str]:
        """
        Get a preference value by key.

        Args:
            key: Preference key
            default: Value returned when the key is not set

        Returns:
            Preference value or default
        """
        try:
            with self.connection.get_connection() as conn:
                cursor = conn.cursor()
                cursor.execute("SELECT value FROM user_preferences WHERE key = ?", (key,))
                row = cursor.fetchone()
                return row[0] if row else default
        except sqlite3.Error as e:
            logger.error(f"Error reading preference '{key}': {e}")
            raise StorageError(f"Could not read preference '{key}': {e}") from e

    def set(self, key: str, value: str):
        """Insert or update a preference value."""
        now = datetime.now().isoformat()
        try:
            with self.connection.transaction() as conn:
                conn.execute("""
                    INSERT INTO user_preferences (key, value, updated_at)
                    VALUES (?, ?, ?)
                    ON CONFLICT(key) DO UPDATE SET value = ?, updated_at = ?
                """, (key, value, now, value, now))
        except sqlite3.Error as e:
            logger.error(f"Error saving preference '{key}': {e}")
            raise StorageError(f"Could not save preference '{key}': {e}") from e

    def delete(self, key: str):
        """Delete a preference by key."""
        try:
            with self.connection.transaction() as conn:
                conn.execute("DELETE FROM user_preferences WHERE key = ?", (key,))
        except sqlite3.Error as e:
            logger.error(f"Error deleting preference '{key}': {e}")
            raise StorageError(f"Could not delete preference '{key}': {e}") from e

    def get_all(self) -> Dict[str, str]:
        """Get all preferences as a dictionary."""
        try:
            with self.connection.get_connection() as conn:
                cursor = conn.cursor()
                cursor.execute("SELECT key, value FROM user_preferences")
                return {row[0]: row[1] for row in cursor.fetchall()}
        except sqlite3.Error as e:
            logger.error(f"Error reading preferences: {e}")
            raise StorageError(f"Could not read preferences: {e}") from e

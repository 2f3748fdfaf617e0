"""
Schema Manager Module - Configuration database schema and migrations.

Handles:
- CREATE TABLE statements
- Index creation
- Schema migrations for databases created by older releases
"""
import sqlite3
from pathlib import Path
import logging

logger = logging.getLogger(__name__)


class SchemaManager:
    """
    Manages the SQLite schema of the configuration database.

    Responsibilities:
    - Create the saved_queries and user_preferences tables
    - Create indexes
    - Apply migrations
    """

    def __init__(self, db_path: Path):
        """
        Args:
            db_path: Path to SQLite database file
        """
        self.db_path = db_path

    def _get_connection(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path, check_same_thread=False)
        conn.row_factory = sqlite3.Row
        return conn

    def initialize(self):
        """
        Create the schema and run migrations.

        Call this once before handing the database to a ConnectionManager.
        """
        Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
        self._init_database()
        self._migrate_database()

    def _init_database(self):
        conn = self._get_connection()
        cursor = conn.cursor()

        try:
            # Saved Queries table
            cursor.execute("""
                CREATE TABLE IF NOT EXISTS saved_queries (
                    id TEXT PRIMARY KEY,
                    constraint_text TEXT NOT NULL,
                    search_key TEXT,
                    position INTEGER NOT NULL DEFAULT 0,
                    created_at TEXT NOT NULL
                )
            """)

            # User Preferences table
            cursor.execute("""
                CREATE TABLE IF NOT EXISTS user_preferences (
                    key TEXT PRIMARY KEY,
                    value TEXT,
                    updated_at TEXT NOT NULL
                )
            """)

            conn.commit()
            logger.debug(f"Schema initialized at {self.db_path}")
        finally:
            conn.close()

    def _migrate_database(self):
        conn = self._get_connection()
        cursor = conn.cursor()

        try:
            # Migration 1: Add 'position' column to saved_queries
            self._migrate_saved_queries_position(cursor, conn)

            self._ensure_indexes(cursor, conn)
        finally:
            conn.close()

    def _migrate_saved_queries_position(self, cursor: sqlite3.Cursor, conn: sqlite3.Connection):
        """Migration 1: Add 'position' column to saved_queries, seeded from insertion order."""
        cursor.execute("PRAGMA table_info(saved_queries)")
        columns = [row[1] for row in cursor.fetchall()]

        if 'position' not in columns:
            logger.info("[MIGRATION] Adding 'position' column to saved_queries table...")
            cursor.execute("ALTER TABLE saved_queries ADD COLUMN position INTEGER NOT NULL DEFAULT 0")
            cursor.execute("UPDATE saved_queries SET position = rowid")
            conn.commit()
            logger.info("[OK] Migration complete: saved_queries ordered by insertion")

    def _ensure_indexes(self, cursor: sqlite3.Cursor, conn: sqlite3.Connection):
        cursor.execute("""
            CREATE INDEX IF NOT EXISTS idx_saved_queries_position
            ON saved_queries(position)
        """)
        conn.commit()

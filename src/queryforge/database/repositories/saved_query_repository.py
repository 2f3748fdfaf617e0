"""
Saved Query Repository - Persistence backend for saved queries.
"""
import sqlite3

from .base_repository import BaseRepository
from ..models import SavedQuery


class SavedQueryRepository(BaseRepository[SavedQuery]):
    """Repository for SavedQuery entities, ordered by insertion."""

    @property
    def table_name(self) -> str:
        return "saved_queries"

    @property
    def default_order(self) -> str:
        return "position, created_at"

    def _row_to_model(self, row: sqlite3.Row) -> SavedQuery:
        return SavedQuery(**dict(row))

    def _get_insert_sql(self) -> str:
        return """
            INSERT INTO saved_queries
            (id, constraint_text, search_key, position, created_at)
            VALUES (?, ?, ?, ?, ?)
        """

    def _model_to_insert_tuple(self, model: SavedQuery) -> tuple:
        return (model.id, model.constraint_text, model.search_key,
                model.position, model.created_at)

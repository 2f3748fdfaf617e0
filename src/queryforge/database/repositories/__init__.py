"""
Database Repositories Package

Each repository handles persistence for a single table.
"""

from .base_repository import BaseRepository
from .saved_query_repository import SavedQueryRepository
from .user_preferences_repository import UserPreferencesRepository

__all__ = [
    'BaseRepository',
    'SavedQueryRepository',
    'UserPreferencesRepository',
]

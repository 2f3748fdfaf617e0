"""
Database package - SQLite persistence for saved queries and preferences.
"""

from .config_db import ConfigDatabase
from .connection_manager import ConnectionManager
from .schema_manager import SchemaManager
from .models import SavedQuery
from .repositories import SavedQueryRepository, UserPreferencesRepository

__all__ = [
    "ConfigDatabase",
    "ConnectionManager",
    "SchemaManager",
    "SavedQuery",
    "SavedQueryRepository",
    "UserPreferencesRepository",
]

"""
Database Models - Dataclasses for persisted entities

    from queryforge.database.models import SavedQuery
"""

from .saved_query import SavedQuery

__all__ = [
    "SavedQuery",
]

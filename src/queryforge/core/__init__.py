"""
Core query session logic.

Components (leaf to root):
- SearchKeySelector: single search key among a class's fields
- QueryEditorState: draft query and search key
- QueryStore: ordered, persisted saved queries
- QueryBuilderBridge: structured builder output into the draft
- SavedQueryController: save / apply / edit / delete orchestration
"""

from .schema import ClassSchema, SchemaProvider, YamlSchemaProvider
from .search_key_selector import SearchKeySelector
from .query_editor_state import QueryEditorState
from .query_store import QueryStore
from .query_builder_bridge import QueryBuilderBridge
from .saved_query_controller import SavedQueryController, SessionState

__all__ = [
    "ClassSchema",
    "SchemaProvider",
    "YamlSchemaProvider",
    "SearchKeySelector",
    "QueryEditorState",
    "QueryStore",
    "QueryBuilderBridge",
    "SavedQueryController",
    "SessionState",
]

"""
QueryForge - Saved query editor core
Query drafting, search key selection and saved queries, independent of any view.
"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("query-forge")
except PackageNotFoundError:
    # Package not installed
    __version__ = "0.3.1"

from .core import (
    SavedQueryController,
    SessionState,
    QueryStore,
    QueryEditorState,
    SearchKeySelector,
    QueryBuilderBridge,
)
from .errors import QueryForgeError, StorageError, SchemaError

__all__ = [
    "SavedQueryController",
    "SessionState",
    "QueryStore",
    "QueryEditorState",
    "SearchKeySelector",
    "QueryBuilderBridge",
    "QueryForgeError",
    "StorageError",
    "SchemaError",
    "__version__",
]

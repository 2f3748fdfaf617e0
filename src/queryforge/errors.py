"""
Error types raised by QueryForge.
"""


class QueryForgeError(Exception):
    """Base class for all QueryForge errors."""


class StorageError(QueryForgeError):
    """Saved query persistence failed (read, write or delete)."""


class SchemaError(QueryForgeError):
    """A class schema could not be loaded or does not exist."""

"""
Centralized constants for QueryForge.

Import from here instead of hardcoding values.
"""

# ===========================================================================
# Search key
# ===========================================================================
OBJECT_ID = "objectId"          # Sentinel search key: no explicit key selected

# ===========================================================================
# Configuration storage
# ===========================================================================
CONFIG_DIR_ENV = "QUERYFORGE_CONFIG_DIR"
CONFIG_DIR_NAME = "_AppConfig"
CONFIG_DB_NAME = "configuration.db"
SCHEMA_FILE_NAME = "schema.yaml"
DEFAULT_LANGUAGE = "en"

# ===========================================================================
# Query help (operator, description)
# ===========================================================================
QUERY_HELP = [
    ("$lt", "Less Than"),
    ("$lte", "Less Than Or Equal To"),
    ("$gt", "Greater Than"),
    ("$gte", "Greater Than Or Equal To"),
    ("$ne", "Not Equal To"),
    ("$in", "Contained In"),
    ("$inQuery", "Contained in query results"),
    ("$nin", "Not Contained in"),
    ("$exists", "A value is set for the key"),
    ("$select", "Match key value to query result"),
    ("$dontSelect", "Ignore keys with value equal to query result"),
    ("$all", "Contains all of the given values"),
    ("$regex", "Match regular expression"),
    ("order", "Specify a field to sort by"),
    ("limit", "Limit the number of objects returned by the query"),
    ("skip", "Use with limit to paginate through results"),
    ("keys", "Restrict the fields returned by the query"),
    ("include", "Use on Pointer columns to return the full object"),
    ("&", "Append constraints"),
]


def format_query_help(width: int = 12) -> str:
    """
    Render the query help table as plain text.

    Args:
        width: Column width for the operator column

    Returns:
        One "operator  description" line per entry
    """
    return "\n".join(f"{op:<{width}}{desc}" for op, desc in QUERY_HELP)

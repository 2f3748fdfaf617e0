"""
Draft query being edited on the query screen.
"""
from typing import Tuple

from ..constants import OBJECT_ID
from ..database.models import SavedQuery

# Replacement text that ends editing instead of being inserted
COMMIT_INPUT = "\n"


class QueryEditorState:
    """
    The current (draft_query, search_key) pair.

    The draft is an opaque constraint string: nothing here parses or
    validates it.
    """

    def __init__(self, draft_query: str = "", search_key: str = OBJECT_ID):
        self.draft_query = draft_query or ""
        self.search_key = search_key or OBJECT_ID

    def set_draft_query(self, text: str):
        self.draft_query = text

    def apply_builder_result(self, text: str):
        """Replace the draft with a structured builder's output; the search key is kept."""
        self.draft_query = text

    def load_for_edit(self, saved_query: SavedQuery):
        """Replace both the draft and the search key with a saved record's values."""
        self.draft_query = saved_query.constraint_text or ""
        self.search_key = saved_query.search_key or OBJECT_ID

    def set_search_key(self, search_key: str):
        self.search_key = search_key or OBJECT_ID

    @staticmethod
    def accept_input(replacement: str) -> bool:
        """
        Input-boundary policy for a single-line style text widget.

        A lone newline commits the edit (the widget should drop focus) and is
        not inserted; any other replacement text is accepted.
        """
        return replacement != COMMIT_INPUT

    def snapshot(self) -> Tuple[str, str]:
        return self.draft_query, self.search_key

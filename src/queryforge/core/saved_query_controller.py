"""
Saved Query Controller - Orchestrates one query editing session.

A session starts with an initial (query, search key) pair and ends exactly
once, by:
- apply(): emit the draft
- select_saved(): emit a saved query, ignoring the draft
- cancel(): emit nothing

While editing, the user may toggle the search key, edit the draft directly
or through a structured builder, save the draft, load a saved query back
into the draft, or delete a saved query.
"""

from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple

from PySide6.QtCore import QObject, Signal

from ..config.i18n import t
from ..constants import OBJECT_ID
from ..database.models import SavedQuery
from ..errors import StorageError
from .query_builder_bridge import QueryBuilder, QueryBuilderBridge
from .query_editor_state import QueryEditorState
from .query_store import QueryStore
from .schema import ClassSchema
from .search_key_selector import SearchKeySelector

import logging
logger = logging.getLogger(__name__)


class SessionState(Enum):
    EDITING = "editing"
    APPLIED = "applied"
    CANCELLED = "cancelled"


class SavedQueryController(QObject):
    """
    Query screen logic without the screen.

    Usage:
        controller = SavedQueryController.from_schema(store, schema, query, search_key)
        controller.set_consumer(lambda query, key: reload_objects(query, key))

        controller.toggle_search_key("score")
        controller.set_draft_query('{"score": {"$gt": 10}}')
        controller.save()
        controller.apply()   # consumer called once, session over
    """

    # Signals
    query_changed = Signal(str, str)        # Final (query, search_key), once per session
    draft_changed = Signal(str, str)        # Draft (query, search_key) after any edit
    saved_queries_changed = Signal()        # Saved query list changed
    status_message = Signal(str, bool)      # Transient message, is_error

    def __init__(self, store: QueryStore, fields: Sequence[str] = (),
                 query: str = "", search_key: str = OBJECT_ID,
                 schema: Optional[ClassSchema] = None,
                 parent: Optional[QObject] = None):
        """
        Args:
            store: Saved queries
            fields: Field names of the class being queried
            query: Initial draft query
            search_key: Initial search key
            schema: Class schema, passed to the structured builder
            parent: Qt parent object
        """
        super().__init__(parent)
        self._store = store
        self._schema = schema
        self._editor = QueryEditorState(query, search_key)
        self._selector = SearchKeySelector(fields, search_key)
        self._bridge = QueryBuilderBridge(
            self._editor,
            fields=self._selector.fields,
            schema=schema,
            on_applied=self._on_builder_applied,
            accepting=lambda: self.is_editing,
        )
        self._state = SessionState.EDITING
        self._consumer: Optional[Callable[[str, str], None]] = None

    @classmethod
    def from_schema(cls, store: QueryStore, schema: ClassSchema,
                    query: str = "", search_key: str = OBJECT_ID,
                    parent: Optional[QObject] = None) -> "SavedQueryController":
        return cls(store, schema.field_names, query, search_key, schema=schema, parent=parent)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_editing(self) -> bool:
        return self._state is SessionState.EDITING

    @property
    def draft_query(self) -> str:
        return self._editor.draft_query

    @property
    def search_key(self) -> str:
        return self._editor.search_key

    @property
    def fields(self) -> Tuple[str, ...]:
        return self._selector.fields

    @property
    def saved_queries(self) -> List[SavedQuery]:
        return self._store.list_queries()

    def checked_fields(self) -> List[bool]:
        """Checkmark flags for the field list, in field order."""
        return self._selector.checked_fields()

    def describe(self, saved_query: SavedQuery) -> Tuple[str, str]:
        """Title and subtitle of a saved query row."""
        query, key = saved_query.as_pair()
        return query, t("queries.search_key_label", key=key or OBJECT_ID)

    @staticmethod
    def section_titles() -> Tuple[str, str, str]:
        """Headers of the search key, saved queries and current query sections."""
        return (
            t("queries.section_search_key"),
            t("queries.section_saved_queries"),
            t("queries.section_current_query"),
        )

    @staticmethod
    def builder_row() -> Tuple[str, str]:
        """Title and subtitle of the row that opens the structured builder."""
        return t("queries.builder_title"), t("queries.builder_subtitle")

    def set_consumer(self, callback: Callable[[str, str], None]):
        """
        Register the function receiving the final (query, search_key).

        Replaces any previously registered consumer.
        """
        if self._consumer is not None:
            self.query_changed.disconnect(self._consumer)
        self._consumer = callback
        self.query_changed.connect(callback)

    def _check_editing(self, action: str) -> bool:
        if self.is_editing:
            return True
        logger.warning(f"Ignoring '{action}': session already {self._state.value}")
        return False

    def _notify_draft(self):
        self.draft_changed.emit(self._editor.draft_query, self._editor.search_key)

    # ------------------------------------------------------------------
    # Draft editing
    # ------------------------------------------------------------------

    def set_draft_query(self, text: str):
        if not self._check_editing("set_draft_query"):
            return
        self._editor.set_draft_query(text)
        self._notify_draft()

    def accept_input(self, replacement: str) -> bool:
        """Whether a text widget should insert the replacement text."""
        return self._editor.accept_input(replacement)

    def toggle_search_key(self, field: str) -> str:
        """
        Toggle a field as the search key.

        Returns:
            The search key after the toggle
        """
        if not self._check_editing("toggle_search_key"):
            return self._editor.search_key
        key = self._selector.toggle(field)
        self._editor.set_search_key(key)
        self._notify_draft()
        return key

    def open_builder(self, builder: QueryBuilder):
        """Run a structured builder; its result replaces the draft text."""
        if not self._check_editing("open_builder"):
            return
        self._bridge.open(builder)

    def _on_builder_applied(self, query: str):
        logger.debug(f"Query builder produced: {query!r}")
        self._notify_draft()

    # ------------------------------------------------------------------
    # Saved queries
    # ------------------------------------------------------------------

    def refresh(self) -> bool:
        """
        Reload saved queries from storage.

        Returns:
            False if storage could not be read (a status message is emitted)
        """
        try:
            self._store.reload()
        except StorageError as e:
            self.status_message.emit(t("queries.load_failed", error=str(e)), True)
            return False
        self.saved_queries_changed.emit()
        return True

    def save(self) -> Optional[SavedQuery]:
        """
        Save the current draft and search key as a new saved query.

        Returns:
            The new record, or None if saving failed or the session is closed
        """
        if not self._check_editing("save"):
            return None

        query, search_key = self._editor.snapshot()
        try:
            record = self._store.add(query, search_key)
        except StorageError as e:
            self.status_message.emit(t("queries.save_failed", error=str(e)), True)
            return None

        self.saved_queries_changed.emit()
        self.status_message.emit(t("queries.query_added"), False)
        return record

    def edit_saved(self, saved_query: SavedQuery):
        """
        Load a saved query into the draft.

        The saved record itself is left as it is; saving again creates a
        new record.
        """
        if not self._check_editing("edit_saved"):
            return
        self._editor.load_for_edit(saved_query)
        self._selector.select(self._editor.search_key)
        self._notify_draft()

    def delete_saved(self, saved_query: SavedQuery) -> bool:
        """
        Delete a saved query.

        Returns:
            True if the record was deleted
        """
        if not self._check_editing("delete_saved"):
            return False

        try:
            self._store.delete(saved_query)
        except StorageError as e:
            self.status_message.emit(t("queries.delete_failed", error=str(e)), True)
            return False

        self.saved_queries_changed.emit()
        self.status_message.emit(t("queries.query_deleted"), False)
        return True

    # ------------------------------------------------------------------
    # Terminal actions
    # ------------------------------------------------------------------

    def apply(self):
        """End the session, emitting the current draft and search key."""
        if not self._check_editing("apply"):
            return
        query, search_key = self._editor.snapshot()
        self._finish(query, search_key)

    def select_saved(self, saved_query: SavedQuery):
        """End the session, emitting a saved query instead of the draft."""
        if not self._check_editing("select_saved"):
            return
        query, search_key = saved_query.as_pair()
        self._finish(query, search_key or OBJECT_ID)

    def cancel(self):
        """End the session without emitting anything."""
        if not self._check_editing("cancel"):
            return
        self._state = SessionState.CANCELLED
        logger.debug("Query session cancelled")

    def _finish(self, query: str, search_key: str):
        # State changes first so a consumer calling back into the controller is ignored
        self._state = SessionState.APPLIED
        logger.info(f"Applying query {query!r} (search key: {search_key})")
        self.query_changed.emit(query, search_key)

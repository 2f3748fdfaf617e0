"""
Hand-off between an external structured query builder and the draft query.
"""
import logging
from typing import Callable, Optional, Sequence

from .query_editor_state import QueryEditorState
from .schema import ClassSchema

logger = logging.getLogger(__name__)

# builder(field_names, schema, on_result) -> None
QueryBuilder = Callable[[Sequence[str], Optional[ClassSchema], Callable[[str], None]], None]


class QueryBuilderBridge:
    """
    Opens a structured builder and copies its finished query into the draft.

    The builder's output is taken verbatim.
    """

    def __init__(self, editor: QueryEditorState, fields: Sequence[str] = (),
                 schema: Optional[ClassSchema] = None,
                 on_applied: Optional[Callable[[str], None]] = None,
                 accepting: Optional[Callable[[], bool]] = None):
        """
        Args:
            editor: Draft query receiving the builder output
            fields: Field names offered to the builder
            schema: Schema of the class being queried, passed through to the builder
            on_applied: Called with the new draft after each builder result
            accepting: Returns False once results must be dropped (session closed)
        """
        self._editor = editor
        self._fields = tuple(fields)
        self._schema = schema
        self._on_applied = on_applied
        self._accepting = accepting

    def open(self, builder: QueryBuilder):
        """Invoke the builder; it calls receive() when the user is done."""
        logger.debug(f"Opening query builder with {len(self._fields)} fields")
        builder(list(self._fields), self._schema, self.receive)

    def receive(self, query: str):
        """Accept a finished query from the builder."""
        if self._accepting is not None and not self._accepting():
            logger.warning("Dropping query builder result: editing session is closed")
            return
        self._editor.apply_builder_result(query)
        if self._on_applied is not None:
            self._on_applied(query)

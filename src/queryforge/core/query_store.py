"""
Query Store - Ordered, persisted collection of saved queries.
"""
import logging
from typing import Iterator, List

from ..constants import OBJECT_ID
from ..database.models import SavedQuery
from ..errors import StorageError

logger = logging.getLogger(__name__)


class QueryStore:
    """
    In-memory, insertion-ordered view of the saved queries, kept in step
    with a persistence backend.

    The backend must provide fetch_all(), insert(record), delete(record),
    commit() and rollback(), raising StorageError on failure
    (SavedQueryRepository does). The in-memory list only changes after the
    backend has committed, so a failed write leaves it untouched.

    Usage:
        store = QueryStore(config_db.saved_queries)
        record = store.add("score>10", "username")
        store.delete(record)
    """

    def __init__(self, backend, autoload: bool = True):
        """
        Args:
            backend: Persistence backend (e.g. SavedQueryRepository)
            autoload: Read existing records immediately

        Raises:
            StorageError: If autoload is set and the records cannot be read
        """
        self._backend = backend
        self._queries: List[SavedQuery] = []
        if autoload:
            self.reload()

    def reload(self):
        """Re-read all records from the backend."""
        self._queries = list(self._backend.fetch_all())
        logger.debug(f"Loaded {len(self._queries)} saved queries")

    def list_queries(self) -> List[SavedQuery]:
        """Saved queries in insertion order (a copy)."""
        return list(self._queries)

    def __len__(self) -> int:
        return len(self._queries)

    def __iter__(self) -> Iterator[SavedQuery]:
        return iter(list(self._queries))

    def __getitem__(self, index: int) -> SavedQuery:
        return self._queries[index]

    def _next_position(self) -> int:
        return max((q.position for q in self._queries), default=0) + 1

    def add(self, constraint: str, search_key: str = OBJECT_ID) -> SavedQuery:
        """
        Persist a new saved query and append it to the list.

        Args:
            constraint: Constraint string, stored verbatim
            search_key: Search key; empty means OBJECT_ID

        Returns:
            The new record, with its assigned id

        Raises:
            StorageError: If the record could not be persisted
        """
        record = SavedQuery.new(constraint, search_key)
        record.position = self._next_position()

        try:
            self._backend.insert(record)
            self._backend.commit()
        except StorageError:
            self._backend.rollback()
            raise

        self._queries.append(record)
        logger.info(f"Saved query {record.id}: {record.constraint_text!r} (search key: {record.search_key})")
        return record

    def delete(self, saved_query: SavedQuery):
        """
        Delete a saved query from the backend, then from the list.

        Raises:
            StorageError: If the record could not be removed
        """
        try:
            self._backend.delete(saved_query)
            self._backend.commit()
        except StorageError:
            self._backend.rollback()
            raise

        self._queries = [q for q in self._queries if q.id != saved_query.id]
        logger.info(f"Deleted saved query {saved_query.id}")

    def find(self, query_id: str) -> SavedQuery:
        """
        Look up a record by id or unique id prefix.

        Raises:
            KeyError: If no record, or more than one, matches
        """
        matches = [q for q in self._queries if q.id == query_id]
        if not matches:
            matches = [q for q in self._queries if q.id.startswith(query_id)]
        if len(matches) != 1:
            raise KeyError(query_id)
        return matches[0]

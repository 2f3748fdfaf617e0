"""
Unit tests for QueryStore.
"""
from unittest.mock import Mock

import pytest

from queryforge.constants import OBJECT_ID
from queryforge.core import QueryStore
from queryforge.database.models import SavedQuery
from queryforge.database.repositories import SavedQueryRepository
from queryforge.errors import StorageError


class BrokenDeleteRepository(SavedQueryRepository):
    """Repository whose DELETE targets a missing table."""

    def delete(self, model):
        self._pending.append(("DELETE FROM missing_table WHERE id = ?", (model.id,)))


class TestQueryStore:

    def test_add_then_delete_scenario(self, store):
        record = store.add("age>5", OBJECT_ID)
        assert [(q.constraint_text, q.search_key) for q in store.list_queries()] == [("age>5", "objectId")]

        store.delete(record)
        assert store.list_queries() == []

    def test_add_appends_at_end(self, store):
        store.add("a=1", "name")
        store.add("b=2", "score")
        record = store.add("c=3")

        queries = store.list_queries()
        assert queries[-1] is record
        assert (record.constraint_text, record.search_key) == ("c=3", OBJECT_ID)
        assert len(store) == 3

    def test_add_assigns_unique_ids(self, store):
        first = store.add("a=1")
        second = store.add("a=1")
        assert first.id and second.id and first.id != second.id

    def test_empty_search_key_defaults_to_sentinel(self, store):
        assert store.add("a=1", "").search_key == OBJECT_ID

    def test_delete_removes_only_that_record(self, store):
        a = store.add("a=1")
        b = store.add("b=2")
        c = store.add("c=3")

        store.delete(b)
        assert [q.id for q in store] == [a.id, c.id]

    def test_order_survives_reload(self, config_db, store):
        for constraint in ["z", "a", "m"]:
            store.add(constraint)
        store.delete(store[1])
        store.add("last")

        reloaded = QueryStore(config_db.saved_queries)
        assert [q.constraint_text for q in reloaded] == ["z", "m", "last"]
        assert [q.id for q in reloaded] == [q.id for q in store]

    def test_insert_failure_leaves_list_unchanged(self, config_db):
        store = QueryStore(config_db.saved_queries)
        existing = store.add("a=1")

        backend = Mock(wraps=config_db.saved_queries)
        backend.commit.side_effect = StorageError("disk full")
        failing = QueryStore(backend)

        with pytest.raises(StorageError):
            failing.add("b=2")

        backend.rollback.assert_called_once()
        assert [q.id for q in failing] == [existing.id]
        assert config_db.saved_queries.count() == 1

    def test_delete_failure_leaves_list_unchanged(self, config_db):
        store = QueryStore(BrokenDeleteRepository(config_db.connection))
        record = store.add("a=1")

        with pytest.raises(StorageError):
            store.delete(record)
        assert store.list_queries() == [record]

    def test_list_is_a_copy(self, store):
        store.add("a=1")
        store.list_queries().clear()
        assert len(store) == 1

    def test_autoload_false(self, config_db):
        QueryStore(config_db.saved_queries).add("a=1")
        store = QueryStore(config_db.saved_queries, autoload=False)
        assert len(store) == 0
        store.reload()
        assert len(store) == 1

    def test_find_by_prefix(self, store):
        record = store.add("a=1")
        assert store.find(record.id) is record
        assert store.find(record.id[:8]) is record
        with pytest.raises(KeyError):
            store.find("no-such-id")

    def test_works_with_any_backend(self):
        backend = Mock()
        backend.fetch_all.return_value = [SavedQuery(id="x", constraint_text="a=1", position=4)]
        store = QueryStore(backend)

        record = store.add("b=2")

        backend.insert.assert_called_once_with(record)
        backend.commit.assert_called_once()
        assert record.position == 5

    def test_record_pair(self, store):
        record = store.add("c=3", "score")
        assert record.as_pair() == ("c=3", "score")

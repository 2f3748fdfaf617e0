"""
Unit tests for QueryEditorState and QueryBuilderBridge.
"""
from unittest.mock import Mock

from queryforge.constants import OBJECT_ID
from queryforge.core import QueryEditorState, QueryBuilderBridge, ClassSchema
from queryforge.database.models import SavedQuery


class TestQueryEditorState:

    def test_defaults(self):
        editor = QueryEditorState()
        assert editor.snapshot() == ("", OBJECT_ID)

    def test_set_draft_query_is_verbatim(self):
        editor = QueryEditorState("old", "name")
        editor.set_draft_query('  {"score": {"$gt": 10}} & not valid  ')
        assert editor.snapshot() == ('  {"score": {"$gt": 10}} & not valid  ', "name")

    def test_apply_builder_result_keeps_search_key(self):
        editor = QueryEditorState("old", "score")
        editor.apply_builder_result("score>10")
        assert editor.snapshot() == ("score>10", "score")

    def test_load_for_edit_replaces_both(self):
        editor = QueryEditorState("draft", "name")
        editor.load_for_edit(SavedQuery.new("age>5", "score"))
        assert editor.snapshot() == ("age>5", "score")

    def test_load_for_edit_without_search_key(self):
        editor = QueryEditorState("draft", "name")
        record = SavedQuery.new("age>5")
        record.search_key = None
        editor.load_for_edit(record)
        assert editor.snapshot() == ("age>5", OBJECT_ID)

    def test_newline_commits_instead_of_inserting(self):
        assert QueryEditorState.accept_input("\n") is False
        assert QueryEditorState.accept_input("a") is True
        assert QueryEditorState.accept_input("") is True
        assert QueryEditorState.accept_input("a\nb") is True


class TestQueryBuilderBridge:

    def test_open_passes_fields_and_schema(self):
        schema = ClassSchema("GameScore", {"name": "String", "score": "Number"})
        editor = QueryEditorState("", "name")
        bridge = QueryBuilderBridge(editor, schema.field_names, schema)
        builder = Mock()

        bridge.open(builder)

        fields, passed_schema, on_result = builder.call_args.args
        assert fields == ["name", "score"]
        assert passed_schema is schema
        on_result("score>10")
        assert editor.snapshot() == ("score>10", "name")

    def test_receive_notifies(self):
        on_applied = Mock()
        editor = QueryEditorState()
        bridge = QueryBuilderBridge(editor, on_applied=on_applied)

        bridge.receive("a=1")
        on_applied.assert_called_once_with("a=1")

    def test_receive_dropped_when_not_accepting(self):
        on_applied = Mock()
        editor = QueryEditorState("kept")
        bridge = QueryBuilderBridge(editor, on_applied=on_applied, accepting=lambda: False)

        bridge.receive("a=1")
        assert editor.draft_query == "kept"
        on_applied.assert_not_called()

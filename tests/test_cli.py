"""
Tests for the queryforge command line.
"""
import pytest

from queryforge.main import main


@pytest.fixture
def run(tmp_path, capsys):
    def _run(*args):
        code = main(["--config-dir", str(tmp_path), *args])
        return code, capsys.readouterr()
    return _run


class TestCli:

    def test_list_empty(self, run):
        code, out = run("list")
        assert code == 0
        assert "No saved queries" in out.out

    def test_add_list_delete(self, run):
        code, out = run("add", "age>5", "--search-key", "score")
        assert code == 0
        query_id = out.out.strip().rsplit(" ", 1)[-1]

        code, out = run("list")
        assert "age>5" in out.out
        assert "Search Key: score" in out.out

        code, out = run("delete", query_id[:8])
        assert code == 0
        assert "Query Deleted" in out.out

        code, out = run("list")
        assert "age>5" not in out.out

    def test_delete_unknown(self, run):
        code, out = run("delete", "nope")
        assert code == 1

    def test_language_preference_persists(self, run):
        run("--lang", "fr", "list")
        code, out = run("list")
        assert "Aucune requête enregistrée" in out.out

    def test_fields(self, run, schema_file):
        code, out = run("fields", "GameScore", "--search-key", "score")
        assert code == 0
        assert "[x] score" in out.out
        assert "[ ] objectId" in out.out

    def test_fields_missing_schema(self, run):
        code, out = run("fields", "GameScore")
        assert code == 1
        assert "Error" in out.err

    def test_help(self, run):
        code, out = run("help")
        assert code == 0
        assert "$regex" in out.out

    def test_fields_wrongly_shaped_schema(self, run, tmp_path):
        (tmp_path / "schema.yaml").write_text("classes: [GameScore]\n", encoding="utf-8")
        code, out = run("fields", "GameScore")
        assert code == 1
        assert "Error" in out.err

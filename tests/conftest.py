"""
Pytest configuration and fixtures for QueryForge tests.
"""
import pytest

from queryforge.config.i18n import i18n_manager
from queryforge.core import QueryStore
from queryforge.database import ConfigDatabase


SCHEMA_YAML = """
classes:
  GameScore:
    fields:
      objectId: String
      name: String
      score: Number
      createdAt: Date
  Empty:
    fields: {}
"""


@pytest.fixture
def temp_db_path(tmp_path):
    """Path of a not-yet-created configuration database."""
    yield tmp_path / "test_config.db"


@pytest.fixture
def config_db(temp_db_path):
    """Initialized configuration database, closed after the test."""
    db = ConfigDatabase(temp_db_path)
    yield db
    db.close()


@pytest.fixture
def store(config_db):
    """Empty QueryStore backed by SQLite."""
    return QueryStore(config_db.saved_queries)


@pytest.fixture
def schema_file(tmp_path):
    path = tmp_path / "schema.yaml"
    path.write_text(SCHEMA_YAML, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def english_messages():
    """Every test starts and ends with English messages."""
    i18n_manager.set_language("en")
    yield
    i18n_manager.set_language("en")

"""
Unit tests for settings resolution and translations.
"""
from queryforge.config import AppSettings, get_settings, reset_settings
from queryforge.config.i18n import i18n_manager, t
from queryforge.constants import CONFIG_DIR_ENV, QUERY_HELP, format_query_help


class TestAppSettings:

    def test_explicit_dir(self, tmp_path):
        settings = AppSettings.load(tmp_path / "cfg")
        assert settings.config_dir == tmp_path / "cfg"
        assert settings.config_dir.is_dir()
        assert settings.db_path == tmp_path / "cfg" / "configuration.db"
        assert settings.schema_path == tmp_path / "cfg" / "schema.yaml"

    def test_environment_dir(self, tmp_path, monkeypatch):
        monkeypatch.setenv(CONFIG_DIR_ENV, str(tmp_path / "env"))
        reset_settings()
        try:
            assert get_settings().config_dir == tmp_path / "env"
            assert get_settings() is get_settings()
        finally:
            reset_settings()

    def test_apply_preferences(self, tmp_path, config_db):
        settings = AppSettings.load(tmp_path)
        assert settings.apply_preferences(config_db.preferences).language == "en"

        config_db.preferences.set("language", "fr")
        assert settings.apply_preferences(config_db.preferences).language == "fr"


class TestTranslations:

    def test_english(self):
        assert t("queries.query_added") == "Query Added"
        assert t("queries.search_key_label", key="score") == "Search Key: score"

    def test_french(self):
        i18n_manager.set_language("fr")
        assert t("queries.query_deleted") == "Requête supprimée"

    def test_unknown_language_ignored(self):
        i18n_manager.set_language("xx")
        assert i18n_manager.get_current_language() == "en"

    def test_unknown_key_falls_back_to_key(self):
        assert t("queries.no_such_message") == "queries.no_such_message"

    def test_available_languages(self):
        assert i18n_manager.get_available_languages() == {"en": "English", "fr": "Français"}

    def test_observer_notified(self):
        calls = []
        observer = lambda: calls.append(i18n_manager.get_current_language())  # noqa: E731
        i18n_manager.register_observer(observer)
        try:
            i18n_manager.set_language("fr")
        finally:
            i18n_manager.unregister_observer(observer)
        assert calls == ["fr"]


class TestQueryHelp:

    def test_operators_in_order(self):
        operators = [op for op, _ in QUERY_HELP]
        assert operators[:4] == ["$lt", "$lte", "$gt", "$gte"]
        assert operators[-1] == "&"
        assert "$regex" in operators and "include" in operators

    def test_format(self):
        lines = format_query_help().splitlines()
        assert len(lines) == len(QUERY_HELP)
        assert lines[0].startswith("$lt") and lines[0].endswith("Less Than")

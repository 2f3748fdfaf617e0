"""
I18nManager - Translation registry for user-visible messages.

Catalogs are JSON files named {lang}.json. Keys may be namespaced
("queries.query_added") or plain ("ok").
"""

import json
import logging
from pathlib import Path
from typing import Dict, Optional, Set, Callable, List

logger = logging.getLogger(__name__)


class I18nManager:
    """
    Translation registry with an English fallback.

    Usage:
        from queryforge.config.i18n import t, i18n_manager
        i18n_manager.set_language("fr")
        message = t("queries.search_key_label", key="objectId")
    """

    _instance: Optional['I18nManager'] = None

    def __init__(self):
        self._current_language = 'en'
        self._observers: List[Callable] = []

        # {module_name: {lang_code: {key: value}}}
        self._modules: Dict[str, Dict[str, Dict[str, str]]] = {}
        self._available_languages: Set[str] = {'en'}
        self._language_names: Dict[str, str] = {'en': 'English'}

    @classmethod
    def get_instance(cls) -> 'I18nManager':
        """Get singleton instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def register_module(self, module_name: str, translations_path: Path) -> bool:
        """
        Register a module's translations.

        Args:
            module_name: Namespace for the keys (e.g. "queries")
            translations_path: Directory containing {lang}.json files

        Returns:
            True if the directory existed
        """
        if not translations_path.exists():
            logger.warning(f"Translations path does not exist: {translations_path}")
            return False

        self._modules.setdefault(module_name, {})

        for lang_file in translations_path.glob("*.json"):
            lang_code = lang_file.stem
            try:
                with open(lang_file, 'r', encoding='utf-8') as f:
                    translations = json.load(f)
            except (json.JSONDecodeError, OSError) as e:
                logger.error(f"Failed to load {lang_file}: {e}")
                continue

            if isinstance(translations, dict):
                self._modules[module_name][lang_code] = translations
                self._available_languages.add(lang_code)
                if 'lang_name' in translations:
                    self._language_names[lang_code] = translations['lang_name']
                logger.debug(f"Loaded {lang_code} translations for '{module_name}' ({len(translations)} keys)")

        return True

    def t(self, key: str, /, **kwargs) -> str:
        """
        Translate a key.

        Fallback chain: module[lang] -> module[en] -> key.

        Args:
            key: Translation key, namespaced as "module.key"
            **kwargs: Format parameters

        Returns:
            Translated string, or the key itself if unknown
        """
        text = None

        if '.' in key:
            module_name, sub_key = key.split('.', 1)
            module_trans = self._modules.get(module_name, {})
            text = module_trans.get(self._current_language, {}).get(sub_key)
            if text is None:
                text = module_trans.get('en', {}).get(sub_key)

        if text is None:
            text = key

        if kwargs:
            try:
                text = text.format(**kwargs)
            except (KeyError, ValueError) as e:
                logger.warning(f"Error formatting translation '{key}': {e}")

        return text

    def get_current_language(self) -> str:
        return self._current_language

    def set_language(self, lang_code: str):
        """
        Set the current language; unknown codes are ignored with a warning.
        """
        if lang_code not in self._available_languages:
            logger.warning(f"Language '{lang_code}' not available, keeping '{self._current_language}'")
            return

        if lang_code != self._current_language:
            self._current_language = lang_code
            logger.info(f"Language changed to: {lang_code}")
            self._notify_observers()

    def get_available_languages(self) -> Dict[str, str]:
        """Map of lang_code to display name."""
        return {
            code: self._language_names.get(code, code.upper())
            for code in sorted(self._available_languages)
        }

    def register_observer(self, callback: Callable):
        if callback not in self._observers:
            self._observers.append(callback)

    def unregister_observer(self, callback: Callable):
        if callback in self._observers:
            self._observers.remove(callback)

    def _notify_observers(self):
        for callback in self._observers:
            callback()


_manager: Optional[I18nManager] = None


def get_manager() -> I18nManager:
    """Get the global I18nManager instance."""
    global _manager
    if _manager is None:
        _manager = I18nManager.get_instance()
    return _manager


def t(key: str, /, **kwargs) -> str:
    """Translate a key (convenience function)."""
    return get_manager().t(key, **kwargs)

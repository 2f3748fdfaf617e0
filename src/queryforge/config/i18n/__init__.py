"""
Translations for user-visible messages.

    from queryforge.config.i18n import t
    t("queries.query_added")
"""

from .manager import I18nManager, get_manager, t

i18n_manager = get_manager()

from . import core  # noqa: F401, E402

__all__ = ["I18nManager", "get_manager", "t", "i18n_manager"]

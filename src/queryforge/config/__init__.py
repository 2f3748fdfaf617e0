"""
Configuration: settings resolution and translations.
"""

from .settings import AppSettings, get_settings, reset_settings

__all__ = ["AppSettings", "get_settings", "reset_settings"]

"""
Application settings - where the configuration database and schema file live.

Resolution order for the configuration directory:
1. Explicit argument
2. QUERYFORGE_CONFIG_DIR environment variable
3. <project root>/_AppConfig
"""
import os
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..constants import (
    CONFIG_DIR_ENV,
    CONFIG_DIR_NAME,
    CONFIG_DB_NAME,
    SCHEMA_FILE_NAME,
    DEFAULT_LANGUAGE,
)

logger = logging.getLogger(__name__)

# src/queryforge/config/settings.py -> 4 levels up to reach project root
_PROJECT_ROOT = Path(__file__).parent.parent.parent.parent


@dataclass
class AppSettings:
    """Resolved paths and defaults for one process."""
    config_dir: Path
    language: str = DEFAULT_LANGUAGE

    @property
    def db_path(self) -> Path:
        return self.config_dir / CONFIG_DB_NAME

    @property
    def schema_path(self) -> Path:
        return self.config_dir / SCHEMA_FILE_NAME

    @classmethod
    def load(cls, config_dir: Optional[Path] = None) -> "AppSettings":
        """
        Resolve settings from arguments and environment.

        Args:
            config_dir: Overrides the environment and the default location

        Returns:
            AppSettings with config_dir created on disk
        """
        if config_dir is None:
            env_dir = os.environ.get(CONFIG_DIR_ENV)
            config_dir = Path(env_dir) if env_dir else _PROJECT_ROOT / CONFIG_DIR_NAME

        config_dir = Path(config_dir).expanduser()
        config_dir.mkdir(parents=True, exist_ok=True)
        logger.debug(f"Using configuration directory: {config_dir}")
        return cls(config_dir=config_dir)

    def apply_preferences(self, preferences) -> "AppSettings":
        """
        Overlay values stored in the user_preferences table.

        Args:
            preferences: UserPreferencesRepository
        """
        self.language = preferences.get("language", self.language)
        return self


_settings: Optional[AppSettings] = None


def get_settings() -> AppSettings:
    """Get the process-wide settings (resolved on first call)."""
    global _settings
    if _settings is None:
        _settings = AppSettings.load()
    return _settings


def reset_settings():
    """Forget the cached settings (useful for testing)."""
    global _settings
    _settings = None

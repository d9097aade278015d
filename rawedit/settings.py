"""User settings for rawedit.

Settings are stored as JSON in an OS-appropriate config directory and are
read once at startup. A missing or unreadable file means defaults.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

from .constants import EditorConstants

logger = logging.getLogger(__name__)

APP_NAME = "rawedit"
LOG_LEVEL_ENV = "RAWEDIT_LOG_LEVEL"

DEFAULTS: Dict[str, Any] = {
    "default_file": EditorConstants.DEFAULT_FILE,
    "keyword_color": EditorConstants.DEFAULT_KEYWORD_COLOR,
    "log_level": "WARNING",
    "log_file": None,
}

_COLORS = {
    "black", "red", "green", "yellow", "blue", "magenta", "cyan", "white",
}
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def validate_setting(key: str, value: Any) -> bool:
    """Validate a setting value.

    Args:
        key: Setting key name.
        value: Setting value to validate.

    Returns:
        True if setting is valid, False otherwise.
    """
    if key == "default_file":
        return isinstance(value, str) and bool(value)

    if key == "keyword_color":
        if not isinstance(value, str):
            return False
        # Accept plain and bright variants, plus bold_ prefixes blessed understands
        name = value.removeprefix("bold_").removeprefix("bright_")
        return name in _COLORS

    if key == "log_level":
        return isinstance(value, str) and value.upper() in _LOG_LEVELS

    if key == "log_file":
        return value is None or (isinstance(value, str) and bool(value))

    # Unknown settings are considered valid (forward compatibility)
    return True


class Settings:
    """Editor settings backed by a JSON file."""

    def __init__(self, config_dir: Optional[Path] = None):
        self._config_dir = Path(config_dir or platformdirs.user_config_dir(APP_NAME))
        self._settings_file = self._config_dir / "settings.json"
        self._values: Dict[str, Any] = dict(DEFAULTS)
        self.load()

    @property
    def path(self) -> Path:
        return self._settings_file

    def load(self) -> None:
        """(Re)load settings from disk, falling back to defaults."""
        self._values = dict(DEFAULTS)
        if not self._settings_file.exists():
            return

        try:
            with open(self._settings_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Could not load settings from {self._settings_file}: {e}")
            return

        if not isinstance(data, dict):
            logger.warning("Settings file has invalid format (not a dict), ignoring")
            return

        for key, value in data.items():
            if validate_setting(key, value):
                self._values[key] = value
            else:
                logger.warning(f"Invalid value for setting {key!r}: {value!r}, using default")

    @property
    def default_file(self) -> str:
        return self._values["default_file"]

    @property
    def keyword_color(self) -> str:
        return self._values["keyword_color"]

    @property
    def log_level(self) -> str:
        env = os.environ.get(LOG_LEVEL_ENV)
        if env and validate_setting("log_level", env):
            return env.upper()
        return self._values["log_level"].upper()

    @property
    def log_file(self) -> Path:
        configured = self._values.get("log_file")
        if configured:
            return Path(configured).expanduser()
        return Path(platformdirs.user_log_dir(APP_NAME)) / f"{APP_NAME}.log"


# Global instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance.

    Returns:
        The process-wide Settings, loaded on first use.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings

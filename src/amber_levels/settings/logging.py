"""
Console and file logging settings read by ``setup_logging``.
"""

import logging

from .types import SettingsGroup

logger = logging.getLogger(__name__)

LOG_FILE_PATH = "logs/amber_levels.csv"

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingSettings(SettingsGroup):
    """Logging switches and levels."""

    @property
    def console_logging(self) -> bool:
        return self._get_bool("logging/console_enabled", True)

    @console_logging.setter
    def console_logging(self, value: bool) -> None:
        self._store("logging/console_enabled", value)

    @property
    def console_log_level(self) -> str:
        """Minimum level shown on the console."""
        return self._get_str("logging/console_level", "INFO")

    @console_log_level.setter
    def console_log_level(self, value: str) -> None:
        """Set the console level; unknown level names are ignored."""
        level = value.upper()
        if level not in VALID_LOG_LEVELS:
            logger.warning(f"Invalid console log level: {value}, keeping {self.console_log_level}")
            return
        self._store("logging/console_level", level)

    @property
    def console_use_colors(self) -> bool:
        return self._get_bool("logging/console_use_colors", True)

    @console_use_colors.setter
    def console_use_colors(self, value: bool) -> None:
        self._store("logging/console_use_colors", value)

    @property
    def file_logging(self) -> bool:
        """Whether the rotating CSV log file is written."""
        return self._get_bool("logging/file_enabled", False)

    @file_logging.setter
    def file_logging(self, value: bool) -> None:
        self._store("logging/file_enabled", value)

    @property
    def log_file_path(self) -> str:
        """Log file location, relative to the working directory."""
        return LOG_FILE_PATH

"""
Core settings management for amber_levels.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from PySide6.QtCore import QSettings

from .logging import LoggingSettings
from .migration import VERSION_KEY, SettingsMigrator
from .paths import PathSettings
from .types import ConfigVersion, ValidationResult
from .validation import SettingsValidator

logger = logging.getLogger(__name__)

ORGANIZATION = "amber"
APPLICATION = "amber_levels"


class AppSettings:
    """Settings store split into subsystems.

    Level directories live under ``paths``, console and file logging under
    ``logging``. Each profile is a separate QSettings group, so profiles
    sharing one file never see each other's keys.
    """

    def __init__(self, profile: str = "default", settings_file: Optional[Union[str, Path]] = None):
        """Open the settings for a profile.

        Args:
            profile: Settings profile name
            settings_file: Optional INI file to use instead of the platform's
                native settings storage
        """
        if settings_file is not None:
            self.settings = QSettings(str(settings_file), QSettings.Format.IniFormat)
        else:
            self.settings = QSettings(ORGANIZATION, APPLICATION)
        self.profile = profile
        self.settings.beginGroup(profile)

        SettingsMigrator(self.settings).ensure_version()

        self.paths = PathSettings(self.settings)
        self.logging = LoggingSettings(self.settings)
        self._validator = SettingsValidator(self)

        logger.debug(f"Settings profile '{profile}' stored at: {self.settings.fileName()}")

    @property
    def version(self) -> str:
        """Configuration version stamped into the store."""
        value = self.settings.value(VERSION_KEY, ConfigVersion.CURRENT.value)
        return str(value)

    def validate(self) -> ValidationResult:
        return self._validator.validate()

    def sync(self) -> None:
        """Force synchronization of settings to storage."""
        self.settings.sync()

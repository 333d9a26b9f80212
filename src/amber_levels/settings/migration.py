"""
Settings version tracking for amber_levels.
"""

import logging
from typing import TYPE_CHECKING

from .types import ConfigVersion

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)

VERSION_KEY = "app/version"


class SettingsMigrator:
    """Stamps the configuration version into a settings store."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def ensure_version(self) -> None:
        """Stamp a fresh store, restamp one written by another version."""
        stored = str(self.settings.value(VERSION_KEY, "") or "")
        current = ConfigVersion.CURRENT.value

        if stored == current:
            return

        if stored:
            # Only one format exists so far; keys this version does not read stay in place
            logger.info(f"Restamping configuration version {stored} as {current}")
            self.settings.setValue("app/migrated_from", stored)
        else:
            logger.info(f"Initializing configuration version {current}")

        self.settings.setValue(VERSION_KEY, current)
        self.settings.sync()

"""
Configuration types shared by the settings subsystems.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, List

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings


class ConfigVersion(Enum):
    """Configuration version for migration support."""
    V1_0 = "1.0"
    CURRENT = V1_0


@dataclass
class ValidationResult:
    """Result of configuration validation."""
    is_valid: bool
    errors: List[str]
    warnings: List[str]


class SettingsGroup:
    """Base for a subsystem reading and writing keys of one QSettings store.

    INI files hand every value back as a string, so the typed getters accept
    both native and string forms.
    """

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _get_str(self, key: str, default: str = "") -> str:
        value = self.settings.value(key, default)
        return str(value) if value is not None else default

    def _get_bool(self, key: str, default: bool = False) -> bool:
        value = self.settings.value(key, default)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes")
        return bool(value) if value is not None else default

    def _store(self, key: str, value: Any) -> None:
        """Write one key and flush it to storage."""
        self.settings.setValue(key, value)
        self.settings.sync()

"""
Settings validation for amber_levels.
"""

from typing import List, TYPE_CHECKING

from .logging import VALID_LOG_LEVELS
from .types import ValidationResult

if TYPE_CHECKING:
    from .core import AppSettings


class SettingsValidator:
    """Checks that stored settings can be used to list levels and log."""

    def __init__(self, settings: "AppSettings"):
        self.settings = settings

    def validate(self) -> ValidationResult:
        """Validate current configuration.

        A missing levels directory is only a warning since the registry
        simply lists nothing from it. A levels path naming a file is an error.
        """
        errors: List[str] = []
        warnings: List[str] = []

        levels_path = self.settings.paths.levels_path
        if not levels_path.exists():
            warnings.append(f"Levels directory does not exist: {levels_path}")
        elif not levels_path.is_dir():
            errors.append(f"Levels path is not a directory: {levels_path}")

        level = self.settings.logging.console_log_level
        if level not in VALID_LOG_LEVELS:
            errors.append(f"Invalid console log level: {level}")

        return ValidationResult(is_valid=not errors, errors=errors, warnings=warnings)

"""
Settings package for amber_levels.

Configuration on top of Qt's QSettings for cross-platform storage.

Usage:
    from amber_levels.settings import AppSettings

    settings = AppSettings()
    settings.paths.levels_path = "my_levels"
    result = settings.validate()
"""

from .core import AppSettings
from .logging import LoggingSettings
from .paths import PathSettings
from .types import ConfigVersion, ValidationResult

__all__ = [
    "AppSettings",
    "ConfigVersion",
    "ValidationResult",
    "PathSettings",
    "LoggingSettings",
]

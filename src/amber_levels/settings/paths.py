"""
Where level files are listed from.
"""

from pathlib import Path
from typing import Optional, Union

from .types import SettingsGroup

# Relative to the working directory, like the game's own "levels" folder
DEFAULT_LEVELS_PATH = "levels"


class PathSettings(SettingsGroup):
    """Level directory settings used by ``LevelRegistry.from_settings``."""

    @property
    def levels_path(self) -> Path:
        """Directory of bundled level files."""
        return Path(self._get_str("paths/levels", DEFAULT_LEVELS_PATH) or DEFAULT_LEVELS_PATH)

    @levels_path.setter
    def levels_path(self, value: Optional[Union[str, Path]]) -> None:
        """Set the levels directory; None restores the default."""
        self._store("paths/levels", str(value) if value else DEFAULT_LEVELS_PATH)

    @property
    def include_user_levels(self) -> bool:
        """Whether the per-user level directory is listed after ``levels_path``."""
        return self._get_bool("paths/include_user_levels", True)

    @include_user_levels.setter
    def include_user_levels(self, value: bool) -> None:
        self._store("paths/include_user_levels", value)

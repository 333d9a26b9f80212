"""Registry of level files available for selection.

Scans level directories and keeps one lightweight entry per file. Only the
fast-path metadata is read during the scan; full levels are loaded on
request and never cached.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Iterable, Optional, Union

from PySide6.QtCore import QStandardPaths

from .loader import LevelLoader
from .models import LevelDefinition

if TYPE_CHECKING:
    from ..settings import AppSettings

USER_LEVELS_DIRNAME = "levels"


@dataclass
class LevelEntry:
    """One selectable level.

    Attributes:
        path: Level file
        name: Display name
        description: Display description, possibly empty
    """

    path: Path
    name: str
    description: str = ""

    def __repr__(self) -> str:
        return f"LevelEntry(name={self.name!r}, path={self.path})"


def format_filename(filename: str) -> str:
    """Turn a file name into a display name.

    Drops a ``.json`` suffix in any letter case, turns ``_`` and ``-`` into spaces and
    capitalizes each word: ``"cave_level-2.json"`` gives ``"Cave Level 2"``.
    """
    if filename.lower().endswith(".json"):
        filename = filename[:-5]
    words = filename.replace("_", " ").replace("-", " ").split(" ")
    return " ".join(word[0].upper() + word[1:].lower() for word in words if word)


class LevelRegistry:
    """Lists level files found in a set of directories.

    Entries keep directory order first, then file names sorted
    case-insensitively within each directory. A file reachable through two
    directories is listed once.
    """

    def __init__(self, directories: Iterable[Union[str, Path]], loader: Optional[LevelLoader] = None):
        """Initialize the registry and scan all directories.

        Args:
            directories: Directories to scan for ``*.json`` level files
            loader: Loader used for metadata and full loads
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

        self.directories = [Path(directory) for directory in directories]
        self._loader = loader or LevelLoader()
        self._entries: list[LevelEntry] = []

        self._scan_all()

    @classmethod
    def from_settings(cls, settings: "AppSettings") -> "LevelRegistry":
        """Build a registry over the configured level directories.

        Lists ``paths.levels_path`` first, then the per-user directory when
        ``paths.include_user_levels`` is set.
        """
        directories = [settings.paths.levels_path]
        if settings.paths.include_user_levels:
            directories.append(cls.user_levels_dir())
        return cls(directories)

    @staticmethod
    def user_levels_dir() -> Path:
        """Per-user level directory.

        - Windows: %APPDATA%/<app>/levels/
        - Linux: ~/.local/share/<app>/levels/
        - macOS: ~/Library/Application Support/<app>/levels/
        """
        app_data = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.AppDataLocation)
        return Path(app_data) / USER_LEVELS_DIRNAME

    def _scan_all(self) -> None:
        seen: set[Path] = set()
        for directory in self.directories:
            if not directory.is_dir():
                self.logger.debug(f"Level directory does not exist: {directory}")
                continue

            self.logger.info(f"Scanning levels from: {directory}")
            count = self._scan_directory(directory, seen)
            self.logger.info(f"Registered {count} level(s) from {directory}")

    def _scan_directory(self, directory: Path, seen: set[Path]) -> int:
        """Register every level file in one directory.

        Returns:
            Number of registered levels
        """
        count = 0
        files = sorted(directory.glob("*.json"), key=lambda p: p.name.lower())
        for path in files:
            resolved = path.resolve()
            if resolved in seen:
                self.logger.debug(f"Skipping {path}, already registered")
                continue
            seen.add(resolved)

            entry = self._make_entry(path)
            self._entries.append(entry)
            count += 1
            self.logger.debug(f"Found level: {entry}")

        return count

    def _make_entry(self, path: Path) -> LevelEntry:
        metadata = self._loader.load_metadata(path)
        if metadata is None or not metadata.name:
            return LevelEntry(path, format_filename(path.name), "")
        return LevelEntry(path, metadata.name, metadata.display_description)

    def entries(self) -> list[LevelEntry]:
        """Return all registered entries in display order."""
        return list(self._entries)

    def get_entry(self, path: Union[str, Path]) -> Optional[LevelEntry]:
        """Find the entry for a level file.

        Returns:
            LevelEntry if registered, None otherwise
        """
        resolved = Path(path).resolve()
        for entry in self._entries:
            if entry.path.resolve() == resolved:
                return entry
        return None

    def __len__(self) -> int:
        return len(self._entries)

    def load_level(self, path: Union[str, Path]) -> Optional[LevelDefinition]:
        """Fully load a registered level.

        Returns:
            Loaded level, or None if it could not be read or parsed

        Raises:
            KeyError: If the path is not registered
        """
        entry = self.get_entry(path)
        if entry is None:
            raise KeyError(f"Level '{path}' not found in registry")

        self.logger.info(f"Loading level '{entry.name}' from {entry.path}")
        return self._loader.load(entry.path)

    def reload(self) -> None:
        """Re-scan directories, e.g. after new level files were added."""
        self.logger.info("Reloading level registry")
        self._entries.clear()
        self._scan_all()

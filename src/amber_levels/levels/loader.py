"""Loading and saving level files.

``LevelLoader`` ties the pieces together: read the file, parse it into a
document, bind the document to a ``LevelDefinition``. Saving runs the
serializer and writes the result.

The public ``load``/``save`` surface never raises for bad input. Failures
are logged and reported as None or False, so a level browser can skip a
broken file and keep going. Use ``parse_text`` to get the exception.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from ..document.parser import parse_document
from ..errors import LevelError
from .binder import LevelBinder
from .metadata import LevelMetadata, read_metadata
from .models import LevelDefinition
from .presets import DEFAULT_PRESETS, PresetTables
from .serializer import LevelSerializer

PathLike = Union[str, Path]


class LevelLoader:
    """Loads and saves level definitions."""

    def __init__(self, presets: PresetTables = DEFAULT_PRESETS):
        """Initialize the loader.

        Args:
            presets: Preset tables handed to the binder
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self._binder = LevelBinder(presets)
        self._serializer = LevelSerializer()

    def load(self, path: PathLike) -> Optional[LevelDefinition]:
        """Load a level from a file.

        Args:
            path: Path to the level file

        Returns:
            New LevelDefinition, or None if the file could not be read or
            parsed
        """
        path = Path(path)
        text = self._read_text(path)
        if text is None:
            return None

        try:
            level = self.parse_text(text)
        except LevelError as e:
            self.logger.error(f"Failed to load level from {path}: {e}")
            return None

        self.logger.info(f"Loaded level '{level.name}' from {path}: {level.summary()}")
        return level

    def parse_text(self, text: str) -> LevelDefinition:
        """Parse and bind level text.

        Raises:
            DocumentSyntaxError: If the text is malformed
            LevelBindError: If the root is not an object
        """
        return self._binder.bind(parse_document(text))

    def load_text(self, text: str) -> Optional[LevelDefinition]:
        """Like ``parse_text`` but logs failures and returns None."""
        try:
            return self.parse_text(text)
        except LevelError as e:
            self.logger.error(f"Failed to parse level text: {e}")
            return None

    def to_text(self, level: LevelDefinition) -> str:
        """Serialize a level without touching the filesystem."""
        return self._serializer.to_text(level)

    def save(self, level: LevelDefinition, path: PathLike) -> bool:
        """Write a level to a file.

        Args:
            level: Level to write
            path: Destination file, overwritten if it exists

        Returns:
            True on success, False if serialization or writing failed
        """
        path = Path(path)
        try:
            text = self.to_text(level)
        except LevelError as e:
            self.logger.error(f"Failed to serialize level '{level.name}': {e}")
            return False

        try:
            with open(path, "w", encoding="utf-8", newline="\n") as f:
                f.write(text)
        except OSError as e:
            self.logger.error(f"Failed to write level to {path}: {e}")
            return False

        self.logger.info(f"Saved level '{level.name}' to {path}")
        return True

    def load_metadata(self, path: PathLike) -> Optional[LevelMetadata]:
        """Read name and description without binding the level.

        Returns:
            LevelMetadata, or None if the file could not be read
        """
        path = Path(path)
        text = self._read_text(path)
        if text is None:
            return None
        return read_metadata(text, path)

    def _read_text(self, path: Path) -> Optional[str]:
        try:
            with open(path, "r", encoding="utf-8", errors="replace") as f:
                return f.read()
        except OSError as e:
            self.logger.error(f"Failed to read level file {path}: {e}")
            return None

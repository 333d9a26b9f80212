"""Fast-path metadata for level files.

Level browsers only need a name and a description per file. Reading them
with plain substring search avoids parsing and binding every entity in
every level just to build a list.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..document.scanner import find_string_end, unescape
from .models import DEFAULT_LEVEL_NAME


def extract_string_field(text: str, key: str) -> Optional[str]:
    """Pull one string value out of raw document text.

    Finds the first ``"key"``, the next ``:`` after it and the opening quote
    of the value. No value tree is built, so the match is not scoped to the
    top level: the first occurrence anywhere in the text wins.

    Args:
        text: Raw document text
        key: Key to look for, without quotes

    Returns:
        Decoded string value, or None if the key, colon, opening or closing
        quote cannot be found
    """
    key_index = text.find(f'"{key}"')
    if key_index == -1:
        return None

    colon = text.find(":", key_index + len(key) + 2)
    if colon == -1:
        return None

    open_quote = text.find('"', colon + 1)
    if open_quote == -1:
        return None

    close_quote = find_string_end(text, open_quote + 1)
    if close_quote >= len(text):
        return None

    return unescape(text[open_quote + 1:close_quote])


@dataclass
class LevelMetadata:
    """Display information about a level file.

    Attributes:
        name: Level name from the file, None if it could not be read
        description: Level description from the file, None if absent
        file_path: Path to the level file
    """

    name: Optional[str]
    description: Optional[str]
    file_path: Optional[Path] = None

    @property
    def display_name(self) -> str:
        return self.name if self.name else DEFAULT_LEVEL_NAME

    @property
    def display_description(self) -> str:
        return self.description or ""

    def __repr__(self) -> str:
        return f"LevelMetadata(name={self.name!r}, file_path={self.file_path})"


def read_metadata(text: str, path: Optional[Path] = None) -> LevelMetadata:
    """Extract name and description from raw level text."""
    return LevelMetadata(
        name=extract_string_field(text, "name"),
        description=extract_string_field(text, "description"),
        file_path=path,
    )

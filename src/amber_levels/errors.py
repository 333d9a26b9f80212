"""
Exception types for amber_levels.
"""

from typing import Optional


class LevelError(Exception):
    """Base class for all level document errors."""
    pass


class DocumentSyntaxError(LevelError, ValueError):
    """Raised when level text cannot be parsed.

    Attributes:
        position: Index into the region being parsed where the problem was found
    """

    def __init__(self, message: str, position: Optional[int] = None):
        self.position = position
        if position is not None:
            message = f"{message} (at index {position})"
        super().__init__(message)


class LevelBindError(LevelError):
    """Raised when a parsed document cannot be projected onto a level."""
    pass


class LevelSerializeError(LevelError):
    """Raised when a level contains values the text format cannot express."""
    pass

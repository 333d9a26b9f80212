"""
Data models for parsed level documents.

The parser produces a small tagged union of immutable value nodes. These
nodes carry no knowledge of the level schema; the binder in
``amber_levels.levels`` decides what each key means.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, TypeAlias, Union


@dataclass(frozen=True)
class NullValue:
    """The ``null`` literal."""


@dataclass(frozen=True)
class BoolValue:
    """A ``true``/``false`` literal."""
    value: bool


@dataclass(frozen=True)
class NumberValue:
    """A numeric literal.

    Integer and fractional source text are both stored as float.
    """
    value: float


@dataclass(frozen=True)
class StringValue:
    """A quoted string with escape sequences already decoded."""
    value: str


@dataclass(frozen=True)
class ObjectValue:
    """An object. Key order follows the source text."""
    entries: Dict[str, "Value"] = field(default_factory=lambda: {})  # type: ignore[return-value]

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def get(self, key: str) -> "Value | None":
        """Return the value stored under ``key`` or None when absent."""
        return self.entries.get(key)

    def keys(self) -> List[str]:
        return list(self.entries.keys())


@dataclass(frozen=True)
class ArrayValue:
    """An array of values in source order."""
    items: List["Value"] = field(default_factory=lambda: [])  # type: ignore[return-value]

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)


# Type aliases for clarity
Value: TypeAlias = Union[NullValue, BoolValue, NumberValue, StringValue, ObjectValue, ArrayValue]
"""Any node the document parser can produce."""

NULL = NullValue()
"""Shared ``null`` instance (the node is immutable)."""

# Marker key that turns an array entry into documentation
COMMENT_KEY = "_comment"


def to_python(value: Value) -> Any:
    """Convert a value tree into plain Python objects.

    Objects become dicts, arrays become lists, numbers stay floats and
    ``null`` becomes None.

    Args:
        value: Root of the tree to convert

    Returns:
        Equivalent structure built from builtin types
    """
    if isinstance(value, NullValue):
        return None
    if isinstance(value, BoolValue):
        return value.value
    if isinstance(value, NumberValue):
        return value.value
    if isinstance(value, StringValue):
        return value.value
    if isinstance(value, ObjectValue):
        return {key: to_python(item) for key, item in value.entries.items()}
    if isinstance(value, ArrayValue):
        return [to_python(item) for item in value.items]
    raise TypeError(f"Not a document value: {value!r}")

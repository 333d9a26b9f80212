"""
Generic document layer for level files.

Provides the scanner primitives, the untyped value model and the
recursive-descent parser. Nothing in this package knows about levels.
"""

from .models import (
    Value,
    NullValue,
    BoolValue,
    NumberValue,
    StringValue,
    ObjectValue,
    ArrayValue,
    NULL,
    COMMENT_KEY,
    to_python,
)
from .scanner import find_string_end, find_matching_bracket, escape, unescape
from .parser import parse_document, parse_object, parse_array

__all__ = [
    # Value model
    "Value",
    "NullValue",
    "BoolValue",
    "NumberValue",
    "StringValue",
    "ObjectValue",
    "ArrayValue",
    "NULL",
    "COMMENT_KEY",
    "to_python",
    # Scanner primitives
    "find_string_end",
    "find_matching_bracket",
    "escape",
    "unescape",
    # Parser
    "parse_document",
    "parse_object",
    "parse_array",
]

"""
Recursive-descent parser for level documents.

The grammar is the subset of JSON the level files use: objects, arrays,
strings with backslash escapes, ``true``/``false``/``null`` and plain decimal
numbers (no exponents, no leading ``+``, no ``\\uXXXX`` escapes).

``parse_object`` and ``parse_array`` each take the full text of one
container, strip its delimiters and walk the interior with an index. Nested
containers are sliced out with ``find_matching_bracket`` and handed back to
the other function.
"""

import re
from typing import Tuple

from ..errors import DocumentSyntaxError
from .models import (
    NULL,
    ArrayValue,
    BoolValue,
    NumberValue,
    ObjectValue,
    StringValue,
    Value,
)
from .scanner import find_matching_bracket, find_string_end, unescape

# Characters swallowed by the greedy numeric scan
_NUMBER_CHARS = frozenset("0123456789.-")

# What a numeric run has to look like once scanned; "1.2.3" or "--1" are rejected
_NUMBER_PATTERN = re.compile(r"-?[0-9]+(?:\.[0-9]+)?")

_DIGITS = frozenset("0123456789")


def parse_document(text: str) -> ObjectValue | ArrayValue:
    """Parse a complete document whose root is an object or an array.

    Args:
        text: Entire file contents

    Returns:
        Parsed root value

    Raises:
        DocumentSyntaxError: If the text is not a well-formed document
    """
    stripped = text.strip()
    if not stripped:
        raise DocumentSyntaxError("Document is empty")

    try:
        if stripped[0] == "{":
            return parse_object(stripped)
        if stripped[0] == "[":
            return parse_array(stripped)
    except RecursionError:
        raise DocumentSyntaxError("Document is nested too deeply") from None

    raise DocumentSyntaxError(
        f"Document must start with '{{' or '[', found {stripped[0]!r}", 0
    )


def parse_object(text: str) -> ObjectValue:
    """Parse the text of one object, delimiters included.

    Args:
        text: Text starting with ``{`` and ending with ``}`` once trimmed

    Returns:
        ObjectValue with keys in source order

    Raises:
        DocumentSyntaxError: On any malformed key, value or delimiter
    """
    body = _strip_delimiters(text, "{", "}")
    entries: dict[str, Value] = {}
    if not body:
        return ObjectValue(entries)

    length = len(body)
    i = 0
    while i < length:
        i = _skip_whitespace(body, i)
        if i >= length:
            break

        if body[i] != '"':
            raise DocumentSyntaxError(f"Expected '\"' to start a key, found {body[i]!r}", i)
        key_end = find_string_end(body, i + 1)
        if key_end >= length:
            raise DocumentSyntaxError("Unterminated key", i)
        key = unescape(body[i + 1:key_end])

        colon = body.find(":", key_end + 1)
        if colon == -1:
            raise DocumentSyntaxError(f"Missing ':' after key {key!r}", key_end)

        i = _skip_whitespace(body, colon + 1)
        value, i = _parse_value(body, i)
        entries[key] = value

        i = _skip_past_separator(body, i)

    return ObjectValue(entries)


def parse_array(text: str) -> ArrayValue:
    """Parse the text of one array, delimiters included.

    Args:
        text: Text starting with ``[`` and ending with ``]`` once trimmed

    Returns:
        ArrayValue with items in source order

    Raises:
        DocumentSyntaxError: On any malformed value or delimiter
    """
    body = _strip_delimiters(text, "[", "]")
    items: list[Value] = []
    if not body:
        return ArrayValue(items)

    length = len(body)
    i = 0
    while i < length:
        i = _skip_whitespace(body, i)
        if i >= length:
            break

        value, i = _parse_value(body, i)
        items.append(value)

        i = _skip_past_separator(body, i)

    return ArrayValue(items)


def _parse_value(body: str, i: int) -> Tuple[Value, int]:
    """Decode the value starting at ``i``.

    Returns:
        The value and the index just past it
    """
    length = len(body)
    if i >= length:
        raise DocumentSyntaxError("Expected a value", i)

    char = body[i]

    if char == '"':
        end = find_string_end(body, i + 1)
        if end >= length:
            raise DocumentSyntaxError("Unterminated string", i)
        return StringValue(unescape(body[i + 1:end])), end + 1

    if char == "[":
        end = find_matching_bracket(body, i, "[", "]")
        return parse_array(body[i:end + 1]), end + 1

    if char == "{":
        end = find_matching_bracket(body, i, "{", "}")
        return parse_object(body[i:end + 1]), end + 1

    if char == "t" or char == "f":
        if body.startswith("true", i):
            return BoolValue(True), i + 4
        if body.startswith("false", i):
            return BoolValue(False), i + 5
        raise DocumentSyntaxError(f"Invalid literal {body[i:i + 5]!r}", i)

    if char == "n":
        if body.startswith("null", i):
            return NULL, i + 4
        raise DocumentSyntaxError(f"Invalid literal {body[i:i + 4]!r}", i)

    if char in _DIGITS or char == "-":
        end = i
        while end < length and body[end] in _NUMBER_CHARS:
            end += 1
        token = body[i:end]
        if not _NUMBER_PATTERN.fullmatch(token):
            raise DocumentSyntaxError(f"Malformed number {token!r}", i)
        return NumberValue(float(token)), end

    raise DocumentSyntaxError(f"Unexpected character {char!r}", i)


def _strip_delimiters(text: str, open_char: str, close_char: str) -> str:
    """Check the outer delimiters and return the trimmed interior."""
    stripped = text.strip()
    if len(stripped) < 2 or stripped[0] != open_char or stripped[-1] != close_char:
        snippet = stripped[:20]
        raise DocumentSyntaxError(
            f"Expected text enclosed in '{open_char}{close_char}', got {snippet!r}"
        )
    return stripped[1:-1].strip()


def _skip_whitespace(body: str, i: int) -> int:
    length = len(body)
    while i < length and body[i].isspace():
        i += 1
    return i


def _skip_past_separator(body: str, i: int) -> int:
    """Move past the next ',' or to the end of the region."""
    comma = body.find(",", i)
    return len(body) if comma == -1 else comma + 1

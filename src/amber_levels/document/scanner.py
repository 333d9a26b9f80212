"""
Character-level scanning helpers shared by the parser, the serializer and
the fast-path metadata extractor.

Everything here works on plain indices into a ``str``; there is no token
stream.
"""

# Decoded form of the two-character escape sequences the format understands.
# Any other escaped character decodes to itself, which covers \" and \\.
_UNESCAPES = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "b": "\b",
    "f": "\f",
}

# Order matters: backslash first so the other replacements are not escaped twice
_ESCAPES = (
    ("\\", "\\\\"),
    ('"', '\\"'),
    ("\n", "\\n"),
    ("\r", "\\r"),
    ("\t", "\\t"),
)


def find_string_end(text: str, start: int) -> int:
    """Find the closing quote of a string literal.

    Args:
        text: Text being scanned
        start: Index just after the opening quote

    Returns:
        Index of the closing quote, or ``len(text)`` if there is none
    """
    i = start
    length = len(text)
    while i < length:
        char = text[i]
        if char == "\\":
            # Backslash swallows whatever follows, no validation
            i += 2
        elif char == '"':
            return i
        else:
            i += 1
    return length


def find_matching_bracket(text: str, start: int, open_char: str, close_char: str) -> int:
    """Find the bracket that closes the one at ``start``.

    Brackets inside string literals are not counted.

    Args:
        text: Text being scanned
        start: Index of the opening bracket
        open_char: Opening bracket character, e.g. ``[``
        close_char: Closing bracket character, e.g. ``]``

    Returns:
        Index of the matching close bracket, or ``len(text) - 1`` if depth
        never returns to zero
    """
    depth = 0
    in_string = False
    i = start
    length = len(text)
    while i < length:
        char = text[i]
        if char == "\\" and in_string:
            i += 2
            continue
        if char == '"':
            in_string = not in_string
        elif not in_string:
            if char == open_char:
                depth += 1
            elif char == close_char:
                depth -= 1
                if depth == 0:
                    return i
        i += 1
    return length - 1


def unescape(raw: str) -> str:
    """Decode escape sequences in the body of a string literal."""
    if "\\" not in raw:
        return raw

    parts: list[str] = []
    i = 0
    length = len(raw)
    while i < length:
        char = raw[i]
        if char == "\\" and i + 1 < length:
            escaped = raw[i + 1]
            parts.append(_UNESCAPES.get(escaped, escaped))
            i += 2
        else:
            parts.append(char)
            i += 1
    return "".join(parts)


def escape(value: str) -> str:
    """Escape a string for writing between double quotes."""
    for plain, escaped in _ESCAPES:
        value = value.replace(plain, escaped)
    return value

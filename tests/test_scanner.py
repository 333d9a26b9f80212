"""Tests for the character-level scanning helpers."""

from amber_levels.document.scanner import (
    escape,
    find_matching_bracket,
    find_string_end,
    unescape,
)


class TestFindStringEnd:
    """Test locating the closing quote of a string literal."""

    def test_plain_string(self) -> None:
        text = '"hello", 1'
        assert find_string_end(text, 1) == 6

    def test_escaped_quote_is_skipped(self) -> None:
        text = r'"say \"hi\"" tail'
        end = find_string_end(text, 1)
        assert text[end] == '"'
        assert text[1:end] == r'say \"hi\"'

    def test_escaped_backslash_before_quote(self) -> None:
        text = r'"dir\\" rest'
        assert find_string_end(text, 1) == 6

    def test_unterminated_returns_length(self) -> None:
        text = '"never closed'
        assert find_string_end(text, 1) == len(text)

    def test_trailing_backslash_does_not_overrun(self) -> None:
        text = '"abc\\'
        assert find_string_end(text, 1) == len(text)


class TestFindMatchingBracket:
    """Test bracket matching with string awareness."""

    def test_simple_nesting(self) -> None:
        text = '{"a": {"b": 1}, "c": 2}'
        assert find_matching_bracket(text, 0, "{", "}") == len(text) - 1
        assert find_matching_bracket(text, 6, "{", "}") == 13

    def test_brackets_inside_strings_are_ignored(self) -> None:
        text = '{"a": "}", "b": "{{"}'
        assert find_matching_bracket(text, 0, "{", "}") == len(text) - 1

    def test_square_brackets_inside_strings_are_ignored(self) -> None:
        text = '["]", [1, 2], "["] trailing'
        assert find_matching_bracket(text, 0, "[", "]") == 17

    def test_escaped_quote_inside_string(self) -> None:
        text = r'{"a": "x\"}"}'
        assert find_matching_bracket(text, 0, "{", "}") == len(text) - 1

    def test_unbalanced_returns_last_index(self) -> None:
        text = '{"a": {"b": 1}'
        assert find_matching_bracket(text, 0, "{", "}") == len(text) - 1


class TestEscaping:
    """Test escape and unescape of string bodies."""

    def test_unescape_known_sequences(self) -> None:
        assert unescape(r"a\nb\tc\rd") == "a\nb\tc\rd"
        assert unescape(r"\b\f") == "\b\f"

    def test_unescape_quote_backslash_and_slash(self) -> None:
        assert unescape(r'\"quoted\"') == '"quoted"'
        assert unescape(r"C:\\levels") == "C:\\levels"
        assert unescape(r"a\/b") == "a/b"

    def test_unescape_unknown_sequence_keeps_character(self) -> None:
        assert unescape(r"\q") == "q"

    def test_unescape_without_backslash_is_identity(self) -> None:
        value = "plain text"
        assert unescape(value) is value

    def test_escape_special_characters(self) -> None:
        assert escape('a "b" c') == r'a \"b\" c'
        assert escape("line1\nline2\ttab\r") == r"line1\nline2\ttab\r"

    def test_escape_backslash_first(self) -> None:
        assert escape('\\"') == r'\\\"'

    def test_escape_then_unescape_restores_value(self) -> None:
        value = 'path\\to "file"\n\ttabbed\r'
        assert unescape(escape(value)) == value

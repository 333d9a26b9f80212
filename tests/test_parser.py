"""Tests for the recursive-descent document parser."""

import orjson
import pytest

from amber_levels.document import (
    NULL,
    ArrayValue,
    BoolValue,
    NumberValue,
    ObjectValue,
    StringValue,
    parse_array,
    parse_document,
    parse_object,
    to_python,
)
from amber_levels.errors import DocumentSyntaxError

from .samples import FULL_LEVEL, SCENARIO_A


class TestParseValues:
    """Test decoding of scalar values."""

    def test_literals(self) -> None:
        result = parse_object('{"t": true, "f": false, "n": null}')
        assert result.get("t") == BoolValue(True)
        assert result.get("f") == BoolValue(False)
        assert result.get("n") is NULL

    def test_numbers_are_floats(self) -> None:
        result = parse_object('{"a": 10, "b": -3.5, "c": 0}')
        assert result.get("a") == NumberValue(10.0)
        assert result.get("b") == NumberValue(-3.5)
        assert isinstance(result.get("c"), NumberValue)
        assert isinstance(result.get("a").value, float)  # type: ignore[union-attr]

    def test_string_escapes_are_decoded(self) -> None:
        result = parse_object(r'{"s": "a \"quoted\" word\nnext"}')
        assert result.get("s") == StringValue('a "quoted" word\nnext')

    def test_string_containing_comma_and_brackets(self) -> None:
        result = parse_object('{"s": "x, ] }", "n": 2}')
        assert result.get("s") == StringValue("x, ] }")
        assert result.get("n") == NumberValue(2.0)


class TestParseContainers:
    """Test object and array structure."""

    def test_empty_containers(self) -> None:
        assert parse_object("{}") == ObjectValue({})
        assert parse_object("{   }") == ObjectValue({})
        assert parse_array("[ ]") == ArrayValue([])

    def test_key_order_is_preserved(self) -> None:
        result = parse_object('{"z": 1, "a": 2, "m": 3}')
        assert result.keys() == ["z", "a", "m"]

    def test_repeated_key_keeps_last_value(self) -> None:
        result = parse_object('{"a": 1, "a": 2}')
        assert result.get("a") == NumberValue(2.0)
        assert len(result.keys()) == 1

    def test_nested_containers(self) -> None:
        result = parse_document('{"list": [1, [2, 3], {"k": "v"}], "obj": {"inner": []}}')
        assert to_python(result) == {"list": [1, [2, 3], {"k": "v"}], "obj": {"inner": []}}

    def test_array_of_objects_with_tricky_strings(self) -> None:
        result = parse_array('[{"s": "]}"}, {"s": "[{"}, 3]')
        assert to_python(result) == [{"s": "]}"}, {"s": "[{"}, 3]

    def test_array_root_document(self) -> None:
        result = parse_document('  [1, "two", false]  ')
        assert isinstance(result, ArrayValue)
        assert len(result) == 3

    def test_whitespace_and_newlines(self) -> None:
        text = '{\n  "a" :\n    1 ,\n  "b"\t:\t[ 1 ,\n 2 ]\n}\n'
        assert to_python(parse_document(text)) == {"a": 1, "b": [1, 2]}


class TestParserMatchesReferenceDecoder:
    """Cross-check the parser against orjson on conformant documents."""

    @pytest.mark.parametrize("text", [
        SCENARIO_A,
        FULL_LEVEL,
        '{"deep": [[[[{"x": [1, 2, {"y": null}]}]]]]}',
        '[{"a": -0.25}, {"b": "tab\\there"}, [], {}]',
    ])
    def test_same_tree_as_orjson(self, text: str) -> None:
        assert to_python(parse_document(text)) == orjson.loads(text)


class TestParseErrors:
    """Test that malformed text is rejected."""

    @pytest.mark.parametrize("text", [
        '{"name": "Unterminated}',
        '{"a": tru}',
        '{"a": nul}',
        '{"a": 1.2.3}',
        '{"a": --1}',
        '{"a": 1.}',
        '{"a": -}',
        '{"a": +1}',
        '{"a": @}',
        '{"a" 1}',
        '{a: 1}',
        '{"a": }',
        '{"a": [1, 2}',
    ])
    def test_malformed_object(self, text: str) -> None:
        with pytest.raises(DocumentSyntaxError):
            parse_document(text)

    def test_root_must_be_container(self) -> None:
        with pytest.raises(DocumentSyntaxError):
            parse_document('"just a string"')

    def test_empty_document(self) -> None:
        with pytest.raises(DocumentSyntaxError):
            parse_document("   ")

    def test_delimiters_are_checked(self) -> None:
        with pytest.raises(DocumentSyntaxError):
            parse_object("[1, 2]")
        with pytest.raises(DocumentSyntaxError):
            parse_array("{}")

    def test_error_is_a_value_error_with_position(self) -> None:
        with pytest.raises(ValueError) as exc_info:
            parse_document('{"a": 1.2.3}')
        assert isinstance(exc_info.value, DocumentSyntaxError)
        assert exc_info.value.position is not None
        assert "1.2.3" in str(exc_info.value)

    def test_excessive_nesting_is_a_syntax_error(self) -> None:
        text = "[" * 1500 + "]" * 1500
        with pytest.raises(DocumentSyntaxError):
            parse_document(text)

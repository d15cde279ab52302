# tests/unit/infrastructure/test_json_text.py
from __future__ import annotations

from decimal import Decimal

import pytest

from jsonbind.domain.exceptions import JsonSyntaxError
from jsonbind.domain.json_model import JsonNumber, JsonObject, JsonValue
from jsonbind.infrastructure.codec.json_text import parse_json, print_json


def test_parse_builds_the_value_tree() -> None:
    tree = parse_json('{"b": [1, 2.50, "x", null, true], "a": {}}')

    assert isinstance(tree, JsonObject)
    assert tree.keys() == ["b", "a"]
    assert tree == JsonValue.from_python(
        {"b": [1, Decimal("2.50"), "x", None, True], "a": {}}
    )


def test_numbers_are_lossless() -> None:
    tree = parse_json("[12345678901234567890123, 0.1000000000000000000001]")
    assert tree.render() == "[12345678901234567890123,0.1000000000000000000001]"
    assert parse_json("7") == JsonNumber(7)


def test_parse_accepts_utf8_bytes() -> None:
    assert parse_json('"héllo"'.encode()) == JsonValue.from_python("héllo")


@pytest.mark.parametrize(
    "text",
    [
        "",
        "{",
        '{"a": 1,}',
        "[1, 2,]",
        "// comment\n1",
        "NaN",
        "[Infinity]",
        '{"a": 1, "a": 2}',
    ],
)
def test_parse_rejects_invalid_json(text: str) -> None:
    with pytest.raises(JsonSyntaxError):
        parse_json(text)


def test_syntax_errors_carry_position() -> None:
    with pytest.raises(JsonSyntaxError) as excinfo:
        parse_json('{\n  "a": }')
    assert excinfo.value.details["line"] == 2
    assert excinfo.value.code == "JSON_SYNTAX_ERROR"


def test_parse_rejects_invalid_utf8() -> None:
    with pytest.raises(JsonSyntaxError, match="UTF-8"):
        parse_json(b"\xff\xfe")


def test_print_compact_and_indented() -> None:
    tree = JsonValue.from_python({"a": [1, {"b": None}], "c": [], "d": {}})

    assert print_json(tree) == '{"a":[1,{"b":null}],"c":[],"d":{}}'
    assert print_json(tree, indent=2) == (
        "{\n"
        '  "a": [\n'
        "    1,\n"
        "    {\n"
        '      "b": null\n'
        "    }\n"
        "  ],\n"
        '  "c": [],\n'
        '  "d": {}\n'
        "}"
    )


def test_print_then_parse_is_identity() -> None:
    text = '{"z":1.10,"a":["x",false]}'
    assert print_json(parse_json(text)) == text

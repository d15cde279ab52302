# tests/unit/application/test_string_parsers.py
from __future__ import annotations

import pytest

from jsonbind.application.string_parsers import (
    FromStringParserRegistry,
    IntegerFromStringParser,
    default_string_parsers,
)
from jsonbind.domain.exceptions import (
    FromStringParseError,
    NoConverterFoundError,
    NullArgumentError,
    RegistryNotSealedError,
    RegistrySealedError,
)
from jsonbind.domain.type_descriptor import TypeDescriptor


@pytest.fixture
def parsers() -> FromStringParserRegistry:
    registry = FromStringParserRegistry()
    for parser in default_string_parsers():
        registry.register(parser)
    registry.seal()
    return registry


@pytest.mark.parametrize(
    ("text", "type_", "expected"),
    [
        ("abc", str, "abc"),
        ("", str, ""),
        ("42", int, 42),
        ("-7", int, -7),
        ("+7", int, 7),
        ("1.5", float, 1.5),
        ("3", float, 3.0),
        ("true", bool, True),
        ("false", bool, False),
    ],
)
def test_default_parsers(
    parsers: FromStringParserRegistry, text: str, type_: type, expected: object
) -> None:
    assert parsers.parse(text, type_) == expected


@pytest.mark.parametrize(
    ("text", "type_"),
    [
        ("", int),
        ("4.2", int),
        ("-+5", int),
        (" 5", int),
        ("٣", int),
        ("abc", float),
        ("inf", float),
        ("nan", float),
        ("True", bool),
        ("1", bool),
    ],
)
def test_default_parsers_reject(parsers: FromStringParserRegistry, text: str, type_: type) -> None:
    with pytest.raises(FromStringParseError):
        parsers.parse(text, type_)


def test_unknown_type(parsers: FromStringParserRegistry) -> None:
    assert not parsers.supports(list[int])
    with pytest.raises(NoConverterFoundError):
        parsers.resolve(list[int])


def test_resolution_is_cached(parsers: FromStringParserRegistry) -> None:
    assert parsers.resolve(int) is parsers.resolve(TypeDescriptor(int))
    assert isinstance(parsers.resolve(int), IntegerFromStringParser)


def test_sealed_registry_rejects_configuration(parsers: FromStringParserRegistry) -> None:
    assert parsers.is_sealed
    with pytest.raises(RegistrySealedError):
        parsers.register(IntegerFromStringParser())
    with pytest.raises(RegistrySealedError):
        parsers.clear()


def test_null_arguments(parsers: FromStringParserRegistry) -> None:
    with pytest.raises(NullArgumentError):
        parsers.parse(None, int)  # type: ignore[arg-type]
    with pytest.raises(NullArgumentError):
        parsers.resolve(None)


def test_overlong_integers_are_parse_errors(parsers: FromStringParserRegistry) -> None:
    with pytest.raises(FromStringParseError, match="5000 digits"):
        parsers.parse("9" * 5000, int)


def test_resolve_before_seal_is_rejected() -> None:
    registry = FromStringParserRegistry()
    registry.register(IntegerFromStringParser())
    with pytest.raises(RegistryNotSealedError):
        registry.resolve(int)

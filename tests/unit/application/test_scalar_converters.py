# tests/unit/application/test_scalar_converters.py
from __future__ import annotations

from decimal import Decimal

import pytest

from fixtures.json_testkit import errors_of, j, value_of
from jsonbind.application.converters.scalars import (
    BooleanConverter,
    FloatConverter,
    IntegerConverter,
    NoneConverter,
    StringConverter,
)
from jsonbind.domain.exceptions import JsonSerializationError, NullArgumentError
from jsonbind.domain.json_model import JsonBoolean, JsonNull, JsonNumber, JsonString
from jsonbind.domain.type_descriptor import TypeDescriptor
from jsonbind.infrastructure.codec.json_text import parse_json

INT = TypeDescriptor(int)
FLOAT = TypeDescriptor(float)
STR = TypeDescriptor(str)
BOOL = TypeDescriptor(bool)
NONE = TypeDescriptor(type(None))


# --------------------------------------------------------------------------- #
# Integers                                                                    #
# --------------------------------------------------------------------------- #


@pytest.mark.parametrize("data", [0, -5, 2**63 - 1, -(2**63)])
def test_integer_accepts_values_in_range(data: int) -> None:
    assert value_of(IntegerConverter().deserialize(j(data), INT)) == data


@pytest.mark.parametrize(
    ("data", "message"),
    [
        ("12", 'expected integer, found: "12"'),
        (True, "expected integer, found: true"),
        (None, "expected integer, found: null"),
        (Decimal("12.5"), "expected integer, found: 12.5"),
        (2**63, f"value out of range [{-(2**63)}, {2**63 - 1}], found: {2**63}"),
    ],
)
def test_integer_rejects(data: object, message: str) -> None:
    assert errors_of(IntegerConverter().deserialize(j(data), INT)) == [("", message)]


def test_integer_accepts_integral_floats_unless_disabled() -> None:
    assert value_of(IntegerConverter().deserialize(j(Decimal("12.0")), INT)) == 12

    strict = IntegerConverter(allow_integral_floats=False)
    assert errors_of(strict.deserialize(j(Decimal("12.0")), INT)) == [
        ("", "expected integer, found: 12.0")
    ]


def test_integer_rejects_huge_exponent_without_expanding_it() -> None:
    huge = parse_json("1e100000000")
    assert errors_of(IntegerConverter().deserialize(huge, INT)) == [
        ("", f"value out of range [{-(2**63)}, {2**63 - 1}], found: 1E+100000000")
    ]
    tiny = parse_json("1e-100000000")
    assert errors_of(IntegerConverter().deserialize(tiny, INT)) == [
        ("", "expected integer, found: 1E-100000000")
    ]


def test_integer_width_is_configurable() -> None:
    converter = IntegerConverter(8)
    assert (converter.min_value, converter.max_value) == (-128, 127)
    assert value_of(converter.deserialize(j(127), INT)) == 127
    assert errors_of(converter.deserialize(j(128), INT)) == [
        ("", "value out of range [-128, 127], found: 128")
    ]
    with pytest.raises(JsonSerializationError):
        converter.serialize(-129, INT)


def test_integer_width_must_be_supported() -> None:
    with pytest.raises(ValueError):
        IntegerConverter(12)


def test_integer_serialize() -> None:
    converter = IntegerConverter()
    assert converter.serialize(7, INT) == JsonNumber(7)
    with pytest.raises(NullArgumentError):
        converter.serialize(None, INT)
    with pytest.raises(JsonSerializationError, match="expected int, found: bool"):
        converter.serialize(True, INT)


# --------------------------------------------------------------------------- #
# Other scalars                                                               #
# --------------------------------------------------------------------------- #


def test_float_widens_integers_and_rejects_non_numbers() -> None:
    converter = FloatConverter()
    assert value_of(converter.deserialize(j(3), FLOAT)) == 3.0
    assert value_of(converter.deserialize(j(Decimal("0.25")), FLOAT)) == 0.25
    assert errors_of(converter.deserialize(j("x"), FLOAT)) == [
        ("", 'expected number, found: "x"')
    ]


def test_float_serialize_requires_finite_numbers() -> None:
    converter = FloatConverter()
    assert converter.serialize(1.5, FLOAT) == JsonNumber(1.5)
    assert converter.serialize(0.1, FLOAT) == parse_json("0.1")
    assert converter.serialize(1e16, FLOAT) == parse_json("1e16")
    with pytest.raises(JsonSerializationError, match="finite"):
        converter.serialize(float("inf"), FLOAT)


def test_string() -> None:
    converter = StringConverter()
    assert value_of(converter.deserialize(j("héllo"), STR)) == "héllo"
    assert errors_of(converter.deserialize(j([1]), STR)) == [("", "expected string, found: [1]")]
    assert converter.serialize("x", STR) == JsonString("x")
    with pytest.raises(JsonSerializationError):
        converter.serialize(1, STR)


def test_boolean() -> None:
    converter = BooleanConverter()
    assert value_of(converter.deserialize(j(False), BOOL)) is False
    assert errors_of(converter.deserialize(j(0), BOOL)) == [("", "expected boolean, found: 0")]
    assert converter.serialize(True, BOOL) is JsonBoolean.TRUE


def test_none_converter() -> None:
    converter = NoneConverter()
    assert converter.supports(NONE)
    assert value_of(converter.deserialize(j(None), NONE)) is None
    assert errors_of(converter.deserialize(j({}), NONE)) == [("", "expected null, found: {}")]
    assert converter.serialize(None, NONE) is JsonNull.INSTANCE


def test_deserialize_requires_arguments() -> None:
    with pytest.raises(NullArgumentError):
        StringConverter().deserialize(None, STR)  # type: ignore[arg-type]

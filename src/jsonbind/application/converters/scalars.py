# src/jsonbind/application/converters/scalars.py
# Copyright (c) Jsonbind.
# SPDX-License-Identifier: MIT
"""Built-in scalar converters.

Purpose:
    Converters for ``None`` (unit), ``bool``, fixed-width ``int``, ``float``
    and ``str``. Each reports a failed deserialization as a single root-level
    message in the form ``expected X, found: <json>``.

Layer:
    application
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any, Final

from jsonbind.domain.error_tree import ErrorTree
from jsonbind.domain.exceptions.conversion import JsonSerializationError, NullArgumentError
from jsonbind.domain.interfaces.converter import JsonConverter
from jsonbind.domain.json_model import JsonBoolean, JsonNull, JsonNumber, JsonString, JsonValue
from jsonbind.domain.messages import VALUE_OUT_OF_RANGE, expected_found
from jsonbind.domain.result import DeserializationResult, Failure, Success
from jsonbind.domain.type_descriptor import TypeDescriptor

__all__ = [
    "BooleanConverter",
    "FloatConverter",
    "IntegerConverter",
    "NoneConverter",
    "StringConverter",
]

_SUPPORTED_INTEGER_BITS: Final[frozenset[int]] = frozenset({8, 16, 32, 64})


def _wrong_value(expected: str, value: Any) -> JsonSerializationError:
    return JsonSerializationError(
        ErrorTree.leaf(f"expected {expected}, found: {type(value).__qualname__}")
    )


class NoneConverter(JsonConverter):
    """``None`` <-> JSON ``null``."""

    def supports(self, type_: TypeDescriptor) -> bool:
        return type_.has_base(type(None))

    def deserialize(self, json: JsonValue, type_: TypeDescriptor) -> DeserializationResult:
        self.require_arguments(json=json, type=type_)
        if isinstance(json, JsonNull):
            return Success(None)
        return Failure.of(expected_found("null", json))

    def serialize(self, value: Any, type_: TypeDescriptor) -> JsonValue:
        if value is not None:
            raise _wrong_value("None", value)
        return JsonNull.INSTANCE


class BooleanConverter(JsonConverter):
    """``bool`` <-> JSON ``true``/``false``."""

    def supports(self, type_: TypeDescriptor) -> bool:
        return type_.has_base(bool)

    def deserialize(self, json: JsonValue, type_: TypeDescriptor) -> DeserializationResult:
        self.require_arguments(json=json, type=type_)
        if isinstance(json, JsonBoolean):
            return Success(json.value)
        return Failure.of(expected_found("boolean", json))

    def serialize(self, value: Any, type_: TypeDescriptor) -> JsonValue:
        if value is None:
            raise NullArgumentError("value")
        if not isinstance(value, bool):
            raise _wrong_value("bool", value)
        return JsonBoolean.of(value)


class IntegerConverter(JsonConverter):
    """Fixed-width signed ``int`` <-> JSON number.

    Args:
        bits: Width of the accepted range (8, 16, 32 or 64).
        allow_integral_floats: Accept numbers such as ``12.0`` whose value is
            integral. Numbers with a fractional part are always rejected.

    Raises:
        ValueError: If ``bits`` is not a supported width.
    """

    def __init__(self, bits: int = 64, *, allow_integral_floats: bool = True) -> None:
        if bits not in _SUPPORTED_INTEGER_BITS:
            raise ValueError(f"unsupported integer width: {bits}")
        self.bits = bits
        self.allow_integral_floats = allow_integral_floats
        self.min_value = -(1 << (bits - 1))
        self.max_value = (1 << (bits - 1)) - 1

    def supports(self, type_: TypeDescriptor) -> bool:
        return type_.has_base(int)

    def deserialize(self, json: JsonValue, type_: TypeDescriptor) -> DeserializationResult:
        self.require_arguments(json=json, type=type_)
        if not isinstance(json, JsonNumber):
            return Failure.of(expected_found("integer", json))
        number = json.value
        if not isinstance(number, int) and not self.allow_integral_floats:
            return Failure.of(expected_found("integer", json))
        # Range first, so int() never sees a huge exponent.
        if not self.min_value <= number <= self.max_value:
            if isinstance(number, int) or json.is_integral:
                return Failure.of(self._out_of_range(json.render()))
            return Failure.of(expected_found("integer", json))
        if not json.is_integral:
            return Failure.of(expected_found("integer", json))
        return Success(int(number))

    def serialize(self, value: Any, type_: TypeDescriptor) -> JsonValue:
        if value is None:
            raise NullArgumentError("value")
        if isinstance(value, bool) or not isinstance(value, int):
            raise _wrong_value("int", value)
        if not self.min_value <= value <= self.max_value:
            raise JsonSerializationError(ErrorTree.leaf(self._out_of_range(str(value))))
        return JsonNumber(value)

    def _out_of_range(self, found: str) -> str:
        return f"{VALUE_OUT_OF_RANGE} [{self.min_value}, {self.max_value}], found: {found}"

    def __repr__(self) -> str:
        return f"IntegerConverter(bits={self.bits})"


class FloatConverter(JsonConverter):
    """``float`` <-> JSON number. Integers are accepted and widened."""

    def supports(self, type_: TypeDescriptor) -> bool:
        return type_.has_base(float)

    def deserialize(self, json: JsonValue, type_: TypeDescriptor) -> DeserializationResult:
        self.require_arguments(json=json, type=type_)
        if not isinstance(json, JsonNumber):
            return Failure.of(expected_found("number", json))
        value = float(json.value)
        if not math.isfinite(value):
            return Failure.of(expected_found("finite number", json))
        return Success(value)

    def serialize(self, value: Any, type_: TypeDescriptor) -> JsonValue:
        if value is None:
            raise NullArgumentError("value")
        if isinstance(value, bool) or not isinstance(value, float | int | Decimal):
            raise _wrong_value("float", value)
        number = float(value)
        if not math.isfinite(number):
            raise JsonSerializationError(
                ErrorTree.leaf(f"expected finite number, found: {number!r}")
            )
        # Shortest repr keeps 0.1 equal to the Decimal("0.1") the parser produces.
        return JsonNumber(Decimal(repr(number)))


class StringConverter(JsonConverter):
    """``str`` <-> JSON string."""

    def supports(self, type_: TypeDescriptor) -> bool:
        return type_.has_base(str)

    def deserialize(self, json: JsonValue, type_: TypeDescriptor) -> DeserializationResult:
        self.require_arguments(json=json, type=type_)
        if isinstance(json, JsonString):
            return Success(json.value)
        return Failure.of(expected_found("string", json))

    def serialize(self, value: Any, type_: TypeDescriptor) -> JsonValue:
        if value is None:
            raise NullArgumentError("value")
        if not isinstance(value, str):
            raise _wrong_value("str", value)
        return JsonString(value)

# src/jsonbind/application/converters/passthrough.py
# Copyright (c) Jsonbind.
# SPDX-License-Identifier: MIT
"""Raw JSON passthrough converter.

Lets records embed opaque JSON: a field declared as :class:`JsonValue` (or one
of its variants) receives the JSON tree unchanged, and serializes back to the
very same object.
"""

from __future__ import annotations

from typing import Any

from jsonbind.domain.error_tree import ErrorTree
from jsonbind.domain.exceptions.conversion import JsonSerializationError, NullArgumentError
from jsonbind.domain.interfaces.converter import JsonConverter
from jsonbind.domain.json_model import JsonValue
from jsonbind.domain.messages import expected_found
from jsonbind.domain.result import DeserializationResult, Failure, Success
from jsonbind.domain.type_descriptor import TypeDescriptor

__all__ = ["JsonValueConverter"]


class JsonValueConverter(JsonConverter):
    """Identity conversion for :class:`JsonValue` and its variants."""

    def supports(self, type_: TypeDescriptor) -> bool:
        return type_.is_class and issubclass(type_.base, JsonValue)

    def deserialize(self, json: JsonValue, type_: TypeDescriptor) -> DeserializationResult:
        self.require_arguments(json=json, type=type_)
        if not isinstance(json, type_.base):
            return Failure.of(expected_found(type_.base.kind, json))
        return Success(json)

    def serialize(self, value: Any, type_: TypeDescriptor) -> JsonValue:
        if value is None:
            raise NullArgumentError("value")
        if not isinstance(value, JsonValue):
            raise JsonSerializationError(
                ErrorTree.leaf(f"expected JsonValue, found: {type(value).__qualname__}")
            )
        return value

# src/jsonbind/application/converters/composites.py
# Copyright (c) Jsonbind.
# SPDX-License-Identifier: MIT
"""Built-in composite converters: lists and optionals.

Both converters are registered once and serve every element type. They look
up the element converter from the registry on each call; the registry caches
that lookup.

Layer:
    application
"""

from __future__ import annotations

import typing
from collections.abc import Sequence
from typing import Any

from jsonbind.domain.error_tree import ErrorTree, PathSegment
from jsonbind.domain.exceptions.conversion import (
    JsonSerializationError,
    NoConverterFoundError,
    NullArgumentError,
)
from jsonbind.domain.interfaces.converter import ConverterResolver, JsonConverter
from jsonbind.domain.json_model import JsonArray, JsonNull, JsonValue
from jsonbind.domain.messages import expected_found
from jsonbind.domain.result import DeserializationResult, Failure, Success
from jsonbind.domain.type_descriptor import TypeDescriptor

__all__ = ["ListConverter", "OptionalConverter"]


class ListConverter(JsonConverter):
    """``list[X]`` <-> JSON array.

    Deserialization converts every element and collects failures keyed by
    index. Serialization of a raw ``list`` (no element type) picks each
    element's converter from its runtime class.

    Args:
        resolver: Registry used to resolve element converters.
    """

    def __init__(self, resolver: ConverterResolver) -> None:
        self._resolver = resolver

    def supports(self, type_: TypeDescriptor) -> bool:
        return type_.has_base(list) and len(type_.args) <= 1

    def deserialize(self, json: JsonValue, type_: TypeDescriptor) -> DeserializationResult:
        self.require_arguments(json=json, type=type_)
        if not type_.args:
            raise NoConverterFoundError(
                "cannot deserialize a list without an element type; use list[X]",
                details={"type": str(type_)},
            )
        if not isinstance(json, JsonArray):
            return Failure.of(expected_found("array", json))

        element_type = type_.args[0]
        element_converter = self._resolver.resolve(element_type)
        values: list[Any] = []
        errors: list[tuple[PathSegment, ErrorTree]] = []
        for index, element in enumerate(json):
            result = element_converter.deserialize(element, element_type)
            if isinstance(result, Failure):
                errors.append((index, result.errors))
            else:
                values.append(result.value)
        if errors:
            return Failure(ErrorTree.node(errors))
        return Success(values)

    def serialize(self, value: Any, type_: TypeDescriptor) -> JsonValue:
        if value is None:
            raise NullArgumentError("value")
        if isinstance(value, str | bytes) or not isinstance(value, Sequence):
            raise JsonSerializationError(
                ErrorTree.leaf(f"expected list, found: {type(value).__qualname__}")
            )

        elements: list[JsonValue] = []
        errors: list[tuple[PathSegment, ErrorTree]] = []
        for index, element in enumerate(value):
            try:
                elements.append(self._serialize_element(element, type_))
            except NullArgumentError:
                errors.append((index, ErrorTree.leaf("must not be None")))
            except JsonSerializationError as exc:
                errors.append((index, exc.errors))
        if errors:
            raise JsonSerializationError(ErrorTree.node(errors))
        return JsonArray(tuple(elements))

    def _serialize_element(self, element: Any, type_: TypeDescriptor) -> JsonValue:
        if type_.args:
            element_type = type_.args[0]
        elif element is None:
            raise NullArgumentError("element")
        else:
            element_type = TypeDescriptor.of(type(element))
        return self._resolver.resolve(element_type).serialize(element, element_type)


class OptionalConverter(JsonConverter):
    """``X | None`` <-> JSON ``null`` or the JSON form of ``X``.

    Args:
        resolver: Registry used to resolve the wrapped converter.
    """

    def __init__(self, resolver: ConverterResolver) -> None:
        self._resolver = resolver

    def supports(self, type_: TypeDescriptor) -> bool:
        return type_.has_base(typing.Optional) and len(type_.args) == 1

    def deserialize(self, json: JsonValue, type_: TypeDescriptor) -> DeserializationResult:
        self.require_arguments(json=json, type=type_)
        if isinstance(json, JsonNull):
            return Success(None)
        inner = type_.args[0]
        return self._resolver.resolve(inner).deserialize(json, inner)

    def serialize(self, value: Any, type_: TypeDescriptor) -> JsonValue:
        if value is None:
            return JsonNull.INSTANCE
        inner = type_.args[0]
        return self._resolver.resolve(inner).serialize(value, inner)

# src/jsonbind/application/converters/helper_types.py
# Copyright (c) Jsonbind.
# SPDX-License-Identifier: MIT
"""Helper types and their converters.

Types:
    * :class:`FieldMustBeNull`: a record field that must be present and
      ``null``, e.g. to reserve a key in a wire format.
    * :class:`TypeWrapper`: pairs a value with an explicit type for
      serialization, for values whose runtime class does not carry enough type
      information (``list`` elements of a generic record, for example).

Layer:
    application
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from jsonbind.domain.error_tree import ErrorTree
from jsonbind.domain.exceptions.conversion import (
    JsonSerializationError,
    NullArgumentError,
    UnsupportedOperationError,
)
from jsonbind.domain.interfaces.converter import ConverterResolver, JsonConverter
from jsonbind.domain.json_model import JsonNull, JsonValue
from jsonbind.domain.messages import expected_found
from jsonbind.domain.result import DeserializationResult, Failure, Success
from jsonbind.domain.type_descriptor import TypeDescriptor

__all__ = ["FieldMustBeNull", "FieldMustBeNullConverter", "TypeWrapper", "TypeWrapperConverter"]


class FieldMustBeNull:
    """Marker value for a field that must be JSON ``null``. Use :attr:`INSTANCE`."""

    __slots__ = ()

    INSTANCE: ClassVar[FieldMustBeNull]

    def __repr__(self) -> str:
        return "FieldMustBeNull.INSTANCE"


FieldMustBeNull.INSTANCE = FieldMustBeNull()


class FieldMustBeNullConverter(JsonConverter):
    """Converter for :class:`FieldMustBeNull`."""

    def supports(self, type_: TypeDescriptor) -> bool:
        return type_.has_base(FieldMustBeNull)

    def deserialize(self, json: JsonValue, type_: TypeDescriptor) -> DeserializationResult:
        self.require_arguments(json=json, type=type_)
        if isinstance(json, JsonNull):
            return Success(FieldMustBeNull.INSTANCE)
        return Failure.of(expected_found("null", json))

    def serialize(self, value: Any, type_: TypeDescriptor) -> JsonValue:
        if value is None:
            raise NullArgumentError("value")
        return JsonNull.INSTANCE


@dataclass(frozen=True, slots=True)
class TypeWrapper:
    """A value together with the type to serialize it as.

    Attributes:
        value: The value to serialize.
        type: Any type annotation or :class:`TypeDescriptor`.
    """

    value: Any
    type: Any

    @property
    def descriptor(self) -> TypeDescriptor:
        return TypeDescriptor.of(self.type)


class TypeWrapperConverter(JsonConverter):
    """Serialize-only converter for :class:`TypeWrapper`.

    Type wrappers are a workaround for missing type information during
    serialization and add nothing when parsing JSON, so deserialization raises
    :class:`UnsupportedOperationError`.

    Args:
        resolver: Registry used to resolve the wrapped type's converter.
    """

    def __init__(self, resolver: ConverterResolver) -> None:
        self._resolver = resolver

    def supports(self, type_: TypeDescriptor) -> bool:
        return type_.has_base(TypeWrapper)

    def deserialize(self, json: JsonValue, type_: TypeDescriptor) -> DeserializationResult:
        raise UnsupportedOperationError("TypeWrapper cannot be deserialized")

    def serialize(self, value: Any, type_: TypeDescriptor) -> JsonValue:
        if value is None:
            raise NullArgumentError("value")
        if not isinstance(value, TypeWrapper):
            raise JsonSerializationError(
                ErrorTree.leaf(f"expected TypeWrapper, found: {type(value).__qualname__}")
            )
        descriptor = value.descriptor
        return self._resolver.resolve(descriptor).serialize(value.value, descriptor)

# src/jsonbind/application/record_converter.py
# Copyright (c) Jsonbind.
# SPDX-License-Identifier: MIT
"""Generated converters for structural record types.

Purpose:
    Map a record class (a fixed, ordered set of named and typed fields) to a
    JSON object with exactly those keys, and back. One converter is built per
    concrete :class:`TypeDescriptor`; for generic records the type arguments
    are substituted into every field type before the field converters are
    resolved, so ``Inner[str]`` with a field ``others: list[T]`` uses the
    converter for ``list[str]``.

Layer:
    application

Error reporting:
    Deserialization attempts every field and collects all failures. The
    resulting tree lists unexpected properties first (in document order), then
    the declared fields in declaration order, each with either
    ``MISSING_PROPERTY`` or the field converter's own error tree. A JSON value
    that is not an object fails immediately with one root-level message.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from jsonbind.domain.error_tree import ErrorTree, PathSegment
from jsonbind.domain.exceptions.conversion import (
    JsonSerializationError,
    NoConverterFoundError,
    NullArgumentError,
)
from jsonbind.domain.interfaces.converter import ConverterResolver, JsonConverter
from jsonbind.domain.interfaces.introspection import RecordDescription, RecordIntrospector
from jsonbind.domain.json_model import JsonObject, JsonValue
from jsonbind.domain.messages import MISSING_PROPERTY, UNEXPECTED_PROPERTY, expected_found
from jsonbind.domain.result import DeserializationResult, Failure, Success
from jsonbind.domain.type_descriptor import TypeDescriptor

__all__ = ["FieldDescriptor", "RecordConverter"]


@dataclass(frozen=True, slots=True)
class FieldDescriptor:
    """A record field with its type arguments substituted.

    Attributes:
        name: Field name, used as JSON key and as error path segment.
        type: Concrete field type.
        converter: Converter resolved for ``type`` (possibly a cycle proxy).
    """

    name: str
    type: TypeDescriptor
    converter: JsonConverter = field(compare=False, repr=False)


class RecordConverter(JsonConverter):
    """Converter for one concrete record type.

    Args:
        type_: The concrete record descriptor, e.g. ``Inner[str]``.
        resolver: Registry used to resolve every field converter.
        introspector: Describes and instantiates the record class.

    Raises:
        NoConverterFoundError: If the number of type arguments does not match
            the record's type parameters, or a field type cannot be resolved.
    """

    def __init__(
        self,
        type_: TypeDescriptor,
        resolver: ConverterResolver,
        introspector: RecordIntrospector,
    ) -> None:
        self._type = type_
        self._introspector = introspector
        self._description: RecordDescription = introspector.describe(type_.base)
        bindings = self._bindings(type_, self._description)

        fields: list[FieldDescriptor] = []
        for record_field in self._description.fields:
            field_type = record_field.type.substitute(bindings)
            try:
                converter = resolver.resolve(field_type)
            except NoConverterFoundError as exc:
                raise NoConverterFoundError(
                    f"cannot convert field {record_field.name!r} of {type_}: {exc}",
                    details={"type": str(type_), "field": record_field.name},
                ) from exc
            fields.append(FieldDescriptor(record_field.name, field_type, converter))
        self._fields = tuple(fields)
        self._field_names = frozenset(f.name for f in self._fields)

    @staticmethod
    def _bindings(
        type_: TypeDescriptor, description: RecordDescription
    ) -> dict[Any, TypeDescriptor]:
        parameters = description.type_parameters
        if not type_.args:
            # Raw use of a generic record; fields mentioning its parameters
            # fail to resolve with a pointed message.
            return {}
        if len(type_.args) != len(parameters):
            raise NoConverterFoundError(
                f"{type_} has {len(type_.args)} type argument(s), but "
                f"{description.record_class.__qualname__} declares {len(parameters)}",
                details={"type": str(type_)},
            )
        return dict(zip(parameters, type_.args, strict=True))

    @property
    def type(self) -> TypeDescriptor:
        return self._type

    @property
    def fields(self) -> tuple[FieldDescriptor, ...]:
        return self._fields

    def supports(self, type_: TypeDescriptor) -> bool:
        return type_ == self._type

    def deserialize(self, json: JsonValue, type_: TypeDescriptor) -> DeserializationResult:
        self.require_arguments(json=json, type=type_)
        if not isinstance(json, JsonObject):
            return Failure.of(expected_found("object", json))

        errors: list[tuple[PathSegment, ErrorTree]] = [
            (key, ErrorTree.leaf(UNEXPECTED_PROPERTY))
            for key in json.keys()
            if key not in self._field_names
        ]
        values: list[Any] = []
        for descriptor in self._fields:
            member = json.get(descriptor.name)
            if member is None:
                errors.append((descriptor.name, ErrorTree.leaf(MISSING_PROPERTY)))
                continue
            result = descriptor.converter.deserialize(member, descriptor.type)
            if isinstance(result, Failure):
                errors.append((descriptor.name, result.errors))
            else:
                values.append(result.value)

        if errors:
            return Failure(ErrorTree.node(errors))
        return self._construct(values)

    def _construct(self, values: Sequence[Any]) -> DeserializationResult:
        record_class = self._description.record_class
        try:
            return Success(self._introspector.construct(record_class, values))
        except (TypeError, ValueError) as exc:
            # Invariant checks of the record itself (e.g. __post_init__).
            return Failure.of(f"invalid {record_class.__qualname__}: {exc}")

    def serialize(self, value: Any, type_: TypeDescriptor) -> JsonValue:
        if value is None:
            raise NullArgumentError("value")
        record_class = self._description.record_class
        if not isinstance(value, record_class):
            raise JsonSerializationError(
                ErrorTree.leaf(
                    f"expected {record_class.__qualname__}, found: {type(value).__qualname__}"
                )
            )

        members: list[tuple[str, JsonValue]] = []
        errors: list[tuple[PathSegment, ErrorTree]] = []
        field_values = self._introspector.field_values(value, self._description)
        for descriptor, field_value in zip(self._fields, field_values, strict=True):
            try:
                members.append(
                    (descriptor.name, descriptor.converter.serialize(field_value, descriptor.type))
                )
            except NullArgumentError:
                errors.append((descriptor.name, ErrorTree.leaf("must not be None")))
            except JsonSerializationError as exc:
                errors.append((descriptor.name, exc.errors))

        if errors:
            raise JsonSerializationError(ErrorTree.node(errors))
        return JsonObject(tuple(members))

    def __repr__(self) -> str:
        return f"RecordConverter({self._type})"

# src/jsonbind/domain/interfaces/introspection.py
# Copyright (c) Jsonbind.
# SPDX-License-Identifier: MIT
"""Structural record description protocol.

Synopsis:
    The engine does not inspect classes itself. An injected introspector
    decides which classes are structural records, lists their fields in
    declaration order, and builds/dismantles instances.

Layer:
    domain/interfaces
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Protocol, TypeVar

from jsonbind.domain.type_descriptor import TypeDescriptor


@dataclass(frozen=True, slots=True)
class RecordField:
    """A declared record field.

    Attributes:
        name: Field name; also the JSON key and the error path segment.
        type: Declared type, possibly mentioning the record's type parameters.
    """

    name: str
    type: TypeDescriptor


@dataclass(frozen=True, slots=True)
class RecordDescription:
    """Ordered structure of a record class.

    Attributes:
        record_class: The described class.
        type_parameters: The class's type parameters in declaration order; the
            position of a parameter matches the position of its type argument in
            a parameterized :class:`TypeDescriptor`.
        fields: Declared fields in declaration order.
    """

    record_class: type
    type_parameters: tuple[TypeVar, ...]
    fields: tuple[RecordField, ...]


class RecordIntrospector(Protocol):
    """Describes and instantiates structural record types."""

    def is_record(self, cls: Any) -> bool:
        """Return whether ``cls`` is a structural record class."""
        ...

    def describe(self, cls: type) -> RecordDescription:
        """Return the ordered field list of ``cls``."""
        ...

    def construct(self, cls: type, values: Sequence[Any]) -> Any:
        """Instantiate ``cls`` from field values given in declaration order."""
        ...

    def field_values(self, instance: Any, description: RecordDescription) -> list[Any]:
        """Return the field values of ``instance`` in declaration order."""
        ...

# src/jsonbind/application/querystring.py
# Copyright (c) Jsonbind.
# SPDX-License-Identifier: MIT
"""Querystring-to-record parsing.

Purpose:
    Turn already tokenized querystring parameters (``name -> [values]``) into a
    record instance, reusing the from-string parsers for every field and
    reporting problems as an :class:`ErrorTree` keyed by parameter name.

Layer:
    application

Notes:
    - Splitting a raw URL into parameters is the caller's job.
    - A field declared ``X | None`` may be absent; every other field must occur
      exactly once.
    - Parsers are normally auto-generated for record types; the registry then
      only serves as a cache. Manually registered parsers take precedence.
"""

from __future__ import annotations

import threading
import typing
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Protocol

from jsonbind.application.string_parsers import FromStringParserRegistry
from jsonbind.domain.error_tree import ErrorTree, PathSegment
from jsonbind.domain.exceptions.conversion import (
    FromStringParseError,
    NoConverterFoundError,
    NullArgumentError,
    RegistryNotSealedError,
    RegistrySealedError,
)
from jsonbind.domain.interfaces.introspection import RecordIntrospector
from jsonbind.domain.interfaces.string_parser import FromStringParser
from jsonbind.domain.messages import DUPLICATE_PARAMETER, MISSING_PARAMETER, UNEXPECTED_PARAMETER
from jsonbind.domain.result import DeserializationResult, Failure, Success
from jsonbind.domain.type_descriptor import TypeDescriptor

__all__ = ["QuerystringParser", "QuerystringParserRegistry", "QuerystringToRecordParser"]

type QuerystringParameters = Mapping[str, Sequence[str]]


class QuerystringParser(Protocol):
    """Parses a whole querystring into a value."""

    def supports(self, type_: TypeDescriptor) -> bool: ...

    def parse(
        self, parameters: QuerystringParameters, type_: TypeDescriptor
    ) -> DeserializationResult: ...


@dataclass(frozen=True, slots=True)
class _QuerystringField:
    name: str
    value_type: TypeDescriptor
    optional: bool
    parser: FromStringParser


class QuerystringToRecordParser:
    """Generated querystring parser for one record type.

    Args:
        type_: The concrete record descriptor.
        string_parsers: Registry resolving a from-string parser per field.
        introspector: Describes and instantiates the record class.

    Raises:
        NoConverterFoundError: If a field type has no from-string parser.
    """

    def __init__(
        self,
        type_: TypeDescriptor,
        string_parsers: FromStringParserRegistry,
        introspector: RecordIntrospector,
    ) -> None:
        self._type = type_
        self._introspector = introspector
        self._description = introspector.describe(type_.base)
        parameters = self._description.type_parameters
        if type_.args and len(type_.args) != len(parameters):
            raise NoConverterFoundError(
                f"{type_} has {len(type_.args)} type argument(s), but "
                f"{self._description.record_class.__qualname__} declares {len(parameters)}",
                details={"type": str(type_)},
            )
        bindings = dict(zip(parameters, type_.args, strict=True)) if type_.args else {}

        fields: list[_QuerystringField] = []
        for record_field in self._description.fields:
            field_type = record_field.type.substitute(bindings)
            optional = field_type.has_base(typing.Optional)
            value_type = field_type.args[0] if optional else field_type
            fields.append(
                _QuerystringField(
                    record_field.name, value_type, optional, string_parsers.resolve(value_type)
                )
            )
        self._fields = tuple(fields)
        self._field_names = frozenset(f.name for f in fields)

    def supports(self, type_: TypeDescriptor) -> bool:
        return type_ == self._type

    def parse(
        self, parameters: QuerystringParameters, type_: TypeDescriptor
    ) -> DeserializationResult:
        if parameters is None:
            raise NullArgumentError("parameters")

        errors: list[tuple[PathSegment, ErrorTree]] = [
            (name, ErrorTree.leaf(UNEXPECTED_PARAMETER))
            for name in parameters
            if name not in self._field_names
        ]
        values: list[Any] = []
        for descriptor in self._fields:
            texts = parameters.get(descriptor.name) or ()
            if not texts:
                if descriptor.optional:
                    values.append(None)
                else:
                    errors.append((descriptor.name, ErrorTree.leaf(MISSING_PARAMETER)))
                continue
            if len(texts) > 1:
                errors.append((descriptor.name, ErrorTree.leaf(DUPLICATE_PARAMETER)))
                continue
            try:
                values.append(descriptor.parser.parse(texts[0], descriptor.value_type))
            except FromStringParseError as exc:
                errors.append((descriptor.name, ErrorTree.leaf(str(exc))))

        if errors:
            return Failure(ErrorTree.node(errors))
        record_class = self._description.record_class
        try:
            return Success(self._introspector.construct(record_class, values))
        except (TypeError, ValueError) as exc:
            return Failure.of(f"invalid {record_class.__qualname__}: {exc}")


class QuerystringParserRegistry:
    """Registry and cache of :class:`QuerystringParser` objects.

    Once parsers are requested, the from-string parser registry should not be
    modified anymore, because its parsers get baked into generated parsers.

    Args:
        string_parsers: Registry used by generated parsers for single fields.
        introspector: Decides which types are records.
    """

    def __init__(
        self, string_parsers: FromStringParserRegistry, introspector: RecordIntrospector
    ) -> None:
        self._string_parsers = string_parsers
        self._introspector = introspector
        # Only mutated during the configuration phase.
        self._parsers: list[QuerystringParser] = []
        self._cache: dict[TypeDescriptor, QuerystringParser] = {}
        self._lock = threading.Lock()
        self._sealed = False

    def register(self, parser: QuerystringParser) -> None:
        if parser is None:
            raise NullArgumentError("parser")
        if self._sealed:
            raise RegistrySealedError("querystring parser registry is sealed")
        self._parsers.append(parser)

    def clear(self) -> None:
        if self._sealed:
            raise RegistrySealedError("querystring parser registry is sealed")
        self._parsers.clear()
        with self._lock:
            self._cache.clear()

    def seal(self) -> None:
        self._sealed = True

    @property
    def is_sealed(self) -> bool:
        return self._sealed

    def supports(self, type_: Any) -> bool:
        descriptor = _descriptor(type_)
        if self.supports_auto_generation(descriptor):
            return True
        with self._lock:
            if descriptor in self._cache:
                return True
        return any(parser.supports(descriptor) for parser in self._parsers)

    def supports_auto_generation(self, type_: Any) -> bool:
        descriptor = _descriptor(type_)
        return descriptor.is_class and self._introspector.is_record(descriptor.base)

    def resolve(self, type_: Any) -> QuerystringParser:
        """Return the querystring parser for ``type_``.

        Raises:
            RegistryNotSealedError: If called before :meth:`seal`.
            NoConverterFoundError: If no parser is registered and ``type_`` is
                not a record type.
        """
        descriptor = _descriptor(type_)
        if not self._sealed:
            raise RegistryNotSealedError(
                "querystring parser registry must be sealed before resolving "
                f"(requested {descriptor})"
            )
        with self._lock:
            parser = self._cache.get(descriptor)
        if parser is not None:
            return parser

        for candidate in self._parsers:
            if candidate.supports(descriptor):
                return self._store(descriptor, candidate)

        if self.supports_auto_generation(descriptor):
            generated = QuerystringToRecordParser(
                descriptor, self._string_parsers, self._introspector
            )
            return self._store(descriptor, generated)

        raise NoConverterFoundError(
            "no querystring parser found and can only auto-generate them for record "
            f"types, found type: {descriptor}",
            details={"type": str(descriptor)},
        )

    def parse(self, parameters: QuerystringParameters, type_: Any) -> DeserializationResult:
        descriptor = _descriptor(type_)
        return self.resolve(descriptor).parse(parameters, descriptor)

    def _store(self, descriptor: TypeDescriptor, parser: QuerystringParser) -> QuerystringParser:
        with self._lock:
            return self._cache.setdefault(descriptor, parser)


def _descriptor(type_: Any) -> TypeDescriptor:
    if type_ is None:
        raise NullArgumentError("type")
    return TypeDescriptor.of(type_)

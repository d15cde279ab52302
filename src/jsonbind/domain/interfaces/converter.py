# src/jsonbind/domain/interfaces/converter.py
# Copyright (c) Jsonbind.
# SPDX-License-Identifier: MIT
"""Converter contract.

Synopsis:
    A converter turns JSON into values of the types it supports (read side) and
    values into JSON (write side). Built-in converters, user converters,
    generated record converters and the type-wrapper adapter all implement
    this contract; the registry selects among them through :meth:`supports`.

Layer:
    domain/interfaces
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Protocol

from jsonbind.domain.exceptions.conversion import NullArgumentError
from jsonbind.domain.json_model import JsonValue
from jsonbind.domain.result import DeserializationResult
from jsonbind.domain.type_descriptor import TypeDescriptor

__all__ = ["ConverterResolver", "JsonConverter", "JsonDeserializer", "JsonSerializer"]


class JsonDeserializer(Protocol):
    """Read side: JSON to value."""

    def supports(self, type_: TypeDescriptor) -> bool: ...

    def deserialize(self, json: JsonValue, type_: TypeDescriptor) -> DeserializationResult: ...


class JsonSerializer(Protocol):
    """Write side: value to JSON."""

    def supports(self, type_: TypeDescriptor) -> bool: ...

    def serialize(self, value: Any, type_: TypeDescriptor) -> JsonValue: ...


class JsonConverter(ABC):
    """Combined read/write converter.

    Implementations must be stateless with respect to individual conversions:
    after the owning registry is sealed they are shared across threads.

    Contract:
        * :meth:`deserialize` never raises for malformed input; it returns a
          :class:`~jsonbind.domain.result.Failure` instead.
        * :meth:`serialize` raises :class:`NullArgumentError` for ``None`` unless
          the converter explicitly models absence, and
          :class:`~jsonbind.domain.exceptions.JsonSerializationError` when the
          value does not fit the type.
    """

    @abstractmethod
    def supports(self, type_: TypeDescriptor) -> bool:
        """Return whether this converter handles ``type_``."""

    @abstractmethod
    def deserialize(self, json: JsonValue, type_: TypeDescriptor) -> DeserializationResult:
        """Convert ``json`` into a value of ``type_``."""

    @abstractmethod
    def serialize(self, value: Any, type_: TypeDescriptor) -> JsonValue:
        """Convert ``value`` (declared as ``type_``) into JSON."""

    @staticmethod
    def require_arguments(**arguments: Any) -> None:
        """Raise :class:`NullArgumentError` for the first ``None`` argument."""
        for name, argument in arguments.items():
            if argument is None:
                raise NullArgumentError(name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class ConverterResolver(Protocol):
    """What composite converters need from the registry."""

    def resolve(self, type_: Any) -> JsonConverter: ...

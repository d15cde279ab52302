# src/jsonbind/domain/json_model.py
# Copyright (c) Jsonbind.
# SPDX-License-Identifier: MIT
"""Immutable JSON value model.

Purpose:
    Represent parsed JSON as a closed, immutable tagged union so converters can
    pattern-match on the variant instead of guessing from Python containers.

Variants:
    * :class:`JsonNull`: the JSON ``null`` literal ("no value").
    * :class:`JsonBoolean`: ``true`` / ``false``.
    * :class:`JsonNumber` : integer, binary float or decimal.
    * :class:`JsonString` : text.
    * :class:`JsonArray`  : ordered sequence of values.
    * :class:`JsonObject` : ordered members with unique, case-sensitive keys.

Layer:
    domain

Notes:
    - No variant ever holds ``None`` in place of a value; absence of a value is
      expressed with :class:`JsonNull`.
    - Equality is structural.
"""

from __future__ import annotations

import json
import math
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, ClassVar

from jsonbind.types import PlainJson

__all__ = [
    "JsonArray",
    "JsonBoolean",
    "JsonNull",
    "JsonNumber",
    "JsonObject",
    "JsonString",
    "JsonValue",
]


class JsonValue:
    """Base class of all JSON variants."""

    __slots__ = ()

    kind: ClassVar[str] = "value"

    def render(self) -> str:
        """Return compact JSON text for this value (used in diagnostics)."""
        raise NotImplementedError

    def to_python(self) -> PlainJson:
        """Return the equivalent plain-Python JSON data."""
        raise NotImplementedError

    def __str__(self) -> str:
        return self.render()

    @staticmethod
    def from_python(obj: Any) -> JsonValue:
        """Build a JSON value from plain-Python JSON data.

        Args:
            obj: ``None``, ``bool``, number, ``str``, list/tuple, a mapping with
                string keys, or an existing :class:`JsonValue`.

        Returns:
            JsonValue: The equivalent immutable tree.

        Raises:
            TypeError: If ``obj`` (or a nested item) has no JSON equivalent.
        """
        if isinstance(obj, JsonValue):
            return obj
        if obj is None:
            return JsonNull.INSTANCE
        if isinstance(obj, bool):
            return JsonBoolean.of(obj)
        if isinstance(obj, int | float | Decimal):
            return JsonNumber(obj)
        if isinstance(obj, str):
            return JsonString(obj)
        if isinstance(obj, list | tuple):
            return JsonArray(tuple(JsonValue.from_python(item) for item in obj))
        if isinstance(obj, Mapping):
            return JsonObject.from_mapping(
                {key: JsonValue.from_python(value) for key, value in obj.items()}
            )
        raise TypeError(f"Object of type {type(obj).__name__} has no JSON equivalent")


@dataclass(frozen=True, slots=True)
class JsonNull(JsonValue):
    """The JSON ``null`` literal. Use :attr:`INSTANCE`."""

    kind: ClassVar[str] = "null"
    INSTANCE: ClassVar[JsonNull]

    def render(self) -> str:
        return "null"

    def to_python(self) -> PlainJson:
        return None


JsonNull.INSTANCE = JsonNull()


@dataclass(frozen=True, slots=True)
class JsonBoolean(JsonValue):
    """A JSON boolean."""

    value: bool

    kind: ClassVar[str] = "boolean"
    TRUE: ClassVar[JsonBoolean]
    FALSE: ClassVar[JsonBoolean]

    def __post_init__(self) -> None:
        if not isinstance(self.value, bool):
            raise TypeError(f"JsonBoolean requires a bool, got {type(self.value).__name__}")

    @staticmethod
    def of(value: bool) -> JsonBoolean:
        return JsonBoolean.TRUE if value else JsonBoolean.FALSE

    def render(self) -> str:
        return "true" if self.value else "false"

    def to_python(self) -> PlainJson:
        return self.value


JsonBoolean.TRUE = JsonBoolean(True)
JsonBoolean.FALSE = JsonBoolean(False)


@dataclass(frozen=True, slots=True)
class JsonNumber(JsonValue):
    """A JSON number.

    Attributes:
        value: ``int`` for integer literals, ``Decimal`` for lossless decimal
            literals, or a finite ``float``. ``bool`` is rejected even though it
            subclasses ``int``.
    """

    value: int | float | Decimal

    kind: ClassVar[str] = "number"

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int | float | Decimal):
            raise TypeError(f"JsonNumber requires a number, got {type(self.value).__name__}")
        if isinstance(self.value, float) and not math.isfinite(self.value):
            raise ValueError("JSON numbers must be finite")
        if isinstance(self.value, Decimal) and not self.value.is_finite():
            raise ValueError("JSON numbers must be finite")

    @property
    def is_integral(self) -> bool:
        """Whether the number has no fractional part (``12`` and ``12.0`` both count)."""
        if isinstance(self.value, int):
            return True
        if isinstance(self.value, float):
            return self.value.is_integer()
        # No int() here: 1e100000000 would be expanded digit by digit.
        return self.value == self.value.to_integral_value()

    def render(self) -> str:
        if isinstance(self.value, float):
            return repr(self.value)
        return str(self.value)

    def to_python(self) -> PlainJson:
        return self.value


@dataclass(frozen=True, slots=True)
class JsonString(JsonValue):
    """A JSON string."""

    value: str

    kind: ClassVar[str] = "string"

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(f"JsonString requires a str, got {type(self.value).__name__}")

    def render(self) -> str:
        return json.dumps(self.value, ensure_ascii=False)

    def to_python(self) -> PlainJson:
        return self.value


@dataclass(frozen=True, slots=True)
class JsonArray(JsonValue):
    """An ordered JSON array."""

    elements: tuple[JsonValue, ...] = ()

    kind: ClassVar[str] = "array"

    def __post_init__(self) -> None:
        elements = tuple(self.elements)
        for element in elements:
            if not isinstance(element, JsonValue):
                raise TypeError(
                    f"JsonArray elements must be JsonValue, got {type(element).__name__}"
                )
        object.__setattr__(self, "elements", elements)

    @staticmethod
    def of(*elements: JsonValue) -> JsonArray:
        return JsonArray(elements)

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[JsonValue]:
        return iter(self.elements)

    def __getitem__(self, index: int) -> JsonValue:
        return self.elements[index]

    def render(self) -> str:
        return "[" + ",".join(element.render() for element in self.elements) + "]"

    def to_python(self) -> PlainJson:
        return [element.to_python() for element in self.elements]


@dataclass(frozen=True, slots=True)
class JsonObject(JsonValue):
    """A JSON object with ordered, unique, case-sensitive keys.

    Attributes:
        members: ``(key, value)`` pairs in document order.

    Raises:
        ValueError: If a key occurs more than once.
        TypeError: If a key is not a string or a value is not a :class:`JsonValue`.
    """

    members: tuple[tuple[str, JsonValue], ...] = ()
    _index: dict[str, JsonValue] = field(
        init=False, repr=False, compare=False, hash=False, default_factory=dict
    )

    kind: ClassVar[str] = "object"

    def __post_init__(self) -> None:
        members = tuple((key, value) for key, value in self.members)
        index: dict[str, JsonValue] = {}
        for key, value in members:
            if not isinstance(key, str):
                raise TypeError(f"JsonObject keys must be str, got {type(key).__name__}")
            if not isinstance(value, JsonValue):
                raise TypeError(
                    f"JsonObject values must be JsonValue, got {type(value).__name__}"
                )
            if key in index:
                raise ValueError(f"duplicate key in JSON object: {key!r}")
            index[key] = value
        object.__setattr__(self, "members", members)
        object.__setattr__(self, "_index", index)

    @staticmethod
    def of(*keys_and_values: str | JsonValue) -> JsonObject:
        """Build an object from alternating keys and values.

        Example:
            ``JsonObject.of("myInt", JsonNumber(1), "myString", JsonString("x"))``
        """
        if len(keys_and_values) % 2:
            raise ValueError("JsonObject.of() requires an even number of arguments")
        pairs = zip(keys_and_values[0::2], keys_and_values[1::2], strict=True)
        return JsonObject(tuple(pairs))  # type: ignore[arg-type]

    @staticmethod
    def from_mapping(mapping: Mapping[str, JsonValue]) -> JsonObject:
        return JsonObject(tuple(mapping.items()))

    def get(self, key: str) -> JsonValue | None:
        return self._index.get(key)

    def keys(self) -> list[str]:
        return [key for key, _ in self.members]

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __getitem__(self, key: str) -> JsonValue:
        return self._index[key]

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def render(self) -> str:
        body = ",".join(
            f"{json.dumps(key, ensure_ascii=False)}:{value.render()}" for key, value in self.members
        )
        return "{" + body + "}"

    def to_python(self) -> PlainJson:
        return {key: value.to_python() for key, value in self.members}

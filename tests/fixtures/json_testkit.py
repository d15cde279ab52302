"""
JSON Test Kit (unit helpers)

Purpose:
    Terse builders for JSON trees and assertions over flattened error lists,
    so tests read as ``(path, message)`` pairs.

Layer: tests/fixtures
"""

from __future__ import annotations

from typing import Any

from jsonbind.application.registry import ConverterRegistry
from jsonbind.domain.json_model import JsonValue
from jsonbind.domain.result import DeserializationResult, Failure, Success


def j(data: Any) -> JsonValue:
    """Build a :class:`JsonValue` from plain Python JSON data."""
    return JsonValue.from_python(data)


def errors_of(result: DeserializationResult) -> list[tuple[str, str]]:
    """Return ``(path, message)`` pairs of a failed result."""
    assert isinstance(result, Failure), f"expected a failure, got {result!r}"
    return [(error.path, error.message) for error in result.flatten()]


def value_of(result: DeserializationResult) -> Any:
    """Return the value of a successful result."""
    assert isinstance(result, Success), f"expected a success, got {result!r}"
    return result.value


def assert_round_trip(registry: ConverterRegistry, data: Any, type_: Any) -> Any:
    """Deserialize ``data`` as ``type_``, serialize it back and compare.

    Returns:
        The deserialized value.
    """
    json = j(data)
    value = value_of(registry.deserialize(json, type_))
    assert registry.serialize(value, type_) == json
    return value

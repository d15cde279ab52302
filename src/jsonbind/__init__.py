# src/jsonbind/__init__.py
# Copyright (c) Jsonbind.
# SPDX-License-Identifier: MIT
"""Type-directed JSON conversion.

Typical usage:
    from jsonbind import create_registry, parse_json

    registry = create_registry()
    registry.seal()
    result = registry.deserialize(parse_json(text), Order)
    order = result.unwrap()
"""

from __future__ import annotations

from jsonbind.application.converters import FieldMustBeNull, TypeWrapper
from jsonbind.application.querystring import QuerystringParserRegistry
from jsonbind.application.registry import ConverterRegistry
from jsonbind.application.string_parsers import FromStringParserRegistry
from jsonbind.bootstrap import create_querystring_registry, create_registry
from jsonbind.domain.error_tree import ErrorTree, FlattenedError
from jsonbind.domain.exceptions import (
    JsonBindError,
    JsonSerializationError,
    JsonSyntaxError,
    JsonValidationError,
    NoConverterFoundError,
    NullArgumentError,
)
from jsonbind.domain.interfaces.converter import JsonConverter
from jsonbind.domain.json_model import (
    JsonArray,
    JsonBoolean,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
)
from jsonbind.domain.result import DeserializationResult, Failure, Success
from jsonbind.domain.type_descriptor import TypeDescriptor
from jsonbind.infrastructure.codec.json_text import parse_json, print_json

__all__ = [
    "ConverterRegistry",
    "DeserializationResult",
    "ErrorTree",
    "Failure",
    "FieldMustBeNull",
    "FlattenedError",
    "FromStringParserRegistry",
    "JsonArray",
    "JsonBindError",
    "JsonBoolean",
    "JsonConverter",
    "JsonNull",
    "JsonNumber",
    "JsonObject",
    "JsonSerializationError",
    "JsonString",
    "JsonSyntaxError",
    "JsonValidationError",
    "JsonValue",
    "NoConverterFoundError",
    "NullArgumentError",
    "QuerystringParserRegistry",
    "Success",
    "TypeDescriptor",
    "TypeWrapper",
    "create_querystring_registry",
    "create_registry",
    "parse_json",
    "print_json",
]

# src/jsonbind/domain/exceptions/__init__.py
# Copyright (c) Jsonbind.
# SPDX-License-Identifier: MIT
"""
Exception package export.

    from jsonbind.domain.exceptions import NoConverterFoundError, NullArgumentError
"""

from __future__ import annotations

from .base import JsonBindError
from .conversion import (
    FromStringParseError,
    JsonSerializationError,
    JsonSyntaxError,
    JsonValidationError,
    NoConverterFoundError,
    NullArgumentError,
    RegistryNotSealedError,
    RegistrySealedError,
    UnresolvedProxyError,
    UnsupportedOperationError,
)

__all__ = [
    "FromStringParseError",
    "JsonBindError",
    "JsonSerializationError",
    "JsonSyntaxError",
    "JsonValidationError",
    "NoConverterFoundError",
    "NullArgumentError",
    "RegistryNotSealedError",
    "RegistrySealedError",
    "UnresolvedProxyError",
    "UnsupportedOperationError",
]

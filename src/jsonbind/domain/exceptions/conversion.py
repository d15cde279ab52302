# src/jsonbind/domain/exceptions/conversion.py
# Copyright (c) Jsonbind.
# SPDX-License-Identifier: MIT
"""
Conversion Exceptions

Purpose:
    Error taxonomy of the conversion engine. Validation of untrusted input is
    reported as a value (:class:`~jsonbind.domain.result.DeserializationResult`);
    the exceptions below cover programmer and configuration errors, plus
    :class:`JsonValidationError` for callers that prefer to unwrap results.

Layer: domain/exceptions
"""
from __future__ import annotations

from jsonbind.domain.error_tree import ErrorTree, FlattenedError

from .base import JsonBindError


class NoConverterFoundError(JsonBindError):
    """No registered or derivable converter exists for a requested type."""

    code = "NO_CONVERTER_FOUND"


class NullArgumentError(JsonBindError, TypeError):
    """A required argument (value, type or JSON) was ``None``."""

    code = "NULL_ARGUMENT"

    def __init__(self, argument: str) -> None:
        super().__init__(f"{argument} must not be None", details={"argument": argument})
        self.argument = argument


class UnsupportedOperationError(JsonBindError, NotImplementedError):
    """The converter does not support the requested direction."""

    code = "UNSUPPORTED_OPERATION"


class RegistrySealedError(JsonBindError):
    """Configuration was attempted after the registry was sealed."""

    code = "REGISTRY_SEALED"


class RegistryNotSealedError(JsonBindError):
    """A run-time lookup was attempted before the registry was sealed."""

    code = "REGISTRY_NOT_SEALED"


class UnresolvedProxyError(JsonBindError):
    """A cycle placeholder was used before its target converter was built."""

    code = "UNRESOLVED_PROXY"


class JsonSyntaxError(JsonBindError, ValueError):
    """JSON text could not be parsed."""

    code = "JSON_SYNTAX_ERROR"


class _ErrorTreeCarrier(JsonBindError):
    """Shared behavior for exceptions that carry an :class:`ErrorTree`."""

    def __init__(self, errors: ErrorTree) -> None:
        super().__init__(str(errors), details={"errors": [e.path for e in errors.flatten()]})
        self.errors = errors

    def flatten(self) -> list[FlattenedError]:
        return self.errors.flatten()


class JsonValidationError(_ErrorTreeCarrier):
    """Untrusted JSON failed validation (raised only when a result is unwrapped)."""

    code = "VALIDATION_FAILURE"


class JsonSerializationError(_ErrorTreeCarrier):
    """A value handed to a serializer does not fit its declared type."""

    code = "SERIALIZATION_FAILURE"


class FromStringParseError(JsonBindError, ValueError):
    """Text could not be parsed into the requested scalar type."""

    code = "FROM_STRING_PARSE_ERROR"

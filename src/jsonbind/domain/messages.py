# src/jsonbind/domain/messages.py
# Copyright (c) Jsonbind.
# SPDX-License-Identifier: MIT
"""Stable error messages.

These strings are part of the public contract: tests and callers key
flattened errors to ``(path, message)`` pairs such as ``MISSING_PROPERTY`` at
path ``"myString"``.
"""

from __future__ import annotations

from typing import Final

from jsonbind.domain.json_model import JsonValue

__all__ = [
    "DUPLICATE_PARAMETER",
    "MISSING_PARAMETER",
    "MISSING_PROPERTY",
    "UNEXPECTED_PARAMETER",
    "UNEXPECTED_PROPERTY",
    "VALUE_OUT_OF_RANGE",
    "expected_found",
]

# Record (JSON object) errors.
MISSING_PROPERTY: Final[str] = "missing property"
UNEXPECTED_PROPERTY: Final[str] = "unexpected property"

# Querystring / path parameter errors.
MISSING_PARAMETER: Final[str] = "missing parameter"
UNEXPECTED_PARAMETER: Final[str] = "unexpected parameter"
DUPLICATE_PARAMETER: Final[str] = "duplicate parameter"

VALUE_OUT_OF_RANGE: Final[str] = "value out of range"


def expected_found(expected: str, found: JsonValue | str) -> str:
    """Render the standard ``expected X, found: Y`` message.

    Args:
        expected: Human description of the expected shape (e.g. ``"integer"``).
        found: The offending JSON value (rendered as compact JSON) or raw text.

    Returns:
        str: e.g. ``'expected integer, found: "foo"'``.
    """
    rendered = found.render() if isinstance(found, JsonValue) else found
    return f"expected {expected}, found: {rendered}"

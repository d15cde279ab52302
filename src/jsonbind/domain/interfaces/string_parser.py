# src/jsonbind/domain/interfaces/string_parser.py
# Copyright (c) Jsonbind.
# SPDX-License-Identifier: MIT
"""From-string parser protocol.

Synopsis:
    Parses scalar values that arrive as text (querystring or path parameters)
    rather than as JSON. Implementations raise
    :class:`~jsonbind.domain.exceptions.FromStringParseError` for bad input.

Layer:
    domain/interfaces
"""

from __future__ import annotations

from typing import Any, Protocol

from jsonbind.domain.type_descriptor import TypeDescriptor


class FromStringParser(Protocol):
    """Parses text into values of the supported types."""

    def supports(self, type_: TypeDescriptor) -> bool: ...

    def parse(self, text: str, type_: TypeDescriptor) -> Any: ...

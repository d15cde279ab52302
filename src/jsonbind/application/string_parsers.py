# src/jsonbind/application/string_parsers.py
# Copyright (c) Jsonbind.
# SPDX-License-Identifier: MIT
"""From-string parsers and their registry.

Purpose:
    Parse scalar values that arrive as text (querystring or path parameters).
    The registry mirrors :class:`~jsonbind.application.registry.ConverterRegistry`:
    parsers are tried in registration order and the first match is cached per
    type. There is no auto-generation.

Layer:
    application
"""

from __future__ import annotations

import math
import threading
from typing import Any

from jsonbind.domain.exceptions.conversion import (
    FromStringParseError,
    NoConverterFoundError,
    NullArgumentError,
    RegistryNotSealedError,
    RegistrySealedError,
)
from jsonbind.domain.interfaces.string_parser import FromStringParser
from jsonbind.domain.type_descriptor import TypeDescriptor

__all__ = [
    "BooleanFromStringParser",
    "FloatFromStringParser",
    "FromStringParserRegistry",
    "IntegerFromStringParser",
    "StringFromStringParser",
    "default_string_parsers",
]


class StringFromStringParser:
    """Returns the text unchanged."""

    def supports(self, type_: TypeDescriptor) -> bool:
        return type_.has_base(str)

    def parse(self, text: str, type_: TypeDescriptor) -> Any:
        return text


class IntegerFromStringParser:
    """Parses optionally signed decimal integers."""

    def supports(self, type_: TypeDescriptor) -> bool:
        return type_.has_base(int)

    def parse(self, text: str, type_: TypeDescriptor) -> Any:
        digits = text[1:] if text[:1] in ("+", "-") else text
        if not digits.isdecimal() or not digits.isascii():
            raise FromStringParseError(f"expected integer, found: {text!r}")
        try:
            return int(text)
        except ValueError:
            # sys.get_int_max_str_digits() caps the conversion.
            raise FromStringParseError(
                f"expected integer, found: {len(digits)} digits, which is too many"
            ) from None


class FloatFromStringParser:
    """Parses finite decimal numbers."""

    def supports(self, type_: TypeDescriptor) -> bool:
        return type_.has_base(float)

    def parse(self, text: str, type_: TypeDescriptor) -> Any:
        try:
            value = float(text)
        except ValueError:
            raise FromStringParseError(f"expected number, found: {text!r}") from None
        if not math.isfinite(value):
            raise FromStringParseError(f"expected finite number, found: {text!r}")
        return value


class BooleanFromStringParser:
    """Parses the literals ``true`` and ``false``."""

    def supports(self, type_: TypeDescriptor) -> bool:
        return type_.has_base(bool)

    def parse(self, text: str, type_: TypeDescriptor) -> Any:
        if text == "true":
            return True
        if text == "false":
            return False
        raise FromStringParseError(f"expected true or false, found: {text!r}")


def default_string_parsers() -> list[FromStringParser]:
    return [
        StringFromStringParser(),
        IntegerFromStringParser(),
        FloatFromStringParser(),
        BooleanFromStringParser(),
    ]


class FromStringParserRegistry:
    """Registry of :class:`FromStringParser` objects."""

    def __init__(self) -> None:
        # Only mutated during the configuration phase.
        self._parsers: list[FromStringParser] = []
        self._cache: dict[TypeDescriptor, FromStringParser] = {}
        self._lock = threading.Lock()
        self._sealed = False

    # ------------------------------------------------------------------ #
    # Configuration phase                                                #
    # ------------------------------------------------------------------ #

    def register(self, parser: FromStringParser) -> None:
        if parser is None:
            raise NullArgumentError("parser")
        if self._sealed:
            raise RegistrySealedError("from-string parser registry is sealed")
        self._parsers.append(parser)

    def clear(self) -> None:
        if self._sealed:
            raise RegistrySealedError("from-string parser registry is sealed")
        self._parsers.clear()
        with self._lock:
            self._cache.clear()

    def seal(self) -> None:
        self._sealed = True

    @property
    def is_sealed(self) -> bool:
        return self._sealed

    # ------------------------------------------------------------------ #
    # Run-time lookups                                                   #
    # ------------------------------------------------------------------ #

    def supports(self, type_: Any) -> bool:
        descriptor = _descriptor(type_)
        with self._lock:
            if descriptor in self._cache:
                return True
        return any(parser.supports(descriptor) for parser in self._parsers)

    def resolve(self, type_: Any) -> FromStringParser:
        """Return the parser for ``type_``.

        Raises:
            RegistryNotSealedError: If called before :meth:`seal`.
            NoConverterFoundError: If no registered parser supports the type.
        """
        descriptor = _descriptor(type_)
        if not self._sealed:
            raise RegistryNotSealedError(
                "from-string parser registry must be sealed before resolving "
                f"(requested {descriptor})"
            )
        with self._lock:
            parser = self._cache.get(descriptor)
        if parser is not None:
            return parser
        for candidate in self._parsers:
            if candidate.supports(descriptor):
                with self._lock:
                    return self._cache.setdefault(descriptor, candidate)
        raise NoConverterFoundError(
            f"no from-string parser found for type: {descriptor}",
            details={"type": str(descriptor)},
        )

    def parse(self, text: str, type_: Any) -> Any:
        """Parse ``text`` as ``type_``.

        Raises:
            FromStringParseError: If the text is malformed.
        """
        if text is None:
            raise NullArgumentError("text")
        descriptor = _descriptor(type_)
        return self.resolve(descriptor).parse(text, descriptor)


def _descriptor(type_: Any) -> TypeDescriptor:
    if type_ is None:
        raise NullArgumentError("type")
    return TypeDescriptor.of(type_)

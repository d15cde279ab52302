# src/jsonbind/application/converters/defaults.py
# Copyright (c) Jsonbind.
# SPDX-License-Identifier: MIT
"""Default converter set."""

from __future__ import annotations

from jsonbind.domain.interfaces.converter import ConverterResolver, JsonConverter

from .composites import ListConverter, OptionalConverter
from .helper_types import FieldMustBeNullConverter, TypeWrapperConverter
from .passthrough import JsonValueConverter
from .scalars import (
    BooleanConverter,
    FloatConverter,
    IntegerConverter,
    NoneConverter,
    StringConverter,
)

__all__ = ["default_converters"]


def default_converters(
    resolver: ConverterResolver,
    *,
    integer_bits: int = 64,
    allow_integral_floats: bool = True,
) -> list[JsonConverter]:
    """Return the built-in converters in registration order.

    Args:
        resolver: Registry handed to composite converters for element lookups.
        integer_bits: Width of the ``int`` converter.
        allow_integral_floats: Whether ``int`` accepts numbers like ``12.0``.
    """
    return [
        NoneConverter(),
        BooleanConverter(),
        IntegerConverter(integer_bits, allow_integral_floats=allow_integral_floats),
        FloatConverter(),
        StringConverter(),
        JsonValueConverter(),
        ListConverter(resolver),
        OptionalConverter(resolver),
        TypeWrapperConverter(resolver),
        FieldMustBeNullConverter(),
    ]

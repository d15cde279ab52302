# src/jsonbind/application/converters/__init__.py
# Copyright (c) Jsonbind.
# SPDX-License-Identifier: MIT
"""
Built-in converters export.

    from jsonbind.application.converters import IntegerConverter, ListConverter
"""

from __future__ import annotations

from .composites import ListConverter, OptionalConverter
from .defaults import default_converters
from .helper_types import FieldMustBeNull, FieldMustBeNullConverter, TypeWrapper, TypeWrapperConverter
from .passthrough import JsonValueConverter
from .scalars import BooleanConverter, FloatConverter, IntegerConverter, NoneConverter, StringConverter

__all__ = [
    "BooleanConverter",
    "FieldMustBeNull",
    "FieldMustBeNullConverter",
    "FloatConverter",
    "IntegerConverter",
    "JsonValueConverter",
    "ListConverter",
    "NoneConverter",
    "OptionalConverter",
    "StringConverter",
    "TypeWrapper",
    "TypeWrapperConverter",
    "default_converters",
]

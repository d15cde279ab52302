# src/jsonbind/types.py
# Copyright (c) Jsonbind.
# SPDX-License-Identifier: MIT
"""Project-wide JSON typing helpers.

These aliases model plain-Python JSON data (the shape produced by
``json.loads``) and are used at the boundary between the immutable
:mod:`jsonbind.domain.json_model` tree and ordinary Python containers.
"""

from __future__ import annotations

from decimal import Decimal

type PlainJsonPrimitive = None | bool | int | float | Decimal | str
type PlainJson = PlainJsonPrimitive | list[PlainJson] | dict[str, PlainJson]

__all__ = ["PlainJson", "PlainJsonPrimitive"]

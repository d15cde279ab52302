# src/jsonbind/infrastructure/codec/json_text.py
# Copyright (c) Jsonbind.
# SPDX-License-Identifier: MIT
"""JSON text codec.

Purpose:
    Convert between standard JSON text (UTF-8, no comments, no trailing
    commas) and the immutable :mod:`jsonbind.domain.json_model` tree.

Design:
    - Parsing uses the standard library ``json`` decoder. Integers stay
      ``int`` and non-integer numbers become ``Decimal``, so no precision is
      lost on the way in.
    - ``NaN``/``Infinity`` literals and duplicate object keys are rejected.
    - Printing is done from the tree itself, so ``Decimal`` values are
      written exactly as parsed.

Layer:
    infrastructure/codec
"""

from __future__ import annotations

import json
from decimal import Decimal
from typing import Any, NoReturn

from jsonbind.domain.exceptions.conversion import JsonSyntaxError
from jsonbind.domain.json_model import JsonArray, JsonObject, JsonValue

__all__ = ["parse_json", "print_json"]


def _reject_constant(name: str) -> NoReturn:
    raise JsonSyntaxError(f"invalid JSON literal: {name}")


def _object_hook(pairs: list[tuple[str, Any]]) -> JsonObject:
    return JsonObject(tuple((key, JsonValue.from_python(value)) for key, value in pairs))


def parse_json(text: str | bytes) -> JsonValue:
    """Parse JSON text into a :class:`JsonValue`.

    Args:
        text: JSON text, or UTF-8 encoded bytes.

    Returns:
        JsonValue: The parsed tree.

    Raises:
        JsonSyntaxError: If the text is not valid JSON, is not UTF-8, or an
            object contains a duplicate key.
    """
    if isinstance(text, bytes | bytearray):
        try:
            text = bytes(text).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise JsonSyntaxError(f"JSON text is not valid UTF-8: {exc}") from exc
    try:
        raw = json.loads(
            text,
            parse_float=Decimal,
            parse_constant=_reject_constant,
            object_pairs_hook=_object_hook,
        )
    except json.JSONDecodeError as exc:
        raise JsonSyntaxError(
            f"invalid JSON: {exc.msg}", details={"line": exc.lineno, "column": exc.colno}
        ) from exc
    except JsonSyntaxError:
        raise
    except ValueError as exc:
        raise JsonSyntaxError(f"invalid JSON: {exc}") from exc
    return JsonValue.from_python(raw)


def print_json(value: JsonValue, *, indent: int | None = None) -> str:
    """Render a :class:`JsonValue` as JSON text.

    Args:
        value: The tree to print.
        indent: ``None`` for compact output, otherwise spaces per level.

    Returns:
        str: JSON text.
    """
    if indent is None:
        return value.render()
    lines: list[str] = []
    _print_indented(value, indent, 0, lines)
    return "".join(lines)


def _print_indented(value: JsonValue, indent: int, level: int, out: list[str]) -> None:
    pad = " " * (indent * (level + 1))
    closing_pad = " " * (indent * level)
    if isinstance(value, JsonArray) and len(value):
        out.append("[\n")
        for position, element in enumerate(value):
            out.append(pad)
            _print_indented(element, indent, level + 1, out)
            out.append(",\n" if position < len(value) - 1 else "\n")
        out.append(closing_pad + "]")
    elif isinstance(value, JsonObject) and len(value):
        out.append("{\n")
        for position, (key, member) in enumerate(value.members):
            out.append(f"{pad}{json.dumps(key, ensure_ascii=False)}: ")
            _print_indented(member, indent, level + 1, out)
            out.append(",\n" if position < len(value) - 1 else "\n")
        out.append(closing_pad + "}")
    else:
        out.append(value.render())

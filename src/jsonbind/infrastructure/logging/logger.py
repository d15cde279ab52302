# src/jsonbind/infrastructure/logging/logger.py
# Copyright (c) Jsonbind.
# SPDX-License-Identifier: MIT
"""JSON log lines for conversion events.

Each record becomes one JSON object with the keys ``ts``, ``level``,
``logger`` and ``message``, followed by whatever the caller passed through
``extra={...}``. Values of the library's own types are made readable on the
way out:

    * :class:`TypeDescriptor` -> its rendered form, e.g. ``"Inner[str]"``
    * :class:`ErrorTree` -> a list of ``{"path", "message"}`` objects
    * :class:`JsonValue` -> compact JSON text
    * ``Decimal`` -> its exact string form

Anything else that ``json`` cannot encode falls back to ``repr``.

Typical usage:
    configure_root_logging(settings.log_level)
    log = get_json_logger(__name__)
"""

from __future__ import annotations

import json
import logging
import os
from datetime import UTC, datetime
from decimal import Decimal
from typing import Any, Final

from jsonbind.domain.error_tree import ErrorTree
from jsonbind.domain.json_model import JsonValue
from jsonbind.domain.type_descriptor import TypeDescriptor

__all__ = ["configure_root_logging", "get_json_logger"]

_LEVEL_ENV_KEY: Final[str] = "JSONBIND_LOG_LEVEL"

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RECORD_ATTRS: Final[frozenset[str]] = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None)).keys()
    | {"message", "asctime", "taskName"}
)


def _loggable(value: Any) -> Any:
    if isinstance(value, TypeDescriptor):
        return str(value)
    if isinstance(value, ErrorTree):
        return [{"path": error.path, "message": error.message} for error in value.flatten()]
    if isinstance(value, JsonValue):
        return value.render()
    if isinstance(value, Decimal):
        return str(value)
    return repr(value)


class _JsonFormatter(logging.Formatter):
    """Renders a record and its extras as one JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            (key, value)
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and key not in payload
        )

        if record.exc_info and record.exc_info[0] is not None:
            payload["exc_type"] = record.exc_info[0].__name__
            payload["exc_message"] = str(record.exc_info[1])

        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False, default=_loggable)


def configure_root_logging(level: str | int | None = None) -> None:
    """Attach the JSON handler to the root logger once and set its level.

    Args:
        level: Level or level name. Falls back to ``JSONBIND_LOG_LEVEL``, then
            ``INFO``. Names are case-insensitive.
    """
    if level is None:
        level = os.getenv(_LEVEL_ENV_KEY) or "INFO"
    if isinstance(level, str):
        level = level.upper()

    root = logging.getLogger()
    root.setLevel(level)
    # Handlers installed by others (pytest's caplog, an embedding app) are left alone.
    if any(isinstance(handler.formatter, _JsonFormatter) for handler in root.handlers):
        return
    handler = logging.StreamHandler()
    handler.setFormatter(_JsonFormatter())
    root.addHandler(handler)


def get_json_logger(name: str) -> logging.Logger:
    """Return the logger ``name``; records propagate to the root JSON handler."""
    logger = logging.getLogger(name)
    logger.propagate = True
    return logger

# src/jsonbind/domain/exceptions/base.py
# Copyright (c) Jsonbind.
# SPDX-License-Identifier: MIT
"""
Base Domain Exceptions.

Summary:
    Canonical base class for jsonbind exceptions so callers (and the CLI) can
    map failures to stable codes.

Layer:
    domain/exceptions
"""
from __future__ import annotations

from typing import Any


class JsonBindError(Exception):
    """Base class for all jsonbind exceptions."""

    code: str = "JSONBIND_ERROR"

    def __init__(self, message: str = "", *, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.details: dict[str, Any] = details or {}

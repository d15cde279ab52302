# src/jsonbind/domain/result.py
# Copyright (c) Jsonbind.
# SPDX-License-Identifier: MIT
"""Deserialization results.

Purpose:
    Report validation outcomes as values. A :class:`Success` carries the
    converted value, a :class:`Failure` carries the full :class:`ErrorTree`.

Layer:
    domain
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from jsonbind.domain.error_tree import ErrorTree, FlattenedError
from jsonbind.domain.exceptions.conversion import JsonValidationError

__all__ = ["DeserializationResult", "Failure", "Success"]


@dataclass(frozen=True, slots=True)
class Success:
    """A successful deserialization."""

    value: Any

    ok: ClassVar[bool] = True

    def unwrap(self) -> Any:
        return self.value

    def flatten(self) -> list[FlattenedError]:
        return []


@dataclass(frozen=True, slots=True)
class Failure:
    """A failed deserialization.

    Attributes:
        errors: Non-empty error tree describing every detected problem.
    """

    errors: ErrorTree

    ok: ClassVar[bool] = False

    def __post_init__(self) -> None:
        if self.errors.is_empty:
            raise ValueError("a failed deserialization must carry at least one message")

    @staticmethod
    def of(message: str) -> Failure:
        """Shortcut for a single root-level message."""
        return Failure(ErrorTree.leaf(message))

    def unwrap(self) -> Any:
        """Raise :class:`JsonValidationError` carrying the error tree."""
        raise JsonValidationError(self.errors)

    def flatten(self) -> list[FlattenedError]:
        return self.errors.flatten()


type DeserializationResult = Success | Failure

# src/jsonbind/domain/error_tree.py
# Copyright (c) Jsonbind.
# SPDX-License-Identifier: MIT
"""Path-annotated validation error trees.

Purpose:
    Accumulate every validation failure of a deserialization run instead of
    stopping at the first one, and flatten them into addressable
    ``(path, message)`` pairs for humans and tests.

Layer:
    domain

Notes:
    - A tree holds zero or more messages for its own subject plus children
      keyed by path segment (a field name or an array index).
    - Trees are immutable; :meth:`ErrorTree.merge` and :meth:`ErrorTree.at`
      return new trees.
    - Flattening is depth-first: a subject's own messages come before its
      children, children are visited in insertion order.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

__all__ = ["ErrorTree", "FlattenedError", "PathSegment"]

type PathSegment = str | int


@dataclass(frozen=True, slots=True)
class FlattenedError:
    """One validation failure at a dotted path.

    Attributes:
        message: The error message.
        path: Segments joined with ``"."``; array indices render as decimal
            integers. Root-level errors have the empty path.
    """

    message: str
    path: str = ""

    def __str__(self) -> str:
        return f"{self.path}: {self.message}" if self.path else self.message


class ErrorTree:
    """Immutable tree of validation messages keyed by path segment."""

    __slots__ = ("_children", "_messages")

    def __init__(
        self,
        messages: Iterable[str] = (),
        children: Mapping[PathSegment, ErrorTree] | None = None,
    ) -> None:
        self._messages: tuple[str, ...] = tuple(messages)
        self._children: Mapping[PathSegment, ErrorTree] = MappingProxyType(dict(children or {}))

    # ------------------------------------------------------------------ #
    # Construction                                                       #
    # ------------------------------------------------------------------ #

    @staticmethod
    def leaf(*messages: str) -> ErrorTree:
        """Create a tree holding only root-level messages."""
        if not messages:
            raise ValueError("an error leaf requires at least one message")
        return ErrorTree(messages)

    @staticmethod
    def node(children: Iterable[tuple[PathSegment, ErrorTree]]) -> ErrorTree:
        """Create a tree from ``(segment, child)`` pairs.

        Pairs that share a segment are merged in order of appearance.
        """
        merged: dict[PathSegment, ErrorTree] = {}
        for segment, child in children:
            existing = merged.get(segment)
            merged[segment] = child if existing is None else existing.merge(child)
        return ErrorTree(children=merged)

    def at(self, segment: PathSegment) -> ErrorTree:
        """Return a tree that places ``self`` under ``segment``."""
        return ErrorTree(children={segment: self})

    # ------------------------------------------------------------------ #
    # Queries                                                            #
    # ------------------------------------------------------------------ #

    @property
    def messages(self) -> tuple[str, ...]:
        return self._messages

    @property
    def children(self) -> Mapping[PathSegment, ErrorTree]:
        return self._children

    @property
    def is_empty(self) -> bool:
        """Whether the tree (including all descendants) holds no message."""
        return not self._messages and all(child.is_empty for child in self._children.values())

    # ------------------------------------------------------------------ #
    # Combination                                                        #
    # ------------------------------------------------------------------ #

    def merge(self, other: ErrorTree) -> ErrorTree:
        """Combine two trees describing errors of the same subject.

        Messages concatenate (``self`` first). Children merge key-wise,
        recursively; keys only present in ``other`` are appended after the keys
        of ``self``.

        Args:
            other: The tree to merge in.

        Returns:
            ErrorTree: A new merged tree.
        """
        children = dict(self._children)
        for segment, child in other._children.items():
            existing = children.get(segment)
            children[segment] = child if existing is None else existing.merge(child)
        return ErrorTree(self._messages + other._messages, children)

    def flatten(self) -> list[FlattenedError]:
        """Return all messages as ``FlattenedError`` in depth-first order."""
        result: list[FlattenedError] = []
        self._flatten_into(result, ())
        return result

    def _flatten_into(self, result: list[FlattenedError], prefix: tuple[PathSegment, ...]) -> None:
        path = ".".join(str(segment) for segment in prefix)
        result.extend(FlattenedError(message, path) for message in self._messages)
        for segment, child in self._children.items():
            child._flatten_into(result, (*prefix, segment))

    # ------------------------------------------------------------------ #
    # Dunder                                                             #
    # ------------------------------------------------------------------ #

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ErrorTree):
            return NotImplemented
        return self._messages == other._messages and dict(self._children) == dict(
            other._children
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ErrorTree(messages={list(self._messages)!r}, children={dict(self._children)!r})"

    def __str__(self) -> str:
        return "; ".join(str(error) for error in self.flatten())

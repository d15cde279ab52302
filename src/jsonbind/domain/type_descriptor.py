# src/jsonbind/domain/type_descriptor.py
# Copyright (c) Jsonbind.
# SPDX-License-Identifier: MIT
"""Type descriptors: the unit of converter resolution.

Purpose:
    Describe a target type explicitly as a nominal base plus ordered type
    arguments, so converters are selected by value comparison instead of
    ad-hoc inspection of ``typing`` objects scattered through the code base.

Layer:
    domain

Notes:
    - ``TypeDescriptor.of`` is the only place that understands ``typing``
      annotations. Everything downstream works with descriptors.
    - ``X | None`` and ``Optional[X]`` both normalize to base
      ``typing.Optional`` with the single argument ``X``.
    - A descriptor whose base is a ``TypeVar`` is an unbound type parameter;
      :meth:`TypeDescriptor.substitute` replaces it.
"""

from __future__ import annotations

import collections.abc
import types
import typing
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, TypeVar

__all__ = ["TypeBindings", "TypeDescriptor"]

_NONE_TYPE = type(None)

# typing aliases whose origin should be folded onto the builtin collection.
_ALIAS_ORIGINS: dict[Any, type] = {
    collections.abc.Sequence: list,
}


@dataclass(frozen=True, slots=True)
class TypeDescriptor:
    """Nominal type identity plus ordered type arguments.

    Attributes:
        base: A class, a ``TypeVar`` (unbound parameter), or one of the special
            forms ``typing.Optional`` / ``typing.Union``.
        args: Type arguments, empty for non-generic types.
    """

    base: Any
    args: tuple[TypeDescriptor, ...] = ()

    def __post_init__(self) -> None:
        if self.base is None:
            raise TypeError("TypeDescriptor base must not be None")
        object.__setattr__(self, "args", tuple(self.args))

    @staticmethod
    def of(hint: Any) -> TypeDescriptor:
        """Normalize a Python type annotation into a descriptor.

        Args:
            hint: A class, a parameterized generic (``list[int]``,
                ``Inner[str]``), ``X | None``, ``None``, a ``TypeVar`` or an
                existing descriptor.

        Returns:
            TypeDescriptor: The normalized descriptor.

        Raises:
            TypeError: If ``hint`` cannot be described.
        """
        if isinstance(hint, TypeDescriptor):
            return hint
        if hint is None or hint is _NONE_TYPE:
            return TypeDescriptor(_NONE_TYPE)
        if isinstance(hint, TypeVar):
            return TypeDescriptor(hint)

        origin = typing.get_origin(hint)
        if origin is None:
            if isinstance(hint, type):
                return TypeDescriptor(hint)
            raise TypeError(f"cannot describe type annotation: {hint!r}")

        args = typing.get_args(hint)
        if origin is typing.Union or origin is types.UnionType:
            non_none = [arg for arg in args if arg is not _NONE_TYPE]
            if len(non_none) == 1 and len(non_none) < len(args):
                return TypeDescriptor(typing.Optional, (TypeDescriptor.of(non_none[0]),))
            return TypeDescriptor(typing.Union, tuple(TypeDescriptor.of(arg) for arg in args))

        origin = _ALIAS_ORIGINS.get(origin, origin)
        return TypeDescriptor(origin, tuple(TypeDescriptor.of(arg) for arg in args))

    # ------------------------------------------------------------------ #
    # Queries                                                            #
    # ------------------------------------------------------------------ #

    @property
    def is_parameter(self) -> bool:
        """Whether this descriptor is an unbound type parameter."""
        return isinstance(self.base, TypeVar)

    @property
    def is_parameterized(self) -> bool:
        return bool(self.args)

    @property
    def is_class(self) -> bool:
        return isinstance(self.base, type)

    def has_base(self, *candidates: Any) -> bool:
        return any(self.base is candidate for candidate in candidates)

    def contains_parameters(self) -> bool:
        """Whether any unbound type parameter occurs in this descriptor."""
        return self.is_parameter or any(arg.contains_parameters() for arg in self.args)

    # ------------------------------------------------------------------ #
    # Substitution                                                       #
    # ------------------------------------------------------------------ #

    def substitute(self, bindings: TypeBindings) -> TypeDescriptor:
        """Replace type parameters recursively.

        Parameters without a binding are kept unchanged, so substitution can be
        applied in stages.

        Args:
            bindings: Mapping from ``TypeVar`` to its actual descriptor.

        Returns:
            TypeDescriptor: The substituted descriptor (``self`` if unchanged).
        """
        if not bindings:
            return self
        if self.is_parameter:
            return bindings.get(self.base, self)
        if not self.args:
            return self
        new_args = tuple(arg.substitute(bindings) for arg in self.args)
        if new_args == self.args:
            return self
        return TypeDescriptor(self.base, new_args)

    # ------------------------------------------------------------------ #
    # Rendering                                                          #
    # ------------------------------------------------------------------ #

    def __str__(self) -> str:
        if self.base is _NONE_TYPE:
            return "None"
        if self.base is typing.Optional:
            return f"{self.args[0]} | None"
        if self.base is typing.Union:
            return " | ".join(str(arg) for arg in self.args)
        name = getattr(self.base, "__qualname__", None) or getattr(
            self.base, "__name__", repr(self.base)
        )
        if isinstance(self.base, TypeVar):
            name = f"~{self.base.__name__}"
        if not self.args:
            return name
        return f"{name}[{', '.join(str(arg) for arg in self.args)}]"


type TypeBindings = Mapping[Any, TypeDescriptor]

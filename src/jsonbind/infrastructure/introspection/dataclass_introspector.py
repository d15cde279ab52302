# src/jsonbind/infrastructure/introspection/dataclass_introspector.py
# Copyright (c) Jsonbind.
# SPDX-License-Identifier: MIT
"""Record introspection for dataclasses and NamedTuples.

Purpose:
    Default :class:`~jsonbind.domain.interfaces.introspection.RecordIntrospector`.
    Dataclasses contribute their ``__init__`` fields, NamedTuples their
    ``_fields``, both in declaration order. Type hints are resolved with
    :func:`typing.get_type_hints`, so record classes (and the classes their
    annotations mention) must be importable from module scope.

Layer:
    infrastructure/introspection
"""

from __future__ import annotations

import dataclasses
import logging
import threading
import typing
from collections.abc import Sequence
from typing import Any

from jsonbind.domain.exceptions.conversion import NoConverterFoundError
from jsonbind.domain.interfaces.introspection import RecordDescription, RecordField
from jsonbind.domain.type_descriptor import TypeDescriptor

__all__ = ["DataclassIntrospector"]

logger = logging.getLogger(__name__)


def _is_namedtuple(cls: type) -> bool:
    return issubclass(cls, tuple) and hasattr(cls, "_fields")


class DataclassIntrospector:
    """Describes dataclass and NamedTuple record types (descriptions are cached)."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._descriptions: dict[type, RecordDescription] = {}

    def is_record(self, cls: Any) -> bool:
        if not isinstance(cls, type):
            return False
        return dataclasses.is_dataclass(cls) or _is_namedtuple(cls)

    def describe(self, cls: type) -> RecordDescription:
        """Return the ordered fields of ``cls``.

        Raises:
            NoConverterFoundError: If ``cls`` is not a record or one of its
                annotations cannot be resolved or described.
        """
        with self._lock:
            cached = self._descriptions.get(cls)
        if cached is not None:
            return cached

        if not self.is_record(cls):
            raise NoConverterFoundError(
                f"{cls.__qualname__} is not a record type", details={"type": cls.__qualname__}
            )
        try:
            hints = typing.get_type_hints(cls)
        except NameError as exc:
            raise NoConverterFoundError(
                f"cannot resolve annotations of {cls.__qualname__}: {exc}",
                details={"type": cls.__qualname__},
            ) from exc

        fields: list[RecordField] = []
        for name in self._field_names(cls):
            try:
                descriptor = TypeDescriptor.of(hints[name])
            except TypeError as exc:
                raise NoConverterFoundError(
                    f"cannot describe field {name!r} of {cls.__qualname__}: {exc}",
                    details={"type": cls.__qualname__, "field": name},
                ) from exc
            fields.append(RecordField(name, descriptor))

        description = RecordDescription(
            record_class=cls,
            type_parameters=tuple(getattr(cls, "__parameters__", ())),
            fields=tuple(fields),
        )
        logger.debug(
            "record described",
            extra={"record": cls.__qualname__, "fields": [f.name for f in fields]},
        )
        with self._lock:
            return self._descriptions.setdefault(cls, description)

    def construct(self, cls: type, values: Sequence[Any]) -> Any:
        names = [record_field.name for record_field in self.describe(cls).fields]
        return cls(**dict(zip(names, values, strict=True)))

    def field_values(self, instance: Any, description: RecordDescription) -> list[Any]:
        return [getattr(instance, record_field.name) for record_field in description.fields]

    @staticmethod
    def _field_names(cls: type) -> list[str]:
        if dataclasses.is_dataclass(cls):
            return [f.name for f in dataclasses.fields(cls) if f.init]
        return list(cls._fields)  # type: ignore[attr-defined]

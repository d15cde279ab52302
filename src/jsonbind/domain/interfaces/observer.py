# src/jsonbind/domain/interfaces/observer.py
# Copyright (c) Jsonbind.
# SPDX-License-Identifier: MIT
"""Conversion observer protocol.

Synopsis:
    Hook through which the registry reports resolution and deserialization
    events. Infrastructure provides a Prometheus-backed implementation; the
    default observer does nothing.

Layer:
    domain/interfaces
"""

from __future__ import annotations

from typing import Literal, Protocol

from jsonbind.domain.type_descriptor import TypeDescriptor

type ResolutionSource = Literal["cache", "manual", "generated"]


class ConversionObserver(Protocol):
    """Receives conversion events."""

    def converter_resolved(self, type_: TypeDescriptor, source: ResolutionSource) -> None: ...

    def deserialized(self, type_: TypeDescriptor, ok: bool, seconds: float) -> None: ...


class NullConversionObserver:
    """Observer that ignores every event."""

    def converter_resolved(self, type_: TypeDescriptor, source: ResolutionSource) -> None:
        return None

    def deserialized(self, type_: TypeDescriptor, ok: bool, seconds: float) -> None:
        return None

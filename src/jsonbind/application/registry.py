# src/jsonbind/application/registry.py
# Copyright (c) Jsonbind.
# SPDX-License-Identifier: MIT
"""Converter registry.

Purpose:
    Own the set of converters and resolve one for any requested
    :class:`TypeDescriptor`: from the cache, from the manually registered
    converters (first match in registration order wins), or by generating a
    record converter for structural record types.

Layer:
    application

Lifecycle:
    1. Configuration: a single caller registers converters (``register``,
       ``clear``).
    2. ``seal()``: irreversible. Afterwards the registry only serves lookups
       and may be shared by any number of threads.

Notes:
    - The cache is a lock-protected map; the lock is held only for single
      get/put operations, never across a recursive resolve chain.
    - Two threads racing to resolve the same missing type may both build a
      converter; the first finished one is cached and both are equivalent.
    - Cycles: while a record converter for ``T`` is under construction, a
      :class:`ConverterProxy` stands in for ``T`` within the constructing
      thread. Field converters that loop back to ``T`` capture the proxy, and
      the proxy is pointed at the real converter once it exists.
    - Record converters built while an enclosing generation is still running
      are staged per thread and published to the cache only when the
      outermost generation succeeds. If it fails they are dropped, so no
      cached converter ever refers to a placeholder that was never resolved.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Any

from jsonbind.application.record_converter import RecordConverter
from jsonbind.domain.exceptions.conversion import (
    NoConverterFoundError,
    NullArgumentError,
    RegistryNotSealedError,
    RegistrySealedError,
    UnresolvedProxyError,
)
from jsonbind.domain.interfaces.converter import JsonConverter
from jsonbind.domain.interfaces.introspection import RecordIntrospector
from jsonbind.domain.interfaces.observer import ConversionObserver, NullConversionObserver
from jsonbind.domain.json_model import JsonValue
from jsonbind.domain.result import DeserializationResult
from jsonbind.domain.type_descriptor import TypeDescriptor

__all__ = ["ConverterProxy", "ConverterRegistry"]

logger = logging.getLogger(__name__)


class ConverterProxy(JsonConverter):
    """Placeholder for a converter that is still being built.

    The target is set exactly once. Afterwards the proxy forwards every call
    transparently. If construction fails, the proxy remembers the failure and
    reports it on use.
    """

    def __init__(self, type_: TypeDescriptor) -> None:
        self._type = type_
        self._target: JsonConverter | None = None
        self._failure: BaseException | None = None

    def set_target(self, target: JsonConverter) -> None:
        if self._target is not None:
            raise RuntimeError(f"proxy target for {self._type} has already been set")
        self._target = target

    def fail(self, error: BaseException) -> None:
        self._failure = error

    @property
    def target(self) -> JsonConverter:
        if self._target is None:
            raise UnresolvedProxyError(
                f"converter for {self._type} was used before it was built"
            ) from self._failure
        return self._target

    @property
    def is_resolved(self) -> bool:
        return self._target is not None

    def supports(self, type_: TypeDescriptor) -> bool:
        return type_ == self._type

    def deserialize(self, json: JsonValue, type_: TypeDescriptor) -> DeserializationResult:
        return self.target.deserialize(json, type_)

    def serialize(self, value: Any, type_: TypeDescriptor) -> JsonValue:
        return self.target.serialize(value, type_)

    def __repr__(self) -> str:
        return f"ConverterProxy({self._type}, resolved={self.is_resolved})"


class _ConverterCache:
    """Thread-safe map from type descriptor to converter."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: dict[TypeDescriptor, JsonConverter] = {}

    def get(self, type_: TypeDescriptor) -> JsonConverter | None:
        with self._lock:
            return self._entries.get(type_)

    def put_if_absent(self, type_: TypeDescriptor, converter: JsonConverter) -> JsonConverter:
        """Store ``converter`` unless an entry exists; return the stored entry."""
        with self._lock:
            return self._entries.setdefault(type_, converter)

    def __contains__(self, type_: object) -> bool:
        with self._lock:
            return type_ in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()


class ConverterRegistry:
    """Resolves converters by type descriptor.

    Args:
        introspector: Describes structural record types; used to decide which
            types are eligible for auto-generated record converters.
        observer: Receives resolution and deserialization events.
    """

    def __init__(
        self,
        introspector: RecordIntrospector,
        *,
        observer: ConversionObserver | None = None,
    ) -> None:
        self._introspector = introspector
        self._observer: ConversionObserver = observer or NullConversionObserver()
        # Only mutated during the single-threaded configuration phase.
        self._converters: list[JsonConverter] = []
        self._cache = _ConverterCache()
        self._local = threading.local()
        self._sealed = False

    # ------------------------------------------------------------------ #
    # Configuration phase                                                #
    # ------------------------------------------------------------------ #

    def register(self, converter: JsonConverter) -> None:
        """Add a converter. Earlier registrations win on overlap.

        Raises:
            NullArgumentError: If ``converter`` is ``None``.
            RegistrySealedError: If the registry has been sealed.
        """
        if converter is None:
            raise NullArgumentError("converter")
        self._ensure_configurable()
        self._converters.append(converter)
        logger.debug("converter registered", extra={"converter": repr(converter)})

    def clear(self) -> None:
        """Remove all converters, including the default ones."""
        self._ensure_configurable()
        self._converters.clear()
        self._cache.clear()

    def seal(self) -> None:
        """End the configuration phase. Idempotent."""
        if not self._sealed:
            self._sealed = True
            logger.debug("registry sealed", extra={"converters": len(self._converters)})

    @property
    def is_sealed(self) -> bool:
        return self._sealed

    @property
    def converters(self) -> tuple[JsonConverter, ...]:
        return tuple(self._converters)

    @property
    def introspector(self) -> RecordIntrospector:
        return self._introspector

    # ------------------------------------------------------------------ #
    # Run-time lookups                                                   #
    # ------------------------------------------------------------------ #

    def supports(self, type_: Any) -> bool:
        """Return whether ``type_`` can be converted by this registry.

        True for types claimed by a registered converter, types already cached,
        and types eligible for record converter generation.
        """
        descriptor = self._descriptor(type_)
        if descriptor in self._cache or self.supports_auto_generation(descriptor):
            return True
        return any(converter.supports(descriptor) for converter in self._converters)

    def supports_auto_generation(self, type_: Any) -> bool:
        """Return whether a record converter could be generated for ``type_``.

        This is also true when a registered converter already claims the type,
        in which case generation never actually happens.
        """
        descriptor = self._descriptor(type_)
        return descriptor.is_class and self._introspector.is_record(descriptor.base)

    def resolve(self, type_: Any) -> JsonConverter:
        """Return the converter for ``type_``.

        Args:
            type_: A :class:`TypeDescriptor` or a Python type annotation.

        Returns:
            JsonConverter: The cached, registered or generated converter.

        Raises:
            NullArgumentError: If ``type_`` is ``None``.
            RegistryNotSealedError: If called before :meth:`seal`.
            NoConverterFoundError: If no converter exists or can be generated.
        """
        descriptor = self._descriptor(type_)
        if not self._sealed:
            raise RegistryNotSealedError(
                f"registry must be sealed before resolving converters (requested {descriptor})"
            )
        if descriptor.is_parameter:
            raise NoConverterFoundError(
                f"cannot resolve a converter for unbound type parameter {descriptor}",
                details={"type": str(descriptor)},
            )

        pending = self._pending().get(descriptor)
        if pending is not None:
            return pending
        staged = self._staged().get(descriptor)
        if staged is not None:
            return staged

        converter = self._cache.get(descriptor)
        if converter is not None:
            self._observer.converter_resolved(descriptor, "cache")
            return converter

        for candidate in self._converters:
            if candidate.supports(descriptor):
                self._observer.converter_resolved(descriptor, "manual")
                return self._cache.put_if_absent(descriptor, candidate)

        if self.supports_auto_generation(descriptor):
            return self._generate(descriptor)

        raise NoConverterFoundError(
            f"no converter found for type {descriptor}, and converters can only be "
            "auto-generated for record types",
            details={"type": str(descriptor)},
        )

    def deserialize(self, json: JsonValue, type_: Any) -> DeserializationResult:
        """Resolve a converter for ``type_`` and deserialize ``json`` with it."""
        if json is None:
            raise NullArgumentError("json")
        descriptor = self._descriptor(type_)
        converter = self.resolve(descriptor)
        started = time.perf_counter()
        result = converter.deserialize(json, descriptor)
        self._observer.deserialized(descriptor, result.ok, time.perf_counter() - started)
        return result

    def serialize(self, value: Any, type_: Any = None) -> JsonValue:
        """Serialize ``value``.

        Args:
            value: The value to serialize.
            type_: Declared type. Defaults to the runtime class of ``value``,
                which is sufficient for non-generic types.

        Raises:
            NullArgumentError: If both ``value`` and ``type_`` are ``None``, or
                the resolved converter rejects ``None``.
            JsonSerializationError: If the value does not fit its type.
        """
        if type_ is None:
            if value is None:
                raise NullArgumentError("value")
            type_ = type(value)
        descriptor = self._descriptor(type_)
        return self.resolve(descriptor).serialize(value, descriptor)

    # ------------------------------------------------------------------ #
    # Internals                                                          #
    # ------------------------------------------------------------------ #

    def _generate(self, descriptor: TypeDescriptor) -> JsonConverter:
        pending = self._pending()
        staged = self._staged()
        outermost = not pending
        staged_before = len(staged)
        proxy = ConverterProxy(descriptor)
        pending[descriptor] = proxy
        try:
            converter = RecordConverter(descriptor, self, self._introspector)
        except BaseException as exc:
            proxy.fail(exc)
            # Anything staged since this generation began may hold the failed proxy.
            for key in list(staged)[staged_before:]:
                del staged[key]
            raise
        finally:
            del pending[descriptor]
        proxy.set_target(converter)
        logger.debug(
            "record converter generated",
            extra={"type": descriptor, "fields": len(converter.fields)},
        )
        self._observer.converter_resolved(descriptor, "generated")

        if not outermost:
            staged[descriptor] = converter
            return converter
        winner = self._cache.put_if_absent(descriptor, converter)
        for key, built in staged.items():
            self._cache.put_if_absent(key, built)
        staged.clear()
        return winner

    def _staged(self) -> dict[TypeDescriptor, JsonConverter]:
        staged: dict[TypeDescriptor, JsonConverter] | None = getattr(self._local, "staged", None)
        if staged is None:
            staged = {}
            self._local.staged = staged
        return staged

    def _pending(self) -> dict[TypeDescriptor, ConverterProxy]:
        pending: dict[TypeDescriptor, ConverterProxy] | None = getattr(
            self._local, "pending", None
        )
        if pending is None:
            pending = {}
            self._local.pending = pending
        return pending

    def _ensure_configurable(self) -> None:
        if self._sealed:
            logger.warning("configuration attempted on a sealed registry")
            raise RegistrySealedError("registry is sealed; converters can no longer be changed")

    @staticmethod
    def _descriptor(type_: Any) -> TypeDescriptor:
        if type_ is None:
            raise NullArgumentError("type")
        return TypeDescriptor.of(type_)

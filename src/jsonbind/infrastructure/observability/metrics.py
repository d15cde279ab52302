# src/jsonbind/infrastructure/observability/metrics.py
# Copyright (c) Jsonbind.
# SPDX-License-Identifier: MIT
"""Prometheus metrics for the conversion engine (registry-aware).

Collectors are created lazily, once per active ``prometheus_client.REGISTRY``.
When tests swap the default registry, the caches reset automatically and no
duplicate-registration errors occur.

Metrics:
    jsonbind_converter_resolutions_total{source}
        Converter lookups by source: ``cache``, ``manual`` or ``generated``.
    jsonbind_deserializations_total{outcome}
        Top-level deserializations by outcome: ``success`` or ``failure``.
    jsonbind_deserialize_seconds
        Latency of top-level deserializations.

Example:
    observer = PrometheusConversionObserver()
    registry = ConverterRegistry(DataclassIntrospector(), observer=observer)
"""

from __future__ import annotations

import logging
import threading
from typing import Final

import prometheus_client as prom
from prometheus_client import CollectorRegistry, Counter, Histogram

from jsonbind.domain.interfaces.observer import ResolutionSource
from jsonbind.domain.type_descriptor import TypeDescriptor

__all__ = [
    "PrometheusConversionObserver",
    "get_converter_resolutions_total",
    "get_deserialize_seconds",
    "get_deserializations_total",
]

_log = logging.getLogger(__name__)

# Conversions are in-memory; buckets start well below a millisecond.
_BUCKETS: Final[tuple[float, ...]] = (
    0.00001,
    0.00005,
    0.0001,
    0.0005,
    0.001,
    0.005,
    0.010,
    0.050,
    0.100,
    0.500,
    1.000,
)

_active_registry: CollectorRegistry | None = None
_hist_cache: dict[str, Histogram] = {}
_counter_cache: dict[str, Counter] = {}
_lock = threading.RLock()


def _ensure_registry() -> None:
    """Reset caches if the active registry changed."""
    global _active_registry
    with _lock:
        # Holding the registry itself keeps a recycled id() from matching.
        if _active_registry is not prom.REGISTRY:
            _hist_cache.clear()
            _counter_cache.clear()
            _active_registry = prom.REGISTRY


def _counter(name: str, documentation: str, labelnames: tuple[str, ...]) -> Counter:
    _ensure_registry()
    with _lock:
        counter = _counter_cache.get(name)
        if counter is None:
            counter = Counter(name, documentation, labelnames, registry=prom.REGISTRY)
            _counter_cache[name] = counter
            _log.debug("metric registered", extra={"metric": name})
        return counter


def _histogram(name: str, documentation: str) -> Histogram:
    _ensure_registry()
    with _lock:
        hist = _hist_cache.get(name)
        if hist is None:
            hist = Histogram(name, documentation, buckets=_BUCKETS, registry=prom.REGISTRY)
            _hist_cache[name] = hist
            _log.debug("metric registered", extra={"metric": name})
        return hist


def get_converter_resolutions_total() -> Counter:
    """Counter of converter lookups, labelled by ``source``."""
    return _counter(
        "jsonbind_converter_resolutions_total",
        "Converter lookups by resolution source.",
        ("source",),
    )


def get_deserializations_total() -> Counter:
    """Counter of top-level deserializations, labelled by ``outcome``."""
    return _counter(
        "jsonbind_deserializations_total",
        "Top-level deserializations by outcome.",
        ("outcome",),
    )


def get_deserialize_seconds() -> Histogram:
    """Histogram of top-level deserialization latency."""
    return _histogram("jsonbind_deserialize_seconds", "Top-level deserialization latency.")


class PrometheusConversionObserver:
    """:class:`ConversionObserver` recording events as Prometheus metrics."""

    def converter_resolved(self, type_: TypeDescriptor, source: ResolutionSource) -> None:
        get_converter_resolutions_total().labels(source=source).inc()

    def deserialized(self, type_: TypeDescriptor, ok: bool, seconds: float) -> None:
        get_deserializations_total().labels(outcome="success" if ok else "failure").inc()
        get_deserialize_seconds().observe(seconds)

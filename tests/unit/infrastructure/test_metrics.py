# tests/unit/infrastructure/test_metrics.py
from __future__ import annotations

import prometheus_client as prom
import pytest
from prometheus_client import CollectorRegistry

from fixtures.json_testkit import j
from fixtures.records import Shallow
from jsonbind.application.converters.defaults import default_converters
from jsonbind.application.registry import ConverterRegistry
from jsonbind.domain.type_descriptor import TypeDescriptor
from jsonbind.infrastructure.introspection.dataclass_introspector import DataclassIntrospector
from jsonbind.infrastructure.observability.metrics import (
    PrometheusConversionObserver,
    get_converter_resolutions_total,
    get_deserialize_seconds,
    get_deserializations_total,
)


def test_collectors_are_singletons_per_registry(prom_registry: CollectorRegistry) -> None:
    assert get_converter_resolutions_total() is get_converter_resolutions_total()
    assert get_deserializations_total() is get_deserializations_total()
    assert get_deserialize_seconds() is get_deserialize_seconds()


def test_collectors_reset_when_the_registry_changes(
    monkeypatch: pytest.MonkeyPatch, prom_registry: CollectorRegistry
) -> None:
    first = get_deserialize_seconds()
    monkeypatch.setattr(prom, "REGISTRY", CollectorRegistry())
    assert get_deserialize_seconds() is not first


def test_observer_records_resolutions(prom_registry: CollectorRegistry) -> None:
    observer = PrometheusConversionObserver()
    observer.converter_resolved(TypeDescriptor(int), "manual")
    observer.converter_resolved(TypeDescriptor(int), "cache")
    observer.converter_resolved(TypeDescriptor(int), "cache")

    def sample(source: str) -> float | None:
        return prom_registry.get_sample_value(
            "jsonbind_converter_resolutions_total", {"source": source}
        )

    assert sample("manual") == 1.0
    assert sample("cache") == 2.0


def test_registry_reports_deserializations(prom_registry: CollectorRegistry) -> None:
    registry = ConverterRegistry(DataclassIntrospector(), observer=PrometheusConversionObserver())
    for converter in default_converters(registry):
        registry.register(converter)
    registry.seal()

    registry.deserialize(j({"myInt": 1, "myString": "a"}), Shallow)
    registry.deserialize(j({"myInt": 1}), Shallow)

    def outcome(name: str) -> float | None:
        return prom_registry.get_sample_value(
            "jsonbind_deserializations_total", {"outcome": name}
        )

    assert outcome("success") == 1.0
    assert outcome("failure") == 1.0
    assert prom_registry.get_sample_value("jsonbind_deserialize_seconds_count") == 2.0
    assert (
        prom_registry.get_sample_value(
            "jsonbind_converter_resolutions_total", {"source": "generated"}
        )
        == 1.0
    )

# tests/unit/test_bootstrap.py
from __future__ import annotations

from prometheus_client import CollectorRegistry

from fixtures.json_testkit import errors_of, j, value_of
from fixtures.records import SearchQuery, Shallow
from jsonbind.bootstrap import create_querystring_registry, create_registry
from jsonbind.config.settings import Settings


def test_create_registry_registers_defaults() -> None:
    registry = create_registry(Settings(metrics_enabled=False))
    assert not registry.is_sealed
    registry.seal()

    assert value_of(registry.deserialize(j({"myInt": 1, "myString": "a"}), Shallow)) == Shallow(
        1, "a"
    )


def test_create_registry_honors_integer_settings() -> None:
    registry = create_registry(
        Settings(integer_bits=8, allow_integral_floats=False, metrics_enabled=False)
    )
    registry.seal()

    assert errors_of(registry.deserialize(j(200), int)) == [
        ("", "value out of range [-128, 127], found: 200")
    ]
    assert errors_of(registry.deserialize(j(1.0), int)) == [("", "expected integer, found: 1.0")]


def test_create_registry_without_defaults() -> None:
    registry = create_registry(Settings(register_defaults=False, metrics_enabled=False))
    assert registry.converters == ()


def test_create_registry_wires_metrics(prom_registry: CollectorRegistry) -> None:
    registry = create_registry(Settings(metrics_enabled=True))
    registry.seal()
    registry.resolve(Shallow)

    assert (
        prom_registry.get_sample_value(
            "jsonbind_converter_resolutions_total", {"source": "generated"}
        )
        == 1.0
    )


def test_create_querystring_registry() -> None:
    registry = create_querystring_registry()
    registry.seal()
    assert value_of(registry.parse({"term": ["x"], "page": ["3"]}, SearchQuery)) == SearchQuery(
        "x", 3, None
    )

# tests/conftest.py
from __future__ import annotations

from collections.abc import Iterator

import prometheus_client as prom
import pytest
from prometheus_client import CollectorRegistry

from jsonbind.application.converters.defaults import default_converters
from jsonbind.application.querystring import QuerystringParserRegistry
from jsonbind.application.registry import ConverterRegistry
from jsonbind.bootstrap import create_querystring_registry
from jsonbind.config.settings import get_settings
from jsonbind.infrastructure.introspection.dataclass_introspector import DataclassIntrospector


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    """Drop the cached settings singleton around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def prom_registry(monkeypatch: pytest.MonkeyPatch) -> CollectorRegistry:
    """Give every test its own Prometheus registry so collectors never clash."""
    registry = CollectorRegistry()
    monkeypatch.setattr(prom, "REGISTRY", registry)
    return registry


@pytest.fixture
def unsealed_registry() -> ConverterRegistry:
    """Registry with the default converters, still in its configuration phase."""
    registry = ConverterRegistry(DataclassIntrospector())
    for converter in default_converters(registry):
        registry.register(converter)
    return registry


@pytest.fixture
def registry(unsealed_registry: ConverterRegistry) -> ConverterRegistry:
    """Sealed registry with the default converters."""
    unsealed_registry.seal()
    return unsealed_registry


@pytest.fixture
def querystring_registry() -> QuerystringParserRegistry:
    registry = create_querystring_registry()
    registry.seal()
    return registry

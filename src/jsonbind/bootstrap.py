# src/jsonbind/bootstrap.py
# Copyright (c) Jsonbind.
# SPDX-License-Identifier: MIT
"""Registry bootstrap.

Summary:
    Composition root: wires settings, the dataclass introspector, the metrics
    observer and the built-in converters into ready-to-use registries. The
    returned registries are still in their configuration phase; callers
    register their own converters and then call ``seal()``.
"""

from __future__ import annotations

import logging

from jsonbind.application.converters.defaults import default_converters
from jsonbind.application.querystring import QuerystringParserRegistry
from jsonbind.application.registry import ConverterRegistry
from jsonbind.application.string_parsers import FromStringParserRegistry, default_string_parsers
from jsonbind.config.settings import Settings, get_settings
from jsonbind.domain.interfaces.introspection import RecordIntrospector
from jsonbind.infrastructure.introspection.dataclass_introspector import DataclassIntrospector
from jsonbind.infrastructure.observability.metrics import PrometheusConversionObserver

__all__ = ["create_querystring_registry", "create_registry"]

logger = logging.getLogger(__name__)


def create_registry(
    settings: Settings | None = None,
    *,
    introspector: RecordIntrospector | None = None,
) -> ConverterRegistry:
    """Create an unsealed converter registry.

    Args:
        settings: Configuration; defaults to :func:`get_settings`.
        introspector: Record introspector; defaults to
            :class:`DataclassIntrospector`.

    Returns:
        ConverterRegistry: Registry with the built-in converters registered
        (unless ``settings.register_defaults`` is false).
    """
    settings = settings or get_settings()
    observer = PrometheusConversionObserver() if settings.metrics_enabled else None
    registry = ConverterRegistry(introspector or DataclassIntrospector(), observer=observer)
    if settings.register_defaults:
        for converter in default_converters(
            registry,
            integer_bits=settings.integer_bits,
            allow_integral_floats=settings.allow_integral_floats,
        ):
            registry.register(converter)
    logger.debug(
        "converter registry created",
        extra={"converters": len(registry.converters), "metrics": settings.metrics_enabled},
    )
    return registry


def create_querystring_registry(
    *,
    introspector: RecordIntrospector | None = None,
) -> QuerystringParserRegistry:
    """Create a querystring parser registry with the built-in from-string parsers.

    The from-string registry is sealed right away; the querystring registry is
    returned unsealed.
    """
    string_parsers = FromStringParserRegistry()
    for parser in default_string_parsers():
        string_parsers.register(parser)
    string_parsers.seal()
    return QuerystringParserRegistry(string_parsers, introspector or DataclassIntrospector())

# src/jsonbind/config/settings.py
# Copyright (c) Jsonbind.
# SPDX-License-Identifier: MIT
"""Jsonbind Configuration (Pydantic Settings, v2)

Summary:
    Typed, validated configuration for the conversion engine defaults and its
    ambient concerns (logging, metrics). Values come from ``JSONBIND_*``
    environment variables.

Design:
    - Pydantic v2 BaseSettings with ``extra='forbid'`` to catch typos.
    - Explicit field declarations with constrained types.
    - Singleton accessor ``get_settings()`` with LRU cache.
"""

from __future__ import annotations

import logging
from enum import Enum
from functools import lru_cache

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Environment(str, Enum):
    """Logical deployment environment."""

    DEVELOPMENT = "development"
    TEST = "test"
    CI = "ci"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """Typed configuration for jsonbind."""

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Logical deployment environment.",
    )

    log_level: str = Field(
        default="INFO",
        description="Root log level used by the CLI (DEBUG, INFO, WARNING, ERROR).",
    )

    integer_bits: int = Field(
        default=64,
        description="Width of the built-in signed integer converter.",
    )

    allow_integral_floats: bool = Field(
        default=True,
        description="Accept JSON numbers such as 12.0 for integer fields.",
    )

    metrics_enabled: bool = Field(
        default=True,
        description="Record Prometheus metrics for resolutions and deserializations.",
    )

    register_defaults: bool = Field(
        default=True,
        description="Register the built-in converters when creating a registry.",
    )

    model_config = SettingsConfigDict(
        env_prefix="JSONBIND_",
        extra="forbid",
        case_sensitive=False,
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        """Upper-case and validate the log level name.

        Raises:
            ValueError: If the level name is unknown to :mod:`logging`.
        """
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {value!r}")
        return level

    @field_validator("integer_bits")
    @classmethod
    def _check_integer_bits(cls, value: int) -> int:
        """Restrict the integer width to 8, 16, 32 or 64 bits."""
        if value not in (8, 16, 32, 64):
            raise ValueError(f"integer_bits must be 8, 16, 32 or 64, got {value}")
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings singleton.

    Returns:
        Settings: Validated settings.

    Raises:
        RuntimeError: If configuration is invalid.
    """
    try:
        settings = Settings()
        logger.debug(
            "Settings initialized",
            extra={
                "environment": settings.environment.value,
                "integer_bits": settings.integer_bits,
                "metrics_enabled": settings.metrics_enabled,
            },
        )
        return settings
    except ValidationError as exc:
        logger.exception("Invalid jsonbind configuration")
        raise RuntimeError(f"Invalid configuration: {exc}") from exc

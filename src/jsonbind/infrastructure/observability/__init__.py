# src/jsonbind/infrastructure/observability/__init__.py
# Copyright (c) Jsonbind.
# SPDX-License-Identifier: MIT
"""jsonbind.infrastructure.observability package."""

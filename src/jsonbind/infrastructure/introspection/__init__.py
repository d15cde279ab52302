# src/jsonbind/infrastructure/introspection/__init__.py
# Copyright (c) Jsonbind.
# SPDX-License-Identifier: MIT
"""jsonbind.infrastructure.introspection package."""

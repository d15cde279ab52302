# src/jsonbind/infrastructure/logging/__init__.py
# Copyright (c) Jsonbind.
# SPDX-License-Identifier: MIT
"""jsonbind.infrastructure.logging package."""

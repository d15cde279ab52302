# src/jsonbind/infrastructure/__init__.py
# Copyright (c) Jsonbind.
# SPDX-License-Identifier: MIT
"""jsonbind.infrastructure package."""

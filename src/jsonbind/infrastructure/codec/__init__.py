# src/jsonbind/infrastructure/codec/__init__.py
# Copyright (c) Jsonbind.
# SPDX-License-Identifier: MIT
"""jsonbind.infrastructure.codec package."""

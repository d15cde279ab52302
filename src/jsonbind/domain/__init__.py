# src/jsonbind/domain/__init__.py
# Copyright (c) Jsonbind.
# SPDX-License-Identifier: MIT
"""jsonbind.domain package."""

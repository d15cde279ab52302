# src/jsonbind/domain/interfaces/__init__.py
# Copyright (c) Jsonbind.
# SPDX-License-Identifier: MIT
"""jsonbind.domain.interfaces package."""

# src/jsonbind/application/__init__.py
# Copyright (c) Jsonbind.
# SPDX-License-Identifier: MIT
"""jsonbind.application package."""

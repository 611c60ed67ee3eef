# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared type aliases and constants for the tool catalog."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Final, TypeAlias

JSONPrimitive: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONPrimitive | Sequence["JSONValue"] | Mapping[str, "JSONValue"]

CATALOG_FILENAME: Final[str] = "index.json"
TOOLS_KEY: Final[str] = "tools"

__all__ = [
    "CATALOG_FILENAME",
    "TOOLS_KEY",
    "JSONPrimitive",
    "JSONValue",
]

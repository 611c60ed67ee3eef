# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Public export surface for the tool catalog."""

from __future__ import annotations

from typing import Final

from .errors import CatalogMalformedError, CatalogNotFoundError, RegistryError, UnknownToolError
from .index import CatalogStats, ToolIndex
from .lint import lint_tool
from .loader import ToolCatalogLoader, load_catalog
from .model_tool import ToolCatalog, ToolExample, ToolMetadata, ToolParameter

__all__: Final[tuple[str, ...]] = (
    "CatalogMalformedError",
    "CatalogNotFoundError",
    "CatalogStats",
    "RegistryError",
    "ToolCatalog",
    "ToolCatalogLoader",
    "ToolExample",
    "ToolIndex",
    "ToolMetadata",
    "ToolParameter",
    "UnknownToolError",
    "lint_tool",
    "load_catalog",
)

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Exceptions raised while loading and validating tool catalogs."""

from __future__ import annotations

from pathlib import Path


class RegistryError(RuntimeError):
    """Base class for every error raised by the tool bundle registry."""


class CatalogNotFoundError(RegistryError):
    """Raised when the catalog document does not exist."""

    def __init__(self, path: Path) -> None:
        """Create the error for the missing catalog ``path``.

        Args:
            path: Filesystem location where the catalog was expected.
        """

        super().__init__(f"catalog not found: {path}")
        self.path = path


class CatalogMalformedError(RegistryError):
    """Raised when a catalog document cannot be parsed into tool metadata."""


class UnknownToolError(RegistryError, LookupError):
    """Raised when a tool id is not present in the catalog."""

    def __init__(self, tool_id: str) -> None:
        super().__init__(f"unknown tool: {tool_id}")
        self.tool_id = tool_id


__all__ = (
    "CatalogMalformedError",
    "CatalogNotFoundError",
    "RegistryError",
    "UnknownToolError",
)

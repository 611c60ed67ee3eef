# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Read-only lookup helpers over a loaded catalog."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from .errors import UnknownToolError
from .model_tool import ToolCatalog, ToolMetadata


@dataclass(frozen=True, slots=True)
class CatalogStats:
    """Summary counts describing a catalog."""

    total: int
    labels: int


@dataclass(frozen=True, slots=True)
class ToolIndex:
    """Lookup tools by id, label, or free-text search.

    The index preserves catalog order in every sequence it returns.
    """

    catalog: ToolCatalog
    _by_id: Mapping[str, ToolMetadata] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_by_id", {tool.id: tool for tool in self.catalog.tools})

    def get(self, tool_id: str) -> ToolMetadata | None:
        """Return the tool registered under ``tool_id`` when present."""
        return self._by_id.get(tool_id)

    def require(self, tool_id: str) -> ToolMetadata:
        """Return the tool registered under ``tool_id``.

        Raises:
            UnknownToolError: If ``tool_id`` is not in the catalog.
        """
        tool = self._by_id.get(tool_id)
        if tool is None:
            raise UnknownToolError(tool_id)
        return tool

    def by_label(self, label: str) -> tuple[ToolMetadata, ...]:
        """Return tools carrying ``label``."""
        return tuple(tool for tool in self.catalog.tools if label in tool.labels)

    def categories(self) -> tuple[str, ...]:
        """Return the sorted set of labels used across the catalog."""
        return tuple(sorted({label for tool in self.catalog.tools for label in tool.labels}))

    def search(self, term: str) -> tuple[ToolMetadata, ...]:
        """Return tools whose name, description, or labels contain ``term``.

        Matching is case-insensitive; an empty term matches every tool.
        """
        needle = term.lower()
        return tuple(
            tool
            for tool in self.catalog.tools
            if needle in tool.name.lower()
            or needle in tool.description.lower()
            or any(needle in label.lower() for label in tool.labels)
        )

    def stats(self) -> CatalogStats:
        """Return summary counts for the catalog."""
        return CatalogStats(total=len(self.catalog.tools), labels=len(self.categories()))


__all__ = ["CatalogStats", "ToolIndex"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Resolve a catalog entry to its storage category and registration name."""

from __future__ import annotations

from typing import Final

from ..catalog.model_tool import ToolMetadata
from ..config.models import OverrideTables

UNKNOWN_CATEGORY: Final[str] = "unknown"


def resolve_category(tool: ToolMetadata, overrides: OverrideTables) -> str:
    """Return the directory category that stores ``tool``'s artifact.

    An explicit override wins, then a non-empty first label, then ``"unknown"``.

    Args:
        tool: Catalog entry being resolved.
        overrides: Override tables in effect for the run.

    Returns:
        str: Category name used as the artifact sub-directory.
    """

    override = overrides.categories.get(tool.id)
    if override is not None:
        return override
    if tool.labels and tool.labels[0]:
        return tool.labels[0]
    return UNKNOWN_CATEGORY


def resolve_registration_name(tool: ToolMetadata, overrides: OverrideTables) -> str:
    """Return the name ``tool`` must register under in the shared namespace.

    Args:
        tool: Catalog entry being resolved.
        overrides: Override tables in effect for the run.

    Returns:
        str: The override when one exists, otherwise the tool id verbatim.
    """

    return overrides.registration_names.get(tool.id, tool.id)


__all__ = ["UNKNOWN_CATEGORY", "resolve_category", "resolve_registration_name"]

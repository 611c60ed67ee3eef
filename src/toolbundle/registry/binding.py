# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Combine the resolvers and locator into one binding per catalog entry."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..catalog.model_tool import ToolMetadata
from ..config.models import ArtifactConventions, OverrideTables
from .locator import locate
from .resolvers import resolve_category, resolve_registration_name


@dataclass(frozen=True, slots=True)
class ToolBinding:
    """Where a tool's artifact should live and what name it must register."""

    tool: ToolMetadata
    category: str
    registration_name: str
    artifact_path: Path


def bind_tool(
    tool: ToolMetadata,
    *,
    overrides: OverrideTables,
    conventions: ArtifactConventions,
    artifact_root: Path,
) -> ToolBinding:
    """Resolve category and registration name, then locate the artifact.

    Args:
        tool: Catalog entry to bind.
        overrides: Override tables in effect.
        conventions: Artifact layout conventions.
        artifact_root: Directory holding the category sub-directories.

    Returns:
        ToolBinding: Resolved binding; the artifact may or may not exist.
    """

    category = resolve_category(tool, overrides)
    return ToolBinding(
        tool=tool,
        category=category,
        registration_name=resolve_registration_name(tool, overrides),
        artifact_path=locate(tool, category, artifact_root, extension=conventions.extension),
    )


__all__ = ["ToolBinding", "bind_tool"]

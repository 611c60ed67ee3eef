# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Compute the expected location of a tool's implementation artifact."""

from __future__ import annotations

from pathlib import Path

from ..catalog.model_tool import ToolMetadata
from ..config.models import DEFAULT_EXTENSION


def locate(tool: ToolMetadata, category: str, artifact_root: Path, *, extension: str = DEFAULT_EXTENSION) -> Path:
    """Return ``artifact_root/category/<id><extension>`` without touching the disk.

    Args:
        tool: Catalog entry whose artifact is located.
        category: Category resolved for ``tool``.
        artifact_root: Directory holding one sub-directory per category.
        extension: Artifact file extension including the leading dot.

    Returns:
        Path: Expected artifact path; existence is checked by the validator.
    """

    return artifact_root / category / f"{tool.id}{extension}"


def is_within(path: Path, root: Path) -> bool:
    """Return ``True`` when ``path`` resolves to a location inside ``root``."""

    return path.resolve().is_relative_to(root.resolve())


def display_path(path: Path, root: Path) -> str:
    """Return ``path`` relative to ``root`` in POSIX form when possible."""

    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()


__all__ = ["display_path", "is_within", "locate"]

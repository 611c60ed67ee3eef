# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Errors raised while checking artifacts against the catalog."""

from __future__ import annotations

from pathlib import Path

from ..catalog.errors import RegistryError


class ArtifactRootNotFoundError(RegistryError):
    """Raised when the artifact directory does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"artifact root not found: {path}")
        self.path = path


class ArtifactAccessError(RegistryError):
    """Raised when a single artifact cannot be inspected.

    Covers unreadable files and locations that escape the artifact root. The
    runner recovers from this error per tool.
    """

    def __init__(self, tool_id: str, path: Path, reason: str) -> None:
        super().__init__(f"{tool_id}: {reason} ({path})")
        self.tool_id = tool_id
        self.path = path
        self.reason = reason


__all__ = ("ArtifactAccessError", "ArtifactRootNotFoundError")

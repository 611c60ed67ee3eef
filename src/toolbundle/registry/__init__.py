# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Bind catalog entries to their implementation artifacts and verify them."""

from __future__ import annotations

from typing import Final

from .binding import ToolBinding, bind_tool
from .errors import ArtifactAccessError, ArtifactRootNotFoundError
from .inspection import ArtifactInspector, SubstringInspector
from .locator import locate
from .report import IssueKind, ValidationIssue, ValidationReport, ValidationResult
from .resolvers import UNKNOWN_CATEGORY, resolve_category, resolve_registration_name
from .runner import ValidationRunner, collect_report, run_validation
from .validator import validate_artifact

__all__: Final[tuple[str, ...]] = (
    "UNKNOWN_CATEGORY",
    "ArtifactAccessError",
    "ArtifactInspector",
    "ArtifactRootNotFoundError",
    "IssueKind",
    "SubstringInspector",
    "ToolBinding",
    "ValidationIssue",
    "ValidationReport",
    "ValidationResult",
    "ValidationRunner",
    "bind_tool",
    "collect_report",
    "locate",
    "resolve_category",
    "resolve_registration_name",
    "run_validation",
    "validate_artifact",
)

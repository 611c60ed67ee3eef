# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Check a located artifact for the encapsulation and registration markers."""

from __future__ import annotations

import stat
from pathlib import Path

from ..catalog.model_tool import ToolMetadata
from .errors import ArtifactAccessError
from .inspection import ArtifactInspector, SubstringInspector
from .locator import display_path, is_within
from .report import IssueKind, ValidationIssue, ValidationResult


def validate_artifact(
    tool: ToolMetadata,
    path: Path,
    expected_name: str,
    *,
    artifact_root: Path,
    category: str,
    inspector: ArtifactInspector | None = None,
) -> ValidationResult:
    """Return the structural verdict for ``tool``'s artifact at ``path``.

    A missing artifact short-circuits: both marker checks report ``False``
    without reading anything.

    Args:
        tool: Catalog entry being validated.
        path: Location computed by :func:`toolbundle.registry.locator.locate`.
        expected_name: Registration name resolved for ``tool``.
        artifact_root: Root the artifact must stay inside.
        category: Category resolved for ``tool``, recorded on the result.
        inspector: Marker inspector; defaults to the substring inspector.

    Returns:
        ValidationResult: Per-tool verdict with one issue per unmet expectation.

    Raises:
        ArtifactAccessError: If ``path`` escapes ``artifact_root`` or cannot be read.
    """

    active_inspector = inspector if inspector is not None else SubstringInspector()
    shown_path = display_path(path, artifact_root)
    source = _read_source(tool, path, artifact_root)
    if source is None:
        return ValidationResult(
            tool_id=tool.id,
            category=category,
            registration_name=expected_name,
            artifact_path=shown_path,
            implementation_found=False,
            has_encapsulation=False,
            has_registration=False,
            issues=(ValidationIssue(IssueKind.ARTIFACT_NOT_FOUND, f"artifact not found: {shown_path}"),),
        )

    has_encapsulation = active_inspector.has_encapsulation(source)
    has_registration = active_inspector.has_registration(source, expected_name)
    issues: list[ValidationIssue] = []
    if not has_encapsulation:
        issues.append(
            ValidationIssue(IssueKind.ENCAPSULATION_MISSING, "does not run in a self-invoking isolated scope"),
        )
    if not has_registration:
        issues.append(
            ValidationIssue(IssueKind.REGISTRATION_MISSING, f"does not register properly (expected: {expected_name})"),
        )
    return ValidationResult(
        tool_id=tool.id,
        category=category,
        registration_name=expected_name,
        artifact_path=shown_path,
        implementation_found=True,
        has_encapsulation=has_encapsulation,
        has_registration=has_registration,
        issues=tuple(issues),
    )


def _read_source(tool: ToolMetadata, path: Path, artifact_root: Path) -> str | None:
    """Return the artifact text, or ``None`` when no regular file exists at ``path``.

    Every other filesystem failure (symlink loops, permission errors, paths the
    OS rejects) is reported as :class:`ArtifactAccessError` for this tool only.
    """

    try:
        inside = is_within(path, artifact_root)
        mode = path.stat().st_mode if inside else None
        source = path.read_text(encoding="utf-8", errors="replace") if mode and stat.S_ISREG(mode) else None
    except (FileNotFoundError, NotADirectoryError):
        return None
    except OSError as exc:
        raise ArtifactAccessError(tool.id, path, exc.strerror or type(exc).__name__) from exc
    except (RuntimeError, ValueError) as exc:
        # pathlib raises RuntimeError for symlink loops on older interpreters and ValueError for NUL bytes
        raise ArtifactAccessError(tool.id, path, str(exc)) from exc
    if not inside:
        raise ArtifactAccessError(tool.id, path, "artifact path escapes the artifact root")
    return source


__all__ = ["validate_artifact"]

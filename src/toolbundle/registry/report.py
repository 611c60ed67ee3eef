# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Result models produced by a validation run."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any


class IssueKind(str, Enum):
    """Per-tool conditions that make a catalog entry invalid."""

    ARTIFACT_NOT_FOUND = "artifact-not-found"
    ARTIFACT_UNREADABLE = "artifact-unreadable"
    ENCAPSULATION_MISSING = "encapsulation-missing"
    REGISTRATION_MISSING = "registration-missing"


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    """One unmet expectation for a tool, rendered as its own report line."""

    kind: IssueKind
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"kind": self.kind.value, "message": self.message}


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of checking one catalog entry against its artifact."""

    tool_id: str
    category: str
    registration_name: str
    artifact_path: str
    implementation_found: bool
    has_encapsulation: bool
    has_registration: bool
    issues: tuple[ValidationIssue, ...] = ()
    metadata_findings: tuple[str, ...] = ()

    @property
    def valid(self) -> bool:
        """Return ``True`` when the artifact exists and carries both markers."""
        return self.implementation_found and self.has_encapsulation and self.has_registration

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-compatible mapping of the result."""
        return {
            "id": self.tool_id,
            "category": self.category,
            "registrationName": self.registration_name,
            "artifactPath": self.artifact_path,
            "implementationFound": self.implementation_found,
            "hasEncapsulation": self.has_encapsulation,
            "hasRegistration": self.has_registration,
            "valid": self.valid,
            "issues": [issue.to_dict() for issue in self.issues],
            "metadataFindings": list(self.metadata_findings),
        }


@dataclass(frozen=True, slots=True)
class ValidationReport:
    """Aggregate verdict over every catalog entry, in catalog order."""

    catalog_path: Path
    artifact_root: Path
    results: tuple[ValidationResult, ...] = ()
    fatal: str | None = None
    strict_metadata: bool = False

    @property
    def overall_valid(self) -> bool:
        """Return ``True`` only when the run completed and every tool is valid."""
        if self.fatal is not None:
            return False
        if not all(result.valid for result in self.results):
            return False
        if self.strict_metadata and any(result.metadata_findings for result in self.results):
            return False
        return True

    @property
    def invalid_results(self) -> tuple[ValidationResult, ...]:
        """Return results that failed structural validation."""
        return tuple(result for result in self.results if not result.valid)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-compatible mapping of the report."""
        return {
            "overallValid": self.overall_valid,
            "catalog": self.catalog_path.as_posix(),
            "artifactRoot": self.artifact_root.as_posix(),
            "fatal": self.fatal,
            "strictMetadata": self.strict_metadata,
            "results": [result.to_dict() for result in self.results],
        }

    def to_json(self) -> str:
        """Return a deterministic JSON rendering of the report."""
        return json.dumps(self.to_dict(), indent=2, sort_keys=True) + "\n"


__all__ = ["IssueKind", "ValidationIssue", "ValidationReport", "ValidationResult"]

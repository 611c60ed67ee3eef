# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Run the catalog-to-artifact validation pass over a whole bundle."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field, replace
from pathlib import Path

from ..catalog.errors import RegistryError
from ..catalog.lint import lint_tool
from ..catalog.loader import load_catalog
from ..catalog.model_tool import ToolCatalog, ToolMetadata
from ..config.models import RegistryConfig
from .binding import bind_tool
from .errors import ArtifactAccessError, ArtifactRootNotFoundError
from .inspection import ArtifactInspector, SubstringInspector
from .locator import display_path
from .report import IssueKind, ValidationIssue, ValidationReport, ValidationResult
from .validator import validate_artifact

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class ValidationRunner:
    """Validate every catalog entry against the artifact tree."""

    artifact_root: Path
    config: RegistryConfig = field(default_factory=RegistryConfig)
    inspector: ArtifactInspector | None = None

    def __post_init__(self) -> None:
        if self.inspector is None:
            self.inspector = SubstringInspector.from_conventions(self.config.conventions)

    def check_tool(self, tool: ToolMetadata) -> ValidationResult:
        """Resolve, locate, and validate a single tool.

        Artifact I/O failures are recovered here and reported on the result.

        Args:
            tool: Catalog entry to validate.

        Returns:
            ValidationResult: Verdict for ``tool``, including metadata findings.
        """

        binding = bind_tool(
            tool,
            overrides=self.config.overrides,
            conventions=self.config.conventions,
            artifact_root=self.artifact_root,
        )
        category, expected_name, path = binding.category, binding.registration_name, binding.artifact_path
        LOGGER.debug("checking tool=%s category=%s name=%s path=%s", tool.id, category, expected_name, path)
        try:
            result = validate_artifact(
                tool,
                path,
                expected_name,
                artifact_root=self.artifact_root,
                category=category,
                inspector=self.inspector,
            )
        except ArtifactAccessError as exc:
            LOGGER.warning("artifact for %s could not be inspected: %s", tool.id, exc.reason)
            result = ValidationResult(
                tool_id=tool.id,
                category=category,
                registration_name=expected_name,
                artifact_path=display_path(path, self.artifact_root),
                implementation_found=False,
                has_encapsulation=False,
                has_registration=False,
                issues=(ValidationIssue(IssueKind.ARTIFACT_UNREADABLE, f"artifact unreadable: {exc.reason}"),),
            )
        findings = lint_tool(tool)
        if not findings:
            return result
        return replace(result, metadata_findings=findings)

    def check_catalog(self, catalog: ToolCatalog) -> tuple[ValidationResult, ...]:
        """Validate every tool, returning results in catalog order.

        Args:
            catalog: Loaded catalog.

        Returns:
            tuple[ValidationResult, ...]: One result per tool, in catalog order.

        Raises:
            ArtifactRootNotFoundError: If the artifact root is not a directory.
        """

        if not self.artifact_root.is_dir():
            raise ArtifactRootNotFoundError(self.artifact_root)
        jobs = self.config.execution.jobs
        if jobs <= 1 or len(catalog.tools) <= 1:
            return tuple(self.check_tool(tool) for tool in catalog.tools)
        return self._check_in_parallel(catalog.tools, jobs)

    def _check_in_parallel(self, tools: tuple[ToolMetadata, ...], jobs: int) -> tuple[ValidationResult, ...]:
        slots: list[ValidationResult | None] = [None] * len(tools)
        with ThreadPoolExecutor(max_workers=jobs) as executor:
            future_map = {executor.submit(self.check_tool, tool): index for index, tool in enumerate(tools)}
            for future in as_completed(future_map):
                slots[future_map[future]] = future.result()
        return tuple(result for result in slots if result is not None)


def run_validation(
    catalog_path: Path,
    artifact_root: Path,
    config: RegistryConfig | None = None,
    *,
    inspector: ArtifactInspector | None = None,
) -> ValidationReport:
    """Validate the catalog at ``catalog_path`` against ``artifact_root``.

    Args:
        catalog_path: Location of the catalog document.
        artifact_root: Directory holding ``<category>/<id><extension>`` artifacts.
        config: Effective configuration; defaults are used when omitted.
        inspector: Optional marker inspector replacing the configured one.

    Returns:
        ValidationReport: Report whose results follow catalog order.

    Raises:
        CatalogNotFoundError: If the catalog is missing.
        CatalogMalformedError: If the catalog cannot be parsed.
        ArtifactRootNotFoundError: If the artifact root is missing.
    """

    effective = config if config is not None else RegistryConfig()
    catalog = load_catalog(catalog_path)
    runner = ValidationRunner(artifact_root=artifact_root, config=effective, inspector=inspector)
    results = runner.check_catalog(catalog)
    return ValidationReport(
        catalog_path=catalog_path,
        artifact_root=artifact_root,
        results=results,
        strict_metadata=effective.execution.strict_metadata,
    )


def collect_report(
    catalog_path: Path,
    artifact_root: Path,
    config: RegistryConfig | None = None,
    *,
    inspector: ArtifactInspector | None = None,
) -> ValidationReport:
    """Return a report, folding run-fatal errors into an invalid, empty report."""

    try:
        return run_validation(catalog_path, artifact_root, config, inspector=inspector)
    except RegistryError as exc:
        LOGGER.debug("validation aborted: %s", exc)
        return ValidationReport(
            catalog_path=catalog_path,
            artifact_root=artifact_root,
            fatal=str(exc),
            strict_metadata=config.execution.strict_metadata if config is not None else False,
        )


__all__ = ["ValidationRunner", "collect_report", "run_validation"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Console rendering for validation reports.

Each failing expectation produces its own line prefixed with the tool id so CI
logs can be grepped per tool; the final line carries the overall verdict.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..logging import fail, ok, section, warn
from ..registry.report import ValidationReport, ValidationResult


@dataclass(frozen=True, slots=True)
class ReportStyle:
    """Presentation flags applied while rendering a report."""

    use_emoji: bool = True
    use_color: bool = True
    quiet: bool = False


def summary_line(report: ValidationReport) -> str:
    """Return the one-line verdict for ``report``."""

    total = len(report.results)
    if report.fatal is not None:
        return f"Bundle validation failed: {report.fatal}"
    invalid = len(report.invalid_results)
    if invalid:
        return f"Bundle validation failed: {invalid} of {total} tools invalid"
    if not report.overall_valid:
        flagged = sum(1 for result in report.results if result.metadata_findings)
        return f"Bundle validation failed: {flagged} of {total} tools have incomplete metadata"
    noun = "tool" if total == 1 else "tools"
    return f"Bundle validation passed: {total} {noun} valid"


def render_report(report: ValidationReport, style: ReportStyle) -> None:
    """Print per-tool diagnostics followed by the overall verdict.

    Args:
        report: Report produced by the validation runner.
        style: Presentation flags.
    """

    if report.fatal is None and not style.quiet:
        section(f"Validating {len(report.results)} tools", use_color=style.use_color)
    for result in report.results:
        _render_result(result, report=report, style=style)

    verdict = summary_line(report)
    if report.overall_valid:
        ok(verdict, use_emoji=style.use_emoji, use_color=style.use_color)
    else:
        fail(verdict, use_emoji=style.use_emoji, use_color=style.use_color)


def _render_result(result: ValidationResult, *, report: ValidationReport, style: ReportStyle) -> None:
    if result.valid and not style.quiet:
        ok(
            f"{result.tool_id}: {result.artifact_path} registers as '{result.registration_name}'",
            use_emoji=style.use_emoji,
            use_color=style.use_color,
        )
    for issue in result.issues:
        fail(f"{result.tool_id}: {issue.message}", use_emoji=style.use_emoji, use_color=style.use_color)
    for finding in result.metadata_findings:
        message = f"{result.tool_id}: metadata {finding}"
        if report.strict_metadata:
            fail(message, use_emoji=style.use_emoji, use_color=style.use_color)
        elif not style.quiet:
            warn(message, use_emoji=style.use_emoji, use_color=style.use_color)


__all__ = ["ReportStyle", "render_report", "summary_line"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Write validation reports to disk."""

from __future__ import annotations

from pathlib import Path

from ..registry.report import ValidationReport


def write_json_report(report: ValidationReport, destination: Path) -> Path:
    """Serialise ``report`` as deterministic JSON at ``destination``.

    Args:
        report: Report produced by the validation runner.
        destination: Output file; parent directories are created on demand.

    Returns:
        Path: The written file path.
    """

    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(report.to_json(), encoding="utf-8")
    return destination


__all__ = ["write_json_report"]

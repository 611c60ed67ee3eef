# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Reporting helpers for validation results."""

from __future__ import annotations

from .emitters import write_json_report
from .formatters import ReportStyle, render_report, summary_line

__all__ = ["ReportStyle", "render_report", "summary_line", "write_json_report"]

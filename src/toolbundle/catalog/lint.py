# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Field-level checks for catalog metadata completeness."""

from __future__ import annotations

from typing import Final

from .model_tool import ToolMetadata, ToolParameter

PARAMETER_TYPES: Final[frozenset[str]] = frozenset({"number", "string", "boolean", "enum"})


def lint_tool(tool: ToolMetadata) -> tuple[str, ...]:
    """Return human-readable findings for incomplete tool metadata.

    Args:
        tool: Catalog entry to inspect.

    Returns:
        tuple[str, ...]: Findings in declaration order; empty when the entry is complete.
    """

    findings: list[str] = []
    if not tool.name:
        findings.append("missing name")
    if not tool.description:
        findings.append("missing description")
    for index, parameter in enumerate(tool.parameters):
        findings.extend(f"parameter[{index}] {finding}" for finding in lint_parameter(parameter))
    return tuple(findings)


def lint_parameter(parameter: ToolParameter) -> tuple[str, ...]:
    """Return findings for a single parameter descriptor."""

    findings: list[str] = []
    if not parameter.name:
        findings.append("missing name")
    if not parameter.param_type:
        findings.append("missing type")
    elif parameter.param_type not in PARAMETER_TYPES:
        findings.append(f"invalid type: {parameter.param_type}")
    if not parameter.has_default:
        findings.append("missing default value")
    if not parameter.description:
        findings.append("missing description")
    if parameter.param_type == "enum" and not parameter.choices:
        findings.append("enum type requires enum array")
    if (
        parameter.param_type == "number"
        and parameter.minimum is not None
        and parameter.maximum is not None
        and parameter.minimum > parameter.maximum
    ):
        findings.append("min value cannot be greater than max value")
    return tuple(findings)


__all__ = ["PARAMETER_TYPES", "lint_parameter", "lint_tool"]

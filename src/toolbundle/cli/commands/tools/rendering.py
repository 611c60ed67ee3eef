# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Rich renderables for the ``tools`` command group."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ....catalog import ToolParameter
from ....catalog.lint import lint_tool
from ....registry import ToolBinding
from ....registry.locator import display_path


def build_tools_table(bindings: Sequence[ToolBinding], *, artifact_root: Path) -> Table:
    """Return a table listing ``bindings`` in catalog order."""

    table = Table(title=f"Tools ({len(bindings)})", box=box.SIMPLE, expand=True)
    table.add_column("ID", style="bold")
    table.add_column("Name")
    table.add_column("Category")
    table.add_column("Registers As")
    table.add_column("Artifact", overflow="fold")
    table.add_column("Labels", overflow="fold")
    for binding in bindings:
        tool = binding.tool
        table.add_row(
            tool.id,
            tool.name or "-",
            binding.category,
            binding.registration_name,
            display_path(binding.artifact_path, artifact_root),
            ", ".join(tool.labels) or "-",
        )
    return table


def build_metadata_table(binding: ToolBinding, *, artifact_root: Path) -> Table:
    """Return a table describing one tool and its resolved binding."""

    tool = binding.tool
    table = Table(title="Metadata", box=box.SIMPLE, expand=True)
    table.add_column("Field", style="bold")
    table.add_column("Value", overflow="fold")

    table.add_row("Name", tool.display_name)
    table.add_row("Description", tool.description or "-")
    table.add_row("Labels", ", ".join(tool.labels) or "-")
    table.add_row("Category", binding.category)
    table.add_row("Registers As", binding.registration_name)
    table.add_row("Artifact", display_path(binding.artifact_path, artifact_root))
    table.add_row("Artifact Exists", _yes_no(_is_file(binding.artifact_path)))
    table.add_row("Input Types", ", ".join(tool.input_types) or "-")
    table.add_row("Output Types", ", ".join(tool.output_types) or "-")
    table.add_row("Temporal", _yes_no(tool.is_temporal))
    if tool.commit:
        table.add_row("Commit", f"{tool.commit} {tool.commit_date}".strip())
    return table


def build_parameters_table(parameters: Sequence[ToolParameter]) -> Table:
    """Return a table enumerating tool parameters."""

    table = Table(title="Parameters", box=box.SIMPLE, expand=True)
    table.add_column("Name", style="bold")
    table.add_column("Type")
    table.add_column("Default")
    table.add_column("Range")
    table.add_column("Description", overflow="fold")
    for parameter in parameters:
        table.add_row(
            parameter.name or "-",
            parameter.param_type or "-",
            str(parameter.default) if parameter.has_default else "-",
            _range(parameter),
            parameter.description or "-",
        )
    return table


def render_tool(console: Console, binding: ToolBinding, *, artifact_root: Path) -> None:
    """Print the full detail view for ``binding``."""

    console.print(build_metadata_table(binding, artifact_root=artifact_root))
    if binding.tool.parameters:
        console.print(build_parameters_table(binding.tool.parameters))
    findings = lint_tool(binding.tool)
    if findings:
        console.print(
            Panel(
                "\n".join(findings),
                title="Metadata Findings",
                border_style="yellow",
            ),
        )


def _range(parameter: ToolParameter) -> str:
    if parameter.choices:
        return " | ".join(parameter.choices)
    if parameter.minimum is None and parameter.maximum is None:
        return "-"
    low = "" if parameter.minimum is None else str(parameter.minimum)
    high = "" if parameter.maximum is None else str(parameter.maximum)
    return f"{low}..{high}"


def _is_file(path: Path) -> bool:
    try:
        return path.is_file()
    except (OSError, ValueError):
        return False


def _yes_no(value: bool) -> str:
    return "yes" if value else "no"


__all__ = ["build_metadata_table", "build_parameters_table", "build_tools_table", "render_tool"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI commands for browsing the tool catalog."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.text import Text

from ....catalog import RegistryError, UnknownToolError
from ....config import ConfigError
from ...shared import EXIT_FATAL, EXIT_INVALID, CLIError, build_cli_logger, create_typer
from ..validate.models import (
    ARTIFACTS_OPTION,
    CATALOG_OPTION,
    CONFIG_OPTION,
    NO_COLOR_OPTION,
    PRESET_OPTION,
    ROOT_ARGUMENT,
)
from .rendering import build_tools_table, render_tool
from .services import BundleView, load_bundle_view, select_bindings

tools_app = create_typer(name="tools", help_text="Inspect catalog entries and their resolved bindings.")

TOOL_ID_ARGUMENT = Annotated[str, typer.Argument(help="Catalog id of the tool to show.")]
CATEGORY_OPTION = Annotated[
    str | None,
    typer.Option("--category", "-c", help="Only list tools resolved to this category.", show_default=False),
]
SEARCH_OPTION = Annotated[
    str | None,
    typer.Option("--search", "-s", help="Case-insensitive match on name, description, or labels.", show_default=False),
]


@tools_app.command("list")
def list_tools(
    root: ROOT_ARGUMENT = Path("."),
    category: CATEGORY_OPTION = None,
    search: SEARCH_OPTION = None,
    catalog: CATALOG_OPTION = None,
    artifacts: ARTIFACTS_OPTION = None,
    config: CONFIG_OPTION = None,
    preset: PRESET_OPTION = None,
    no_color: NO_COLOR_OPTION = False,
) -> None:
    """List catalog entries with their resolved category and registration name."""

    view = _load_view(
        root,
        catalog=catalog,
        artifacts=artifacts,
        config=config,
        preset=preset,
        no_color=no_color,
    )
    bindings = select_bindings(view, category=category, search=search)
    console = Console(no_color=no_color, highlight=False)
    console.print(build_tools_table(bindings, artifact_root=view.artifact_root))


@tools_app.command("show")
def show_tool(
    tool_id: TOOL_ID_ARGUMENT,
    root: ROOT_ARGUMENT = Path("."),
    catalog: CATALOG_OPTION = None,
    artifacts: ARTIFACTS_OPTION = None,
    config: CONFIG_OPTION = None,
    preset: PRESET_OPTION = None,
    no_color: NO_COLOR_OPTION = False,
) -> None:
    """Show one tool's metadata and where its implementation is expected."""

    view = _load_view(
        root,
        catalog=catalog,
        artifacts=artifacts,
        config=config,
        preset=preset,
        no_color=no_color,
    )
    logger = build_cli_logger(emoji=True, no_color=no_color)
    try:
        tool = view.index.require(tool_id)
    except UnknownToolError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=EXIT_INVALID) from exc
    console = Console(no_color=no_color, highlight=False)
    console.print(Text(tool.id, style="bold"))
    render_tool(console, view.bind(tool), artifact_root=view.artifact_root)


def _load_view(
    root: Path,
    *,
    catalog: Path | None,
    artifacts: Path | None,
    config: Path | None,
    preset: str | None,
    no_color: bool,
) -> BundleView:
    logger = build_cli_logger(emoji=True, no_color=no_color)
    try:
        return _require_view(root, catalog=catalog, artifacts=artifacts, config=config, preset=preset)
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc


def _require_view(
    root: Path,
    *,
    catalog: Path | None,
    artifacts: Path | None,
    config: Path | None,
    preset: str | None,
) -> BundleView:
    try:
        return load_bundle_view(
            root,
            catalog_path=catalog,
            artifact_root=artifacts,
            config_path=config,
            preset=preset,
        )
    except ConfigError as exc:
        raise CLIError(f"Configuration error: {exc}", exit_code=EXIT_FATAL) from exc
    except RegistryError as exc:
        raise CLIError(str(exc), exit_code=EXIT_FATAL) from exc


__all__ = ["list_tools", "show_tool", "tools_app"]

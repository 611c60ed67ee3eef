# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Data structures for the bundle validation CLI."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

from ....catalog.types import CATALOG_FILENAME

ARTIFACT_DIRNAME = "tools"

ROOT_ARGUMENT = Annotated[
    Path,
    typer.Argument(
        help="Bundle root holding the catalog and the artifact tree.",
        show_default="current directory",
    ),
]
CATALOG_OPTION = Annotated[
    Path | None,
    typer.Option(
        "--catalog",
        help=f"Catalog document (default: ROOT/{CATALOG_FILENAME}).",
        show_default=False,
    ),
]
ARTIFACTS_OPTION = Annotated[
    Path | None,
    typer.Option(
        "--artifacts",
        help=f"Artifact root holding category directories (default: ROOT/{ARTIFACT_DIRNAME}).",
        show_default=False,
    ),
]
CONFIG_OPTION = Annotated[
    Path | None,
    typer.Option("--config", help="Explicit configuration file; must exist.", show_default=False),
]
PRESET_OPTION = Annotated[
    str | None,
    typer.Option("--preset", help="Named preset supplying override tables.", show_default=False),
]
JOBS_OPTION = Annotated[
    int | None,
    typer.Option("--jobs", "-j", min=1, help="Number of artifacts inspected concurrently."),
]
STRICT_METADATA_OPTION = Annotated[
    bool,
    typer.Option(
        "--strict-metadata",
        help="Treat incomplete catalog metadata as a validation failure.",
    ),
]
REPORT_OUT_OPTION = Annotated[
    Path | None,
    typer.Option("--report-out", help="Write the JSON report to this path.", show_default=False),
]
EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji output."),
]
NO_COLOR_OPTION = Annotated[
    bool,
    typer.Option("--no-color", help="Disable ANSI colour output."),
]
QUIET_OPTION = Annotated[
    bool,
    typer.Option("--quiet", "-q", help="Only print failures and the final verdict."),
]
DEBUG_OPTION = Annotated[
    bool,
    typer.Option("--debug", help="Stream library debug logging to stderr."),
]


@dataclass(slots=True)
class ValidateOptions:
    """Normalised CLI inputs for a validation run."""

    root: Path
    catalog_path: Path
    artifact_root: Path
    config_path: Path | None
    preset: str | None
    jobs: int | None
    strict_metadata: bool
    report_out: Path | None
    use_emoji: bool
    use_color: bool
    quiet: bool
    debug: bool


def build_validate_options(
    *,
    root: Path,
    catalog: Path | None,
    artifacts: Path | None,
    config: Path | None,
    preset: str | None,
    jobs: int | None,
    strict_metadata: bool,
    report_out: Path | None,
    emoji: bool,
    no_color: bool,
    quiet: bool,
    debug: bool,
) -> ValidateOptions:
    """Construct ``ValidateOptions`` from Typer parameters.

    Catalog and artifact locations default to the conventional layout under
    ``root`` when not supplied explicitly.

    Returns:
        ValidateOptions: Structured CLI options for the validation run.
    """

    resolved_root = root.resolve()
    return ValidateOptions(
        root=resolved_root,
        catalog_path=catalog if catalog is not None else resolved_root / CATALOG_FILENAME,
        artifact_root=artifacts if artifacts is not None else resolved_root / ARTIFACT_DIRNAME,
        config_path=config,
        preset=preset,
        jobs=jobs,
        strict_metadata=strict_metadata,
        report_out=report_out,
        use_emoji=emoji,
        use_color=not no_color,
        quiet=quiet,
        debug=debug,
    )


__all__ = [
    "ARTIFACTS_OPTION",
    "ARTIFACT_DIRNAME",
    "CATALOG_OPTION",
    "CONFIG_OPTION",
    "DEBUG_OPTION",
    "EMOJI_OPTION",
    "JOBS_OPTION",
    "NO_COLOR_OPTION",
    "PRESET_OPTION",
    "QUIET_OPTION",
    "REPORT_OUT_OPTION",
    "ROOT_ARGUMENT",
    "STRICT_METADATA_OPTION",
    "ValidateOptions",
    "build_validate_options",
]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI command validating a tool bundle against its catalog."""

from __future__ import annotations

from pathlib import Path

import typer

from ....config import ConfigError
from ....logging import configure_debug_logging
from ....reporting import ReportStyle, render_report, write_json_report
from ....registry import collect_report
from ...shared import EXIT_FATAL, build_cli_logger
from .models import (
    ARTIFACTS_OPTION,
    CATALOG_OPTION,
    CONFIG_OPTION,
    DEBUG_OPTION,
    EMOJI_OPTION,
    JOBS_OPTION,
    NO_COLOR_OPTION,
    PRESET_OPTION,
    QUIET_OPTION,
    REPORT_OUT_OPTION,
    ROOT_ARGUMENT,
    STRICT_METADATA_OPTION,
    build_validate_options,
)
from .services import exit_code_for, load_validation_config


def validate_command(
    root: ROOT_ARGUMENT = Path("."),
    catalog: CATALOG_OPTION = None,
    artifacts: ARTIFACTS_OPTION = None,
    config: CONFIG_OPTION = None,
    preset: PRESET_OPTION = None,
    jobs: JOBS_OPTION = None,
    strict_metadata: STRICT_METADATA_OPTION = False,
    report_out: REPORT_OUT_OPTION = None,
    emoji: EMOJI_OPTION = True,
    no_color: NO_COLOR_OPTION = False,
    quiet: QUIET_OPTION = False,
    debug: DEBUG_OPTION = False,
) -> None:
    """Check that every catalog entry has a conforming implementation artifact.

    Exits 0 when the bundle is valid, 1 when any tool fails validation and 2
    when the run cannot proceed (missing or malformed catalog, missing
    artifact root, invalid configuration).
    """

    options = build_validate_options(
        root=root,
        catalog=catalog,
        artifacts=artifacts,
        config=config,
        preset=preset,
        jobs=jobs,
        strict_metadata=strict_metadata,
        report_out=report_out,
        emoji=emoji,
        no_color=no_color,
        quiet=quiet,
        debug=debug,
    )
    logger = build_cli_logger(emoji=options.use_emoji, debug=options.debug, no_color=not options.use_color)
    configure_debug_logging(options.debug)

    try:
        registry_config = load_validation_config(options)
    except ConfigError as exc:
        logger.fail(f"Configuration error: {exc}")
        raise typer.Exit(code=EXIT_FATAL) from exc

    logger.debug(
        f"catalog={options.catalog_path} artifacts={options.artifact_root} "
        f"jobs={registry_config.execution.jobs}",
    )
    report = collect_report(options.catalog_path, options.artifact_root, registry_config)
    render_report(
        report,
        ReportStyle(use_emoji=options.use_emoji, use_color=options.use_color, quiet=options.quiet),
    )
    if options.report_out is not None:
        written = write_json_report(report, options.report_out)
        if not options.quiet:
            logger.echo(f"Report written to {written}")
    raise typer.Exit(code=exit_code_for(report))


__all__ = ["validate_command"]

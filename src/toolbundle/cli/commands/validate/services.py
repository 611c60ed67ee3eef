# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Service helpers backing the validate command."""

from __future__ import annotations

from typing import Any

from ....config import RegistryConfig, load_config
from ....registry.report import ValidationReport
from ...shared import EXIT_FATAL, EXIT_INVALID, EXIT_OK
from .models import ValidateOptions


def execution_overrides(options: ValidateOptions) -> dict[str, Any]:
    """Return the configuration overrides expressed by CLI flags."""

    execution: dict[str, Any] = {}
    if options.jobs is not None:
        execution["jobs"] = options.jobs
    if options.strict_metadata:
        execution["strict_metadata"] = True
    return {"execution": execution} if execution else {}


def load_validation_config(options: ValidateOptions) -> RegistryConfig:
    """Load the layered configuration for ``options``.

    Raises:
        ConfigError: If any configuration layer is missing or invalid.
    """

    return load_config(
        options.root,
        config_path=options.config_path,
        preset=options.preset,
        overrides=execution_overrides(options),
    )


def exit_code_for(report: ValidationReport) -> int:
    """Map ``report`` to the process exit status."""

    if report.fatal is not None:
        return EXIT_FATAL
    return EXIT_OK if report.overall_valid else EXIT_INVALID


__all__ = ["execution_overrides", "exit_code_for", "load_validation_config"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Bundle validation CLI command package."""

from __future__ import annotations

import typer

from ...shared import register_command
from .command import validate_command

__all__ = ["register"]


def register(app: typer.Typer) -> None:
    """Register the validate command.

    Args:
        app: Typer application receiving the validate command registration.
    """

    register_command(app, validate_command, name="validate")

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands and shared services."""

from __future__ import annotations

from .commands import register_commands
from .shared import create_typer

app = create_typer(help_text="Bind tool bundle metadata to its implementation artifacts.")
register_commands(app)

__all__ = ["app"]

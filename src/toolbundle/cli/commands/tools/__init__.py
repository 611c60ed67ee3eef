# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Catalog browsing CLI command package."""

from __future__ import annotations

import typer

from .command import tools_app

__all__ = ["register", "tools_app"]


def register(app: typer.Typer) -> None:
    """Mount the ``tools`` command group on ``app``."""

    app.add_typer(tools_app, name="tools")

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Registration helpers for the ``toolbundle`` sub-commands."""

from __future__ import annotations

import typer

from . import tools, validate


def register_commands(app: typer.Typer) -> None:
    """Attach every sub-command to ``app``.

    Args:
        app: Root Typer application.
    """

    validate.register(app)
    tools.register(app)


__all__ = ["register_commands"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Runtime services shared by the CLI and reporting layers."""

from __future__ import annotations

from .console import ConsoleSettings, RichConsoleManager, detect_tty, get_console_manager

__all__ = ["ConsoleSettings", "RichConsoleManager", "detect_tty", "get_console_manager"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared Rich consoles for user-facing output."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from functools import lru_cache

from rich.console import Console


def detect_tty() -> bool:
    """Return ``True`` when stdout is attached to a terminal."""

    isatty = getattr(sys.stdout, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:
        # closed stream
        return False


@dataclass(frozen=True, slots=True)
class ConsoleSettings:
    """Presentation flags a console is built for."""

    color: bool
    emoji: bool
    tty: bool

    @property
    def styled(self) -> bool:
        """Return ``True`` when ANSI styling should be emitted."""
        return self.color and self.tty


class RichConsoleManager:
    """Hand out one Rich :class:`Console` per distinct :class:`ConsoleSettings`.

    Consoles are created without an explicit file so they always write to the
    current ``sys.stdout``, which keeps output capturable under test runners.
    """

    def __init__(self) -> None:
        self._consoles: dict[ConsoleSettings, Console] = {}

    def get(self, *, color: bool, emoji: bool) -> Console:
        """Return the console matching ``color`` and ``emoji`` for the current stdout.

        Args:
            color: Whether colour output is requested.
            emoji: Whether Rich should substitute ``:emoji:`` codes.

        Returns:
            Console: Shared console for these settings.
        """

        settings = ConsoleSettings(color=color, emoji=emoji, tty=detect_tty())
        console = self._consoles.get(settings)
        if console is None:
            console = Console(
                color_system="auto" if settings.styled else None,
                force_terminal=settings.tty,
                no_color=not settings.styled,
                emoji=settings.emoji,
                highlight=False,
                soft_wrap=True,
            )
            self._consoles[settings] = console
        return console


@lru_cache(maxsize=1)
def get_console_manager() -> RichConsoleManager:
    """Return the process-wide :class:`RichConsoleManager`."""

    return RichConsoleManager()


__all__ = ["ConsoleSettings", "RichConsoleManager", "detect_tty", "get_console_manager"]

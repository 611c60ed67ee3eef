# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Console lines for validation output plus opt-in library debug logging.

User-facing lines (``ok``, ``warn``, ``fail``, ``section``) go through Rich on
stdout. Library modules log through ``logging.getLogger(__name__)`` under the
``toolbundle`` logger, which stays silent unless :func:`configure_debug_logging`
attaches a handler.
"""

from __future__ import annotations

import logging
import sys
from enum import Enum

from rich.rule import Rule
from rich.text import Text

from .runtime.console import detect_tty, get_console_manager

PACKAGE_LOGGER = "toolbundle"
DEBUG_FORMAT = "%(levelname)s %(name)s: %(message)s"
_DEBUG_HANDLER_FLAG = "_toolbundle_debug"


class Tone(Enum):
    """Severity of a console line: the glyph prefix and the Rich style."""

    OK = ("✅ ", "green")
    WARN = ("⚠️ ", "yellow")
    FAIL = ("❌ ", "red")

    @property
    def glyph(self) -> str:
        return self.value[0]

    @property
    def style(self) -> str:
        return self.value[1]


def emoji(symbol: str, enable: bool) -> str:
    """Return ``symbol`` when emoji output is enabled, otherwise an empty string."""

    return symbol if enable else ""


def emit(tone: Tone, msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Print ``msg`` as one console line styled for ``tone``.

    Args:
        tone: Line severity.
        msg: Message text; printed literally, never parsed as Rich markup.
        use_emoji: Prefix the line with the tone's glyph.
        use_color: Force colour on or off; ``None`` follows TTY detection.
    """

    colored = detect_tty() if use_color is None else use_color
    line = Text(emoji(tone.glyph, use_emoji) + msg)
    if colored:
        line.stylize(tone.style)
    get_console_manager().get(color=colored, emoji=use_emoji).print(line)


def ok(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    emit(Tone.OK, msg, use_emoji=use_emoji, use_color=use_color)


def warn(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    emit(Tone.WARN, msg, use_emoji=use_emoji, use_color=use_color)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    emit(Tone.FAIL, msg, use_emoji=use_emoji, use_color=use_color)


def section(title: str, *, use_color: bool) -> None:
    """Print a header separating the per-tool block; a Rule on colour terminals."""

    console = get_console_manager().get(color=use_color, emoji=False)
    if use_color and detect_tty():
        console.print(Rule(Text(title)))
        return
    console.print(Text(f"--- {title} ---"))


def configure_debug_logging(enabled: bool) -> None:
    """Stream ``toolbundle`` library log records to stderr when ``enabled``.

    Repeated calls attach at most one handler.
    """

    if not enabled:
        return
    logger = logging.getLogger(PACKAGE_LOGGER)
    if not any(getattr(handler, _DEBUG_HANDLER_FLAG, False) for handler in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(DEBUG_FORMAT))
        setattr(handler, _DEBUG_HANDLER_FLAG, True)
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)


__all__ = [
    "Tone",
    "configure_debug_logging",
    "emit",
    "emoji",
    "fail",
    "ok",
    "section",
    "warn",
]

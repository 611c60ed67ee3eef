# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Exit codes, error type, and console plumbing shared by the CLI commands."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Final

import typer
from rich.console import Console
from rich.text import Text

from ..logging import Tone, emit

EXIT_OK: Final[int] = 0
EXIT_INVALID: Final[int] = 1
EXIT_FATAL: Final[int] = 2


class CLIError(RuntimeError):
    """A command failure carrying the process exit status to use."""

    def __init__(self, message: str, *, exit_code: int = EXIT_INVALID) -> None:
        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLILogger:
    """Console output bound to one command invocation's presentation flags."""

    use_emoji: bool
    use_color: bool = True
    debug_enabled: bool = False
    stderr: Console | None = None

    def ok(self, message: str) -> None:
        emit(Tone.OK, message, use_emoji=self.use_emoji, use_color=self.use_color)

    def warn(self, message: str) -> None:
        emit(Tone.WARN, message, use_emoji=self.use_emoji, use_color=self.use_color)

    def fail(self, message: str) -> None:
        emit(Tone.FAIL, message, use_emoji=self.use_emoji, use_color=self.use_color)

    def echo(self, message: str) -> None:
        """Write ``message`` verbatim to stdout."""

        typer.echo(message)

    def debug(self, message: str) -> None:
        """Write ``message`` to stderr when ``--debug`` is active."""

        if not self.debug_enabled or self.stderr is None:
            return
        line = Text("[debug] ", style="bold cyan")
        line.append(message, style="dim")
        self.stderr.print(line)


def build_cli_logger(*, emoji: bool, debug: bool = False, no_color: bool = False) -> CLILogger:
    """Return a :class:`CLILogger` for the given ``--emoji``/``--debug``/``--no-color`` flags."""

    stderr = Console(stderr=True, no_color=no_color, highlight=False, soft_wrap=True) if debug else None
    return CLILogger(use_emoji=emoji, use_color=not no_color, debug_enabled=debug, stderr=stderr)


def create_typer(*, name: str | None = None, help_text: str | None = None) -> typer.Typer:
    """Return a Typer app that shows help when invoked bare and skips shell completion."""

    return typer.Typer(
        name=name,
        help=help_text,
        no_args_is_help=True,
        add_completion=False,
        pretty_exceptions_enable=False,
    )


CommandCallable = Callable[..., None]


def register_command(app: typer.Typer, callback: CommandCallable, *, name: str) -> CommandCallable:
    """Attach ``callback`` to ``app`` as sub-command ``name``."""

    app.command(name=name)(callback)
    return callback


__all__: Final = [
    "EXIT_FATAL",
    "EXIT_INVALID",
    "EXIT_OK",
    "CLIError",
    "CLILogger",
    "build_cli_logger",
    "create_typer",
    "register_command",
]

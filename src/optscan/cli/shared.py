# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging, errors, registration)."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Final, overload

import typer
from rich.console import Console
from typer.core import TyperCommand

from ..logging import fail as core_fail
from ..logging import warn as core_warn


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLILogger:
    """Adapter around the console helpers respecting CLI emoji settings."""

    console: Console
    use_emoji: bool
    use_color: bool = False

    def fail(self, message: str) -> None:
        """Log a failure message honouring emoji preferences."""

        core_fail(message, use_emoji=self.use_emoji, use_color=self.use_color, console=self.console)

    def warn(self, message: str) -> None:
        """Log a warning message honouring emoji preferences."""

        core_warn(message, use_emoji=self.use_emoji, use_color=self.use_color, console=self.console)

    def echo(self, message: str, *, nl: bool = True) -> None:
        """Write ``message`` to stdout using Typer's echo helper.

        Args:
            message: Text written to standard output.
            nl: Whether a trailing newline is appended.
        """

        typer.echo(message, nl=nl)


def build_cli_logger(*, emoji: bool, no_color: bool = False) -> CLILogger:
    """Return a ``CLILogger`` writing diagnostics to standard error.

    Args:
        emoji: Whether log output may include emoji glyphs.
        no_color: Whether terminal colour output should be disabled.

    Returns:
        CLILogger: Logger instance bound to a dedicated Rich console.
    """

    console = Console(stderr=True, no_color=no_color, highlight=False, emoji=emoji)
    return CLILogger(console=console, use_emoji=emoji, use_color=not no_color)


CommandResult = int | None
CommandCallable = Callable[..., CommandResult]
CommandDecoratorCallable = Callable[[CommandCallable], CommandCallable]


@overload
def register_command(
    app: typer.Typer,
    callback: CommandCallable,
    *,
    name: str | None = None,
    help_text: str | None = None,
    command_class: type[TyperCommand] | None = None,
) -> CommandCallable: ...


@overload
def register_command(
    app: typer.Typer,
    callback: None = ...,
    *,
    name: str | None = None,
    help_text: str | None = None,
    command_class: type[TyperCommand] | None = None,
) -> CommandDecoratorCallable: ...


def register_command(
    app: typer.Typer,
    callback: CommandCallable | None = None,
    *,
    name: str | None = None,
    help_text: str | None = None,
    command_class: type[TyperCommand] | None = None,
) -> CommandDecoratorCallable | CommandCallable:
    """Register a command on ``app`` with consistent metadata handling.

    Commands accept raw, option-looking arguments: unknown options are passed
    through to the callback instead of being rejected by Click.

    Args:
        app: Typer application receiving the command registration.
        callback: Optional callable to register immediately.
        name: Optional explicit command name.
        help_text: Help text shown in CLI usage output.
        command_class: Optional Click command class replacing the default.

    Returns:
        CommandDecoratorCallable | CommandCallable: Either the registered callback or
        a decorator for deferred registration.
    """

    decorator: CommandDecoratorCallable = app.command(
        name=name,
        help=help_text,
        cls=command_class,
        context_settings={"ignore_unknown_options": True},
    )
    if callback is not None:
        return decorator(callback)
    return decorator


__all__: Final = [
    "CLIError",
    "CLILogger",
    "build_cli_logger",
    "register_command",
]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring the optscan commands."""

from __future__ import annotations

from .demo import demo_command
from .inspect_cmd import help_command, parse_command
from .shared import register_command
from .typer_ext import PassthroughTyperCommand, create_typer

app = create_typer(help="Inspect option catalogs and parse argument vectors against them.", no_args_is_help=True)

register_command(
    app,
    demo_command,
    name="demo",
    help_text="Parse every following token against the demonstration catalog.",
    command_class=PassthroughTyperCommand,
)
register_command(app, help_command, name="help", help_text="Print the help text of an option catalog.")
register_command(
    app,
    parse_command,
    name="parse",
    help_text="Parse ARGS against a catalog and report options, positionals and remainder.",
)

__all__ = ["app"]

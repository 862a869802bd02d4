# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Demonstration catalog and the ``demo`` command that exercises it."""

from __future__ import annotations

from collections.abc import Callable
from typing import Final

import typer

from ..errors import ParseError
from ..model_catalog import CatalogBuilder, OptionCatalog
from ..model_option import ParsedOption
from ..parser import OptionParser
from ..types import ArgumentPolicy
from .shared import CLIError, build_cli_logger

LONG_ONLY_FLAG: Final[int] = 1001
LONG_ONLY_WITH_ARGUMENT: Final[int] = 1002


def build_demo_catalog() -> OptionCatalog:
    """Return the catalog used by ``optscan demo`` and as the CLI default."""

    return (
        CatalogBuilder()
        .flag("h", "help", "Display this help message")
        .add("o", "output", "Specify output file", ArgumentPolicy.REQUIRED, "file")
        .add("p", "parameter", "Specify optional parameter", ArgumentPolicy.OPTIONAL)
        .flag(LONG_ONLY_FLAG, "long-option-only", "This has no shortopt")
        .add(
            LONG_ONLY_WITH_ARGUMENT,
            "long-option-with-arg",
            "This has no shortopt and requires an argument",
            ArgumentPolicy.REQUIRED,
        )
        .flag("s", None, "This has no longopt")
        .build()
    )


DEMO_PARSER: Final[OptionParser] = OptionParser(catalog=build_demo_catalog())


def _describe_parameter(option: ParsedOption) -> str:
    if option.has_argument:
        return f"-p given with argument: {option.argument}"
    return "-p given with no argument"


_DESCRIBERS: Final[dict[int, Callable[[ParsedOption], str]]] = {
    ord("o"): lambda option: f"Output file: {option.require_argument()}",
    ord("p"): _describe_parameter,
    LONG_ONLY_FLAG: lambda _option: "--long-option-only given",
    LONG_ONLY_WITH_ARGUMENT: lambda option: (
        f"--long-option-with-arg given with argument: {option.require_argument()}"
    ),
    ord("s"): lambda _option: "-s given",
}


def render_demo(args: list[str]) -> str:
    """Parse ``args`` against the demo catalog and describe the outcome.

    Options are reported in command-line order; ``-h``/``--help`` prints the
    help text and ends the report.

    Args:
        args: Argument vector without the program name.

    Returns:
        str: Report text, one line per option and positional.

    Raises:
        CLIError: If ``args`` do not match the demo catalog.
    """

    try:
        result = DEMO_PARSER.parse(args)
    except ParseError as exc:
        raise CLIError(str(exc)) from exc

    lines: list[str] = []
    for option in result:
        if option.matches("h"):
            return "".join(f"{line}\n" for line in lines) + DEMO_PARSER.help_text
        lines.append(_DESCRIBERS[option.identifier](option))
    lines.extend(f"Non-option argument: {token}" for token in result.positionals)
    return "".join(f"{line}\n" for line in lines)


def demo_command(ctx: typer.Context) -> None:
    """Parse the raw tokens after ``demo`` and print what was found.

    Tokens bypass Click entirely, so ``--`` and ``--help`` keep the meaning the
    demonstration catalog gives them.
    """

    logger = build_cli_logger(emoji=True)
    try:
        report = render_demo(list(ctx.args))
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc
    logger.echo(report, nl=False)


__all__ = ["DEMO_PARSER", "build_demo_catalog", "demo_command", "render_demo"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Commands rendering help text and parse results for arbitrary catalogs."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Any

import typer
from rich import box
from rich.console import Console
from rich.table import Table

from ..errors import CatalogError, ParseError
from ..loader import load_catalog
from ..model_catalog import OptionCatalog
from ..model_result import Remainder, ResultSet
from ..parser import OptionParser
from ..types import StopCondition
from .demo import build_demo_catalog
from .shared import CLIError, build_cli_logger

CatalogOption = Annotated[
    Path | None,
    typer.Option(
        "--catalog",
        exists=True,
        dir_okay=False,
        readable=True,
        help="JSON catalog document; defaults to the demonstration catalog.",
    ),
]


def resolve_catalog(path: Path | None) -> OptionCatalog:
    """Return the catalog stored at ``path`` or the demo catalog.

    Raises:
        CLIError: If the catalog document cannot be loaded.
    """

    if path is None:
        return build_demo_catalog()
    try:
        return load_catalog(path)
    except CatalogError as exc:
        raise CLIError(str(exc), exit_code=2) from exc


def result_payload(catalog: OptionCatalog, result: ResultSet, remainder: Remainder) -> dict[str, Any]:
    """Return a JSON-serialisable description of a parse outcome."""

    return {
        "options": [
            {
                "option": catalog[option.identifier].display_name,
                "identifier": option.identifier,
                "argument": option.argument,
            }
            for option in result
        ],
        "positionals": list(result.positionals),
        "remainder": list(remainder.args),
    }


def build_result_table(catalog: OptionCatalog, result: ResultSet, remainder: Remainder) -> Table:
    """Return a Rich table listing options, positionals and the remainder."""

    table = Table(title="Parse result", box=box.SIMPLE, expand=False)
    table.add_column("Kind", style="bold")
    table.add_column("Token")
    table.add_column("Argument", overflow="fold")
    for option in result:
        table.add_row("option", catalog[option.identifier].display_name, option.argument or "-")
    for token in result.positionals:
        table.add_row("positional", token, "-")
    for token in remainder:
        table.add_row("remainder", token, "-")
    return table


def help_command(catalog: CatalogOption = None) -> None:
    """Print the help text of a catalog."""

    logger = build_cli_logger(emoji=True)
    try:
        resolved = resolve_catalog(catalog)
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc
    if not len(resolved):
        logger.warn("catalog declares no options")
        return
    logger.echo(resolved.help_text, nl=False)


def parse_command(
    args: Annotated[list[str] | None, typer.Argument(help="Arguments to parse; put them after '--'.")] = None,
    catalog: CatalogOption = None,
    stop: Annotated[
        StopCondition,
        typer.Option("--stop", case_sensitive=False, help="Policy deciding when scanning stops."),
    ] = StopCondition.ALL_OPTIONS,
    as_json: Annotated[bool, typer.Option("--json", help="Emit the result as JSON.")] = False,
) -> None:
    """Parse ARGS against a catalog and show options, positionals and remainder."""

    logger = build_cli_logger(emoji=True)
    try:
        resolved = resolve_catalog(catalog)
        parser = OptionParser(catalog=resolved)
        try:
            result, remainder = parser.parse_until(list(args or ()), stop)
        except ParseError as exc:
            raise CLIError(str(exc)) from exc
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc

    if as_json:
        logger.echo(json.dumps(result_payload(resolved, result, remainder), indent=2))
        return
    Console(highlight=False).print(build_result_table(resolved, result, remainder))


__all__ = ["build_result_table", "help_command", "parse_command", "resolve_catalog", "result_payload"]

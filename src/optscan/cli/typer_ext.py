# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typer subclasses producing deterministic, alphabetically sorted help."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Final, TypeVar

import typer
from click.core import Context, Parameter
from click.formatting import HelpFormatter
from typer.core import TyperCommand, TyperGroup

ARGUMENT_PARAM_TYPE: Final[str] = "argument"


class SortedTyperCommand(TyperCommand):
    """Command listing its arguments first and its options sorted by long name."""

    def format_options(self, ctx: Context, formatter: HelpFormatter) -> None:
        """Write the ``Arguments`` and ``Options`` sections of the command help.

        Args:
            ctx: Click context of the invocation.
            formatter: Formatter receiving the definition lists.
        """

        arguments: list[tuple[str, str]] = []
        options: list[tuple[str, int, tuple[str, str]]] = []
        for position, param in enumerate(self.get_params(ctx)):
            record = param.get_help_record(ctx)
            if record is None:
                continue
            if getattr(param, "param_type_name", "") == ARGUMENT_PARAM_TYPE:
                arguments.append(record)
            else:
                options.append((_sort_key(param), position, record))

        if arguments:
            with formatter.section("Arguments"):
                formatter.write_dl(arguments)
        if options:
            with formatter.section("Options"):
                formatter.write_dl([record for *_, record in sorted(options)])


class PassthroughTyperCommand(SortedTyperCommand):
    """Command handing every token after its name to the callback verbatim.

    Click never parses the tokens, so ``--`` and ``--help`` reach the callback
    through ``ctx.args`` exactly as typed.
    """

    def parse_args(self, ctx: Context, args: list[str]) -> list[str]:
        super().parse_args(ctx, [])
        ctx.args = list(args)
        return ctx.args


class SortedTyperGroup(TyperGroup):
    """Group listing subcommands alphabetically and building sorted commands."""

    command_class = SortedTyperCommand

    def list_commands(self, ctx: Context) -> list[str]:
        return sorted(super().list_commands(ctx))


CommandCallback = TypeVar("CommandCallback", bound=Callable[..., Any])


class SortedTyper(typer.Typer):
    """Typer application wiring :class:`SortedTyperGroup` and :class:`SortedTyperCommand`."""

    def __init__(self, *args: Any, cls: type[TyperGroup] | None = None, **kwargs: Any) -> None:
        super().__init__(*args, cls=cls or SortedTyperGroup, **kwargs)

    def command(
        self,
        name: str | None = None,
        *,
        cls: type[TyperCommand] | None = None,
        **kwargs: Any,
    ) -> Callable[[CommandCallback], CommandCallback]:
        """Return a registration decorator defaulting to :class:`SortedTyperCommand`."""

        return super().command(name, cls=cls or SortedTyperCommand, **kwargs)


def create_typer(*, cls: type[TyperGroup] | None = None, **kwargs: Any) -> SortedTyper:
    """Return a :class:`SortedTyper` rendering help through Click's plain formatter.

    Rich markup is disabled unless requested so option labels such as
    ``[=arg]`` in help strings are printed verbatim.
    """

    kwargs.setdefault("rich_markup_mode", None)
    return SortedTyper(cls=cls, **kwargs)


def _sort_key(param: Parameter) -> str:
    """Return the first long flag of ``param`` without dashes, lower-cased."""

    flags = [*getattr(param, "opts", ()), *getattr(param, "secondary_opts", ())]
    long_flags = [flag for flag in flags if flag.startswith("--")]
    if long_flags:
        return long_flags[0].lstrip("-").lower()
    if flags:
        return flags[0].lstrip("-").lower()
    return (param.name or "").lower()


__all__ = ["PassthroughTyperCommand", "SortedTyper", "SortedTyperCommand", "SortedTyperGroup", "create_typer"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""High-level parser bundling a catalog with the scanning entry points."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .config import DEFAULT_LAYOUT, HelpLayout
from .controller import parse, parse_positionals, parse_until
from .model_catalog import OptionCatalog
from .model_option import OptionSpec
from .model_result import Remainder, ResultSet
from .types import StopCondition


@dataclass(frozen=True, slots=True)
class OptionParser:
    """Parse argument vectors against a fixed option catalog.

    The parser holds no per-call state: every call scans with its own scanner,
    so one instance can serve sequential and concurrent calls alike.
    """

    catalog: OptionCatalog

    @classmethod
    def from_specs(cls, specs: Iterable[OptionSpec], *, layout: HelpLayout = DEFAULT_LAYOUT) -> OptionParser:
        """Return a parser for ``specs``.

        Raises:
            CatalogConflictError: If identifiers or long names collide.
        """

        return cls(catalog=OptionCatalog.build(specs, layout=layout))

    @property
    def help_text(self) -> str:
        """Return the catalog's pre-rendered help text."""

        return self.catalog.help_text

    def parse(self, args: Sequence[str]) -> ResultSet:
        """Parse every token of ``args``.

        Args:
            args: Argument vector without the program name.

        Returns:
            ResultSet: Options and positionals in command-line order.

        Raises:
            ParseError: On the first unknown option or argument mismatch.
        """

        return parse(self.catalog, args)

    def parse_until(
        self,
        args: Sequence[str],
        condition: StopCondition = StopCondition.ALL_OPTIONS,
    ) -> tuple[ResultSet, Remainder]:
        """Parse ``args`` until ``condition`` stops the scan.

        Args:
            args: Argument vector without the program name, or a remainder.
            condition: Stop policy to apply.

        Returns:
            tuple[ResultSet, Remainder]: Parsed result and the unconsumed tail.

        Raises:
            ParseError: Unless ``condition`` is ``BEFORE_FIRST_ERROR``.
        """

        return parse_until(self.catalog, args, condition)

    def parse_positionals(self, args: Sequence[str], count: int) -> tuple[ResultSet, Remainder]:
        """Parse ``args`` until ``count`` positional tokens were collected."""

        return parse_positionals(self.catalog, args, count)


__all__ = ["OptionParser"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Stop-policy driver turning scanner steps into results and remainders."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from .model_catalog import OptionCatalog
from .model_option import ParsedOption
from .model_result import Remainder, ResultSet
from .scanner import Scanner, ScanStep, StepKind
from .types import StopCondition

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class _ResultAccumulator:
    """Collect options and positionals while a parse call is running."""

    options: list[ParsedOption] = field(default_factory=list)
    positionals: list[str] = field(default_factory=list)

    def absorb(self, step: ScanStep) -> None:
        self.options.extend(step.options)
        if step.positional is not None:
            self.positionals.append(step.positional)

    def freeze(self) -> ResultSet:
        return ResultSet(options=tuple(self.options), positionals=tuple(self.positionals))


@dataclass(frozen=True, slots=True)
class _ArgumentView:
    """Resolve the sequence to scan and where it sits inside the caller's argv."""

    source: Sequence[str]
    offset: int
    tokens: Sequence[str]

    @classmethod
    def of(cls, args: Sequence[str]) -> _ArgumentView:
        if isinstance(args, Remainder):
            return cls(source=args.source, offset=args.start, tokens=args)
        return cls(source=args, offset=0, tokens=args)

    def remainder(self, local_index: int) -> Remainder:
        return Remainder(source=self.source, start=self.offset + local_index)


def _drive(
    catalog: OptionCatalog,
    view: _ArgumentView,
    condition: StopCondition,
    positional_limit: int,
) -> tuple[ResultSet, Remainder]:
    """Step a fresh scanner over ``view`` until ``condition`` stops it.

    ``positional_limit`` is only consulted for
    :attr:`StopCondition.AFTER_FIRST_POSITIONAL`.
    """

    scanner = Scanner(catalog=catalog, args=view.tokens, origin=view.offset)
    collected = _ResultAccumulator()

    while not scanner.exhausted:
        # Captured before the step so clustered tokens map to their own index.
        entry = scanner.position
        step = scanner.step()

        if step.error is not None:
            if condition is StopCondition.BEFORE_FIRST_ERROR:
                collected.absorb(step)
                LOGGER.debug("stopping before error at index %d: %s", step.index, step.error)
                return collected.freeze(), view.remainder(entry)
            raise step.error

        if condition is StopCondition.BEFORE_FIRST_POSITIONAL and step.kind in (
            StepKind.POSITIONAL,
            StepKind.TERMINATOR,
        ):
            LOGGER.debug("stopping before positional at index %d", step.index)
            return collected.freeze(), view.remainder(entry)

        collected.absorb(step)
        if (
            condition is StopCondition.AFTER_FIRST_POSITIONAL
            and step.kind is StepKind.POSITIONAL
            and len(collected.positionals) >= positional_limit
        ):
            LOGGER.debug("stopping after positional at index %d", step.index)
            return collected.freeze(), view.remainder(scanner.position)

    return collected.freeze(), view.remainder(len(view.tokens))


def parse_until(
    catalog: OptionCatalog,
    args: Sequence[str],
    condition: StopCondition = StopCondition.ALL_OPTIONS,
) -> tuple[ResultSet, Remainder]:
    """Scan ``args`` until ``condition`` says to stop.

    Args:
        catalog: Option declarations to match against.
        args: Argument vector without the program name, or a remainder
            returned by an earlier call.
        condition: Policy deciding when scanning stops.

    Returns:
        tuple[ResultSet, Remainder]: Parsed options and positionals, plus the
        unconsumed tail of the original argument vector.

    Raises:
        ParseError: On unknown options, missing or unexpected arguments,
            unless ``condition`` is :attr:`StopCondition.BEFORE_FIRST_ERROR`.
    """

    return _drive(catalog, _ArgumentView.of(args), StopCondition(condition), positional_limit=1)


def parse(catalog: OptionCatalog, args: Sequence[str]) -> ResultSet:
    """Scan every token of ``args`` and return the result.

    Raises:
        ParseError: On the first unknown option or argument mismatch.
    """

    result, _ = parse_until(catalog, args, StopCondition.ALL_OPTIONS)
    return result


def parse_positionals(
    catalog: OptionCatalog,
    args: Sequence[str],
    count: int,
) -> tuple[ResultSet, Remainder]:
    """Scan until ``count`` positional tokens have been collected.

    Behaves like chaining ``count`` :attr:`StopCondition.AFTER_FIRST_POSITIONAL`
    passes and adding their results, except that a ``--`` seen in an early pass
    keeps later tokens positional.

    Args:
        catalog: Option declarations to match against.
        args: Argument vector without the program name.
        count: Number of positional tokens to collect.

    Returns:
        tuple[ResultSet, Remainder]: Combined result and the tail after the
        ``count``-th positional (empty when argv ran out first).

    Raises:
        ValueError: If ``count`` is negative.
        ParseError: On the first unknown option or argument mismatch.
    """

    if count < 0:
        raise ValueError("positional count must not be negative")
    view = _ArgumentView.of(args)
    if count == 0:
        return ResultSet(), view.remainder(0)
    return _drive(catalog, view, StopCondition.AFTER_FIRST_POSITIONAL, positional_limit=count)


__all__ = ["parse", "parse_positionals", "parse_until"]

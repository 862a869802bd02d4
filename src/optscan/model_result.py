# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Result models produced by a parse call."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import overload

from .model_option import ParsedOption
from .types import OptionKey, normalize_key


@dataclass(frozen=True, slots=True)
class ResultSet:
    """Options and positional tokens in command-line order.

    Iteration, indexing and ``len`` operate on the parsed options. Two result
    sets combine with ``+`` by appending both sequences, which supports driving
    several parse passes over one command line.
    """

    options: tuple[ParsedOption, ...] = ()
    positionals: tuple[str, ...] = ()

    def __add__(self, other: object) -> ResultSet:
        if not isinstance(other, ResultSet):
            return NotImplemented
        return ResultSet(
            options=self.options + other.options,
            positionals=self.positionals + other.positionals,
        )

    def __iter__(self) -> Iterator[ParsedOption]:
        return iter(self.options)

    def __len__(self) -> int:
        return len(self.options)

    def __getitem__(self, index: int) -> ParsedOption:
        return self.options[index]

    def has_option(self, key: OptionKey) -> bool:
        """Return ``True`` when ``key`` occurred at least once."""

        identifier = normalize_key(key)
        return any(option.identifier == identifier for option in self.options)

    def find(self, key: OptionKey) -> ParsedOption | None:
        """Return the first occurrence of ``key`` or ``None``."""

        identifier = normalize_key(key)
        return next((option for option in self.options if option.identifier == identifier), None)

    def find_all(self, key: OptionKey) -> tuple[ParsedOption, ...]:
        """Return every occurrence of ``key`` in command-line order."""

        identifier = normalize_key(key)
        return tuple(option for option in self.options if option.identifier == identifier)

    def count(self, key: OptionKey) -> int:
        """Return how many times ``key`` occurred."""

        return len(self.find_all(key))

    def arguments(self, key: OptionKey) -> tuple[str, ...]:
        """Return the arguments bound to every occurrence of ``key``.

        Occurrences parsed without an argument are skipped.
        """

        return tuple(option.argument for option in self.find_all(key) if option.argument is not None)


@dataclass(frozen=True, slots=True)
class Remainder(Sequence[str]):
    """Unconsumed tail of an argument vector.

    The view keeps a reference to the caller's sequence instead of copying it;
    mutating that sequence while the remainder is alive changes what the view
    yields. A remainder can be handed straight to another parse call.
    """

    source: Sequence[str]
    start: int

    def __post_init__(self) -> None:
        """Reject boundaries outside of ``source``."""

        if not 0 <= self.start <= len(self.source):
            raise ValueError(f"remainder start {self.start} outside of 0..{len(self.source)}")

    @classmethod
    def empty(cls, source: Sequence[str]) -> Remainder:
        """Return a remainder positioned at the end of ``source``."""

        return cls(source=source, start=len(source))

    @property
    def args(self) -> tuple[str, ...]:
        """Return the remaining tokens as a tuple."""

        return tuple(self.source[self.start :])

    def __len__(self) -> int:
        return len(self.source) - self.start

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[str, ...]: ...

    def __getitem__(self, index: int | slice) -> str | tuple[str, ...]:
        if isinstance(index, slice):
            return self.args[index]
        position = index + len(self) if index < 0 else index
        if not 0 <= position < len(self):
            raise IndexError("remainder index out of range")
        return self.source[self.start + position]

    def __repr__(self) -> str:
        return f"Remainder(start={self.start}, args={list(self.args)!r})"


__all__ = ["Remainder", "ResultSet"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared enums, aliases and constants for the option scanner."""

from __future__ import annotations

from enum import Enum
from typing import Final, TypeAlias

OptionKey: TypeAlias = int | str

OPTION_PREFIX: Final[str] = "-"
LONG_PREFIX: Final[str] = "--"
TERMINATOR: Final[str] = "--"
LONG_VALUE_SEPARATOR: Final[str] = "="
DEFAULT_PLACEHOLDER: Final[str] = "arg"

PRINTABLE_MIN: Final[int] = 33
PRINTABLE_MAX: Final[int] = 126


class ArgumentPolicy(str, Enum):
    """Enumerate how an option binds an argument."""

    NONE = "none"
    REQUIRED = "required"
    OPTIONAL = "optional"


class StopCondition(str, Enum):
    """Enumerate the policies deciding when a parse call stops scanning."""

    ALL_OPTIONS = "all_options"
    BEFORE_FIRST_POSITIONAL = "before_first_positional"
    AFTER_FIRST_POSITIONAL = "after_first_positional"
    BEFORE_FIRST_ERROR = "before_first_error"


def is_printable_code(value: int) -> bool:
    """Return ``True`` when ``value`` is a printable, non-space ASCII code."""

    return PRINTABLE_MIN <= value <= PRINTABLE_MAX


def normalize_key(key: OptionKey) -> int:
    """Return the integer identifier for ``key``.

    Args:
        key: Integer identifier or single-character short name.

    Returns:
        int: Integer identifier used by the catalog.

    Raises:
        ValueError: If ``key`` is a string that is not exactly one character.
    """

    if isinstance(key, str):
        if len(key) != 1:
            raise ValueError(f"short option key must be a single character, got {key!r}")
        return ord(key)
    return key


__all__ = [
    "DEFAULT_PLACEHOLDER",
    "LONG_PREFIX",
    "LONG_VALUE_SEPARATOR",
    "OPTION_PREFIX",
    "PRINTABLE_MAX",
    "PRINTABLE_MIN",
    "TERMINATOR",
    "ArgumentPolicy",
    "OptionKey",
    "StopCondition",
    "is_printable_code",
    "normalize_key",
]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Option declaration and parsed-option models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, cast

from .errors import ArgumentNotPresentError, OptionDeclarationError
from .types import (
    DEFAULT_PLACEHOLDER,
    LONG_PREFIX,
    LONG_VALUE_SEPARATOR,
    OPTION_PREFIX,
    ArgumentPolicy,
    OptionKey,
    is_printable_code,
    normalize_key,
)


@dataclass(frozen=True, slots=True)
class OptionSpec:
    """Declarative description of a single command-line option.

    ``identifier`` doubles as the character code of the short form when it is a
    printable ASCII code; any other integer declares a long-only option. A
    one-character string is accepted and normalised to its code.
    """

    identifier: int
    long_name: str | None = None
    description: str = ""
    policy: ArgumentPolicy = ArgumentPolicy.NONE
    placeholder: str = DEFAULT_PLACEHOLDER

    def __post_init__(self) -> None:
        """Normalise shorthand values and validate the declaration."""

        try:
            identifier = normalize_key(self.identifier)
        except ValueError as exc:
            raise OptionDeclarationError(str(exc)) from exc
        if isinstance(identifier, bool) or not isinstance(identifier, int):
            raise OptionDeclarationError(f"option identifier must be an integer, got {self.identifier!r}")
        try:
            policy = ArgumentPolicy(self.policy)
        except ValueError as exc:
            raise OptionDeclarationError(f"unknown argument policy {self.policy!r}") from exc
        object.__setattr__(self, "identifier", identifier)
        object.__setattr__(self, "long_name", self.long_name or None)
        object.__setattr__(self, "policy", policy)

        if self.long_name is not None:
            _validate_long_name(self.long_name)
        if self.short_name is None and self.long_name is None:
            raise OptionDeclarationError(
                f"option {identifier} declares neither a printable short form nor a long name",
            )
        if not self.placeholder:
            raise OptionDeclarationError(f"option {self.display_name} has an empty placeholder")

    @staticmethod
    def declare(
        key: OptionKey,
        long_name: str | None = None,
        description: str = "",
        policy: ArgumentPolicy | str = ArgumentPolicy.NONE,
        placeholder: str = DEFAULT_PLACEHOLDER,
    ) -> OptionSpec:
        """Create an ``OptionSpec`` from a short character or integer key.

        Args:
            key: Short option character or integer identifier.
            long_name: Optional long option name without the ``--`` prefix.
            description: Help text shown next to the option.
            policy: Argument policy or its string value.
            placeholder: Argument name rendered in help output.

        Returns:
            OptionSpec: Validated option declaration.

        Raises:
            OptionDeclarationError: If the declaration is malformed.
        """

        return OptionSpec(
            identifier=cast(int, key),
            long_name=long_name,
            description=description,
            policy=cast(ArgumentPolicy, policy),
            placeholder=placeholder,
        )

    @property
    def short_name(self) -> str | None:
        """Return the short option character, or ``None`` for long-only options."""

        if is_printable_code(self.identifier):
            return chr(self.identifier)
        return None

    @property
    def display_name(self) -> str:
        """Return the canonical form used in diagnostics (``-x`` or ``--name``)."""

        if self.short_name is not None:
            return f"{OPTION_PREFIX}{self.short_name}"
        return f"{LONG_PREFIX}{self.long_name}"


_FORBIDDEN_LONG_CHARACTERS: Final[frozenset[str]] = frozenset({LONG_VALUE_SEPARATOR})


def _validate_long_name(name: str) -> None:
    """Raise when ``name`` cannot be matched as ``--name`` on the command line."""

    if name.startswith(OPTION_PREFIX):
        raise OptionDeclarationError(f"long option name {name!r} must not start with '{OPTION_PREFIX}'")
    if any(char in _FORBIDDEN_LONG_CHARACTERS or char.isspace() for char in name):
        raise OptionDeclarationError(f"long option name {name!r} contains '=' or whitespace")


@dataclass(frozen=True, slots=True)
class ParsedOption:
    """Runtime view of one option occurrence on the command line."""

    identifier: int
    argument: str | None = None

    @property
    def has_argument(self) -> bool:
        """Return ``True`` when the occurrence carried an argument."""

        return self.argument is not None

    @property
    def short_name(self) -> str | None:
        """Return the short option character when the identifier is printable."""

        return chr(self.identifier) if is_printable_code(self.identifier) else None

    def require_argument(self) -> str:
        """Return the bound argument.

        Returns:
            str: Argument text taken from the argument vector.

        Raises:
            ArgumentNotPresentError: If the occurrence carried no argument.
        """

        if self.argument is None:
            raise ArgumentNotPresentError(f"no argument present for option {self.identifier}")
        return self.argument

    def matches(self, key: OptionKey) -> bool:
        """Return ``True`` when the occurrence belongs to ``key``."""

        return self.identifier == normalize_key(key)


__all__ = ["OptionSpec", "ParsedOption"]

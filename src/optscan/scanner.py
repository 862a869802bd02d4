# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Token-by-token scanner matching an argument vector against a catalog.

Each :meth:`Scanner.step` examines exactly one token, together with any
following token it consumes as an argument, and reports the index at which the
step started. Stop policies rely on that entry index to compute remainder
boundaries, so a cluster such as ``-vz`` is attributed to its own index even
when some of its characters resolved before the failure.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from .errors import (
    MissingArgumentError,
    ParseError,
    ScannerExhaustedError,
    UnexpectedArgumentError,
    UnknownOptionError,
)
from .model_catalog import OptionCatalog
from .model_option import OptionSpec, ParsedOption
from .types import (
    LONG_PREFIX,
    LONG_VALUE_SEPARATOR,
    OPTION_PREFIX,
    TERMINATOR,
    ArgumentPolicy,
)


class StepKind(str, Enum):
    """Classify what a single scanner step produced."""

    OPTION = "option"
    POSITIONAL = "positional"
    TERMINATOR = "terminator"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class ScanStep:
    """Outcome of scanning the token found at ``index``.

    ``options`` may be non-empty on an error step: characters of a cluster that
    resolved before the failing character are kept.
    """

    index: int
    kind: StepKind
    options: tuple[ParsedOption, ...] = ()
    positional: str | None = None
    error: ParseError | None = None


@dataclass(slots=True)
class _Cursor:
    """Mutable scan position confined to a single scanner."""

    index: int = 0
    terminated: bool = False


@dataclass(slots=True)
class Scanner:
    """Walk ``args`` token by token using ``catalog`` for lookups.

    A scanner is single-use: create one per parse call. Step and error indexes
    count from ``origin``, the position of ``args[0]`` in the caller's vector.
    """

    catalog: OptionCatalog
    args: Sequence[str]
    origin: int = 0
    _cursor: _Cursor = field(default_factory=_Cursor, init=False, repr=False)

    @property
    def position(self) -> int:
        """Return the index of the next token to examine."""

        return self._cursor.index

    @property
    def exhausted(self) -> bool:
        """Return ``True`` when every token has been examined."""

        return self._cursor.index >= len(self.args)

    def step(self) -> ScanStep:
        """Examine the next token and advance past everything it consumed.

        Returns:
            ScanStep: Options, positional or error produced by the token.

        Raises:
            ScannerExhaustedError: If no tokens remain.
        """

        if self.exhausted:
            raise ScannerExhaustedError("argument vector already fully scanned")
        token = self.args[self._cursor.index]
        index = self.origin + self._cursor.index
        self._cursor.index += 1

        if self._cursor.terminated:
            return ScanStep(index=index, kind=StepKind.POSITIONAL, positional=token)
        if token == TERMINATOR:
            self._cursor.terminated = True
            return ScanStep(index=index, kind=StepKind.TERMINATOR)
        if token.startswith(LONG_PREFIX):
            return self._scan_long(token, index)
        if token.startswith(OPTION_PREFIX) and len(token) > len(OPTION_PREFIX):
            return self._scan_cluster(token, index)
        return ScanStep(index=index, kind=StepKind.POSITIONAL, positional=token)

    def _scan_long(self, token: str, index: int) -> ScanStep:
        name, separator, value = token[len(LONG_PREFIX) :].partition(LONG_VALUE_SEPARATOR)
        spec = self.catalog.by_long(name)
        if spec is None:
            return _failed(index, UnknownOptionError(token=token, index=index))
        attached = value if separator else None

        if spec.policy is ArgumentPolicy.NONE:
            if attached is not None:
                error = UnexpectedArgumentError(f"{LONG_PREFIX}{name}", token=token, index=index)
                return _failed(index, error)
            return _matched(index, ParsedOption(spec.identifier))
        if spec.policy is ArgumentPolicy.OPTIONAL:
            # Detached tokens never bind to long options with optional arguments.
            return _matched(index, ParsedOption(spec.identifier, attached))
        if attached is not None:
            return _matched(index, ParsedOption(spec.identifier, attached))
        argument = self._take_next(require_plain=False)
        if argument is None:
            return _failed(index, MissingArgumentError(spec.display_name, token=token, index=index))
        return _matched(index, ParsedOption(spec.identifier, argument))

    def _scan_cluster(self, token: str, index: int) -> ScanStep:
        resolved: list[ParsedOption] = []
        for offset in range(len(OPTION_PREFIX), len(token)):
            spec = self.catalog.by_short(token[offset])
            if spec is None:
                return _failed(index, UnknownOptionError(token=token, index=index), resolved)
            if spec.policy is ArgumentPolicy.NONE:
                resolved.append(ParsedOption(spec.identifier))
                continue
            attached = token[offset + 1 :]
            if attached:
                resolved.append(ParsedOption(spec.identifier, attached))
                return _matched(index, *resolved)
            return self._bind_detached(spec, token, index, resolved)
        return _matched(index, *resolved)

    def _bind_detached(
        self,
        spec: OptionSpec,
        token: str,
        index: int,
        resolved: list[ParsedOption],
    ) -> ScanStep:
        """Bind the token following a short option that ends its cluster."""

        if spec.policy is ArgumentPolicy.OPTIONAL:
            resolved.append(ParsedOption(spec.identifier, self._take_next(require_plain=True)))
            return _matched(index, *resolved)
        argument = self._take_next(require_plain=False)
        if argument is None:
            error = MissingArgumentError(spec.display_name, token=token, index=index)
            return _failed(index, error, resolved)
        resolved.append(ParsedOption(spec.identifier, argument))
        return _matched(index, *resolved)

    def _take_next(self, *, require_plain: bool) -> str | None:
        """Consume and return the next token, if one is available.

        Args:
            require_plain: Refuse tokens starting with the option prefix.

        Returns:
            str | None: Consumed token, or ``None`` when nothing was consumed.
        """

        if self.exhausted:
            return None
        candidate = self.args[self._cursor.index]
        if require_plain and candidate.startswith(OPTION_PREFIX):
            return None
        self._cursor.index += 1
        return candidate


def _matched(index: int, *options: ParsedOption) -> ScanStep:
    return ScanStep(index=index, kind=StepKind.OPTION, options=tuple(options))


def _failed(index: int, error: ParseError, resolved: Sequence[ParsedOption] = ()) -> ScanStep:
    return ScanStep(index=index, kind=StepKind.ERROR, options=tuple(resolved), error=error)


__all__ = ["ScanStep", "Scanner", "StepKind"]

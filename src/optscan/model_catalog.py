# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Immutable option catalog and its fluent builder."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field

from .config import DEFAULT_LAYOUT, HelpLayout
from .errors import CatalogConflictError
from .help import format_help
from .model_option import OptionSpec
from .types import DEFAULT_PLACEHOLDER, ArgumentPolicy, OptionKey, normalize_key

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class OptionCatalog:
    """Validated, ordered table of option declarations.

    Duplicate identifiers and duplicate long names are rejected when the
    catalog is created, never at parse time.
    """

    options: tuple[OptionSpec, ...]
    layout: HelpLayout = DEFAULT_LAYOUT
    _by_identifier: Mapping[int, OptionSpec] = field(init=False, repr=False, compare=False)
    _by_long: Mapping[str, OptionSpec] = field(init=False, repr=False, compare=False)
    _help_text: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Index the declarations and render the help text once."""

        options = tuple(self.options)
        by_identifier: dict[int, OptionSpec] = {}
        by_long: dict[str, OptionSpec] = {}
        for spec in options:
            if spec.identifier in by_identifier:
                raise CatalogConflictError(
                    f"Duplicate option identifier {spec.identifier} "
                    f"({by_identifier[spec.identifier].display_name} and {spec.display_name})",
                )
            by_identifier[spec.identifier] = spec
            if spec.long_name is None:
                continue
            if spec.long_name in by_long:
                raise CatalogConflictError(f"Duplicate long option name '--{spec.long_name}'")
            by_long[spec.long_name] = spec
        object.__setattr__(self, "options", options)
        object.__setattr__(self, "_by_identifier", by_identifier)
        object.__setattr__(self, "_by_long", by_long)
        object.__setattr__(self, "_help_text", format_help(options, self.layout))
        LOGGER.debug("built option catalog with %d options", len(options))

    @classmethod
    def build(cls, specs: Iterable[OptionSpec], *, layout: HelpLayout = DEFAULT_LAYOUT) -> OptionCatalog:
        """Return a catalog for ``specs``.

        Args:
            specs: Option declarations in display order.
            layout: Help-text geometry used for :attr:`help_text`.

        Returns:
            OptionCatalog: Validated catalog.

        Raises:
            CatalogConflictError: If identifiers or long names collide.
        """

        return cls(options=tuple(specs), layout=layout)

    @property
    def help_text(self) -> str:
        """Return the help text rendered at construction."""

        return self._help_text

    def by_identifier(self, key: OptionKey) -> OptionSpec | None:
        """Return the declaration registered for ``key`` if any."""

        return self._by_identifier.get(normalize_key(key))

    def by_short(self, char: str) -> OptionSpec | None:
        """Return the declaration whose short form is ``char`` if any."""

        if len(char) != 1:
            return None
        spec = self._by_identifier.get(ord(char))
        if spec is None or spec.short_name is None:
            return None
        return spec

    def by_long(self, name: str) -> OptionSpec | None:
        """Return the declaration whose long name equals ``name`` exactly."""

        return self._by_long.get(name)

    def __getitem__(self, key: OptionKey) -> OptionSpec:
        spec = self.by_identifier(key)
        if spec is None:
            raise KeyError(key)
        return spec

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, (int, str)):
            return False
        try:
            return self.by_identifier(key) is not None
        except ValueError:
            return False

    def __iter__(self) -> Iterator[OptionSpec]:
        return iter(self.options)

    def __len__(self) -> int:
        return len(self.options)


@dataclass(slots=True)
class CatalogBuilder:
    """Accumulate option declarations and produce an :class:`OptionCatalog`."""

    specs: list[OptionSpec] = field(default_factory=list)
    layout: HelpLayout = DEFAULT_LAYOUT

    def add(
        self,
        key: OptionKey,
        long_name: str | None = None,
        description: str = "",
        policy: ArgumentPolicy | str = ArgumentPolicy.NONE,
        placeholder: str = DEFAULT_PLACEHOLDER,
    ) -> CatalogBuilder:
        """Append a declaration and return the builder for chaining."""

        self.specs.append(OptionSpec.declare(key, long_name, description, policy, placeholder))
        return self

    def flag(self, key: OptionKey, long_name: str | None = None, description: str = "") -> CatalogBuilder:
        """Append a declaration that takes no argument."""

        return self.add(key, long_name, description, ArgumentPolicy.NONE)

    def build(self) -> OptionCatalog:
        """Return the validated catalog.

        Raises:
            CatalogConflictError: If identifiers or long names collide.
        """

        return OptionCatalog.build(self.specs, layout=self.layout)


__all__ = ["CatalogBuilder", "OptionCatalog"]

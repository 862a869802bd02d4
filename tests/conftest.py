# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import pytest

from optscan import ArgumentPolicy, CatalogBuilder, OptionCatalog, OptionParser

LONG_ONLY = 1001
LONG_DESCRIPTION = 1002

LONG_DESCRIPTION_TEXT = (
    "This item has an extremely long description, which is expected to wrap at "
    "80-character lines for easy display in a terminal. If it fails to do this, "
    "it is not functioning properly."
)


@pytest.fixture
def main_catalog() -> OptionCatalog:
    """Return the catalog shared by most parsing tests."""

    return (
        CatalogBuilder()
        .flag("h", "help", "help")
        .flag("v", "verbose", "verbose")
        .add("o", "output", "output", ArgumentPolicy.REQUIRED, "file")
        .add("p", "param", "param", ArgumentPolicy.OPTIONAL)
        .flag(LONG_ONLY, "long-only", "long-only")
        .flag("s", None, "short-only")
        .add(LONG_DESCRIPTION, "long-description", LONG_DESCRIPTION_TEXT, ArgumentPolicy.REQUIRED)
        .build()
    )


@pytest.fixture
def parser(main_catalog: OptionCatalog) -> OptionParser:
    """Return a parser over :func:`main_catalog`."""

    return OptionParser(catalog=main_catalog)


@pytest.fixture
def sub_parser() -> OptionParser:
    """Return a parser modelling a subcommand's own options."""

    catalog = (
        CatalogBuilder()
        .flag("a", "alpha", "alpha")
        .add("b", "beta", "beta", ArgumentPolicy.REQUIRED, "value")
        .build()
    )
    return OptionParser(catalog=catalog)

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Catalog-driven command-line option scanning with fixed-width help output."""

from __future__ import annotations

from typing import Final

from .config import HelpLayout
from .controller import parse, parse_positionals, parse_until
from .errors import (
    ArgumentNotPresentError,
    CatalogConflictError,
    CatalogError,
    CatalogValidationError,
    MissingArgumentError,
    OptionDeclarationError,
    OptionScanError,
    ParseError,
    ScannerExhaustedError,
    UnexpectedArgumentError,
    UnknownOptionError,
)
from .help import format_help, option_label
from .loader import catalog_from_mapping, load_catalog
from .model_catalog import CatalogBuilder, OptionCatalog
from .model_option import OptionSpec, ParsedOption
from .model_result import Remainder, ResultSet
from .parser import OptionParser
from .scanner import Scanner, ScanStep, StepKind
from .types import ArgumentPolicy, StopCondition

__all__: Final[tuple[str, ...]] = (
    "ArgumentNotPresentError",
    "ArgumentPolicy",
    "CatalogBuilder",
    "CatalogConflictError",
    "CatalogError",
    "CatalogValidationError",
    "HelpLayout",
    "MissingArgumentError",
    "OptionCatalog",
    "OptionDeclarationError",
    "OptionParser",
    "OptionScanError",
    "OptionSpec",
    "ParseError",
    "ParsedOption",
    "Remainder",
    "ResultSet",
    "ScanStep",
    "Scanner",
    "ScannerExhaustedError",
    "StepKind",
    "StopCondition",
    "UnexpectedArgumentError",
    "UnknownOptionError",
    "catalog_from_mapping",
    "format_help",
    "load_catalog",
    "option_label",
    "parse",
    "parse_positionals",
    "parse_until",
)

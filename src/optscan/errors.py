# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised while building catalogs and scanning arguments."""

from __future__ import annotations


class OptionScanError(RuntimeError):
    """Base class for every error raised by :mod:`optscan`."""


class CatalogError(OptionScanError):
    """Raised when an option catalog cannot be constructed."""


class CatalogConflictError(CatalogError):
    """Raised when two declarations share an identifier or long name."""


class OptionDeclarationError(CatalogError):
    """Raised when a single option declaration is malformed."""


class CatalogValidationError(CatalogError):
    """Raised when a declarative catalog document fails schema validation."""


class ParseError(OptionScanError):
    """Raised when an argument vector does not match the catalog."""

    def __init__(self, message: str, *, token: str, index: int) -> None:
        """Initialise the error with the offending token and its position.

        Args:
            message: Human-readable description of the failure.
            token: Raw argv element that triggered the failure.
            index: Position of ``token`` within the caller's argument vector,
                counted from its start even when a remainder was scanned.
        """

        super().__init__(message)
        self.token = token
        self.index = index


class UnknownOptionError(ParseError):
    """Raised when a token names neither a short nor a long option."""

    def __init__(self, *, token: str, index: int) -> None:
        super().__init__(f"Unknown option: {token}", token=token, index=index)


class MissingArgumentError(ParseError):
    """Raised when an option with a required argument has nothing to bind."""

    def __init__(self, option: str, *, token: str, index: int) -> None:
        super().__init__(
            f"Missing required argument for option: {option}",
            token=token,
            index=index,
        )
        self.option = option


class UnexpectedArgumentError(ParseError):
    """Raised when ``--name=value`` targets an option that takes no argument."""

    def __init__(self, option: str, *, token: str, index: int) -> None:
        super().__init__(
            f"Option does not take an argument: {option}",
            token=token,
            index=index,
        )
        self.option = option


class ArgumentNotPresentError(OptionScanError):
    """Raised when reading the argument of an option parsed without one."""


class ScannerExhaustedError(OptionScanError):
    """Raised when stepping a scanner that already reached the end of argv."""


__all__ = (
    "ArgumentNotPresentError",
    "CatalogConflictError",
    "CatalogError",
    "CatalogValidationError",
    "MissingArgumentError",
    "OptionDeclarationError",
    "OptionScanError",
    "ParseError",
    "ScannerExhaustedError",
    "UnexpectedArgumentError",
    "UnknownOptionError",
)

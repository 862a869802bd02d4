# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Load option catalogs from declarative JSON documents."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationError

from .config import DEFAULT_LAYOUT, HelpLayout
from .errors import CatalogValidationError
from .model_catalog import OptionCatalog
from .model_option import OptionSpec
from .types import DEFAULT_PLACEHOLDER, ArgumentPolicy

LOGGER = logging.getLogger(__name__)


class OptionDeclaration(BaseModel):
    """Schema of one entry in a catalog document's ``options`` array."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    identifier: StrictInt | str = Field(alias="id")
    long_name: str | None = Field(default=None, alias="long")
    description: str = ""
    policy: ArgumentPolicy = Field(default=ArgumentPolicy.NONE, alias="argument")
    placeholder: str = DEFAULT_PLACEHOLDER

    def to_spec(self) -> OptionSpec:
        """Return the runtime declaration described by this entry.

        Raises:
            OptionDeclarationError: If the entry is semantically invalid.
        """

        return OptionSpec.declare(
            self.identifier,
            self.long_name,
            self.description,
            self.policy,
            self.placeholder,
        )


class CatalogDocument(BaseModel):
    """Top-level schema of a catalog document."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    options: list[OptionDeclaration] = Field(default_factory=list)
    layout: HelpLayout = DEFAULT_LAYOUT


def catalog_from_mapping(data: Mapping[str, Any], *, context: str = "<mapping>") -> OptionCatalog:
    """Build a catalog from an already decoded document.

    Args:
        data: Decoded JSON object.
        context: Human-readable origin used in error messages.

    Returns:
        OptionCatalog: Validated catalog.

    Raises:
        CatalogValidationError: If ``data`` does not match the document schema.
        CatalogConflictError: If identifiers or long names collide.
        OptionDeclarationError: If an entry is semantically invalid.
    """

    try:
        document = CatalogDocument.model_validate(data)
    except ValidationError as exc:
        raise CatalogValidationError(f"{context}: {exc}") from exc
    LOGGER.debug("loaded %d option declarations from %s", len(document.options), context)
    return OptionCatalog.build(
        (entry.to_spec() for entry in document.options),
        layout=document.layout,
    )


def load_catalog(path: Path) -> OptionCatalog:
    """Read and validate the catalog document stored at ``path``.

    Args:
        path: Filesystem path to a JSON catalog document.

    Returns:
        OptionCatalog: Validated catalog.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        CatalogValidationError: If the file is not valid JSON or violates the schema.
    """

    if not path.exists():
        raise FileNotFoundError(path)
    with path.open("r", encoding="utf-8") as stream:
        try:
            payload = json.load(stream)
        except json.JSONDecodeError as exc:
            raise CatalogValidationError(f"{path}: failed to parse catalog JSON") from exc
    if not isinstance(payload, Mapping):
        raise CatalogValidationError(f"{path}: expected a JSON object")
    return catalog_from_mapping(payload, context=str(path))


__all__ = ["CatalogDocument", "OptionDeclaration", "catalog_from_mapping", "load_catalog"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for loading catalogs from JSON documents."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from optscan import (
    ArgumentPolicy,
    CatalogConflictError,
    CatalogValidationError,
    OptionDeclarationError,
    catalog_from_mapping,
    load_catalog,
)


def test_catalog_from_mapping_accepts_aliases() -> None:
    catalog = catalog_from_mapping(
        {
            "options": [
                {"id": "h", "long": "help", "description": "Show help"},
                {"id": 1001, "long": "level", "argument": "optional", "placeholder": "n"},
                {"id": "o", "argument": "required"},
            ],
            "layout": {"line_width": 60, "indent": 4},
        },
    )

    assert len(catalog) == 3
    assert catalog["h"].long_name == "help"
    assert catalog[1001].policy is ArgumentPolicy.OPTIONAL
    assert catalog[1001].placeholder == "n"
    assert catalog.by_short("o") is not None
    assert catalog.layout.line_width == 60
    assert catalog.help_text.startswith("    -h, --help")


@pytest.mark.parametrize(
    "data",
    [
        {"options": [{"id": "h", "unexpected": True}]},
        {"options": [{"long": "help"}]},
        {"options": [{"id": "h", "argument": "sometimes"}]},
        {"options": [], "layout": {"line_width": 0}},
        {"options": [], "extra": 1},
    ],
)
def test_schema_violations_raise_validation_error(data: dict[str, object]) -> None:
    with pytest.raises(CatalogValidationError):
        catalog_from_mapping(data)


def test_semantic_errors_keep_their_type() -> None:
    with pytest.raises(CatalogConflictError):
        catalog_from_mapping({"options": [{"id": "h"}, {"id": 104}]})
    with pytest.raises(OptionDeclarationError):
        catalog_from_mapping({"options": [{"id": "ab"}]})


def test_load_catalog_from_file(tmp_path: Path) -> None:
    path = tmp_path / "catalog.json"
    path.write_text(
        json.dumps({"options": [{"id": "v", "long": "verbose", "description": "Talk more"}]}),
        encoding="utf-8",
    )

    catalog = load_catalog(path)

    assert catalog.help_text == "  -v, --verbose Talk more\n"


def test_load_catalog_rejects_bad_json(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(CatalogValidationError, match="broken.json"):
        load_catalog(path)


def test_load_catalog_requires_object(tmp_path: Path) -> None:
    path = tmp_path / "list.json"
    path.write_text("[]", encoding="utf-8")

    with pytest.raises(CatalogValidationError, match="JSON object"):
        load_catalog(path)


def test_load_catalog_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_catalog(tmp_path / "absent.json")

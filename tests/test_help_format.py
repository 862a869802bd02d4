# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the fixed-width help layout."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from optscan import ArgumentPolicy, CatalogBuilder, HelpLayout, OptionCatalog, OptionSpec, format_help, option_label
from optscan.help import wrap_words


@pytest.mark.parametrize(
    ("spec", "label"),
    [
        (OptionSpec.declare("h", "help"), "-h, --help"),
        (OptionSpec.declare("s"), "-s"),
        (OptionSpec.declare(1001, "long-only"), "    --long-only"),
        (OptionSpec.declare("o", "output", policy=ArgumentPolicy.REQUIRED, placeholder="file"), "-o, --output <file>"),
        (OptionSpec.declare("O", policy=ArgumentPolicy.REQUIRED), "-O <arg>"),
        (OptionSpec.declare("p", "param", policy=ArgumentPolicy.OPTIONAL), "-p, --param[=arg]"),
        (OptionSpec.declare("P", policy=ArgumentPolicy.OPTIONAL, placeholder="n"), "-P[n]"),
        (OptionSpec.declare(1002, "level", policy=ArgumentPolicy.OPTIONAL), "    --level[=arg]"),
    ],
)
def test_option_label(spec: OptionSpec, label: str) -> None:
    assert option_label(spec) == label


def test_columns_align_on_widest_label() -> None:
    catalog = (
        CatalogBuilder()
        .flag("h", "help", "Show help")
        .add("o", "output", "Write output", ArgumentPolicy.REQUIRED, "file")
        .flag(1001, "quiet", "Less noise")
        .flag("s", None, "Short only")
        .build()
    )

    expected = (
        "  -h, --help          Show help\n"
        "  -o, --output <file> Write output\n"
        "      --quiet         Less noise\n"
        "  -s                  Short only\n"
    )
    assert catalog.help_text == expected


def test_long_description_wraps_at_80_columns(main_catalog: OptionCatalog) -> None:
    help_text = main_catalog.help_text
    lines = help_text.splitlines()

    assert all(len(line) <= 80 for line in lines)
    for spec in main_catalog:
        assert option_label(spec) in help_text

    widest = max(len(option_label(spec)) for spec in main_catalog)
    start = widest + 3
    block_start = next(i for i, line in enumerate(lines) if "--long-description" in line)
    continuation = lines[block_start + 1]
    assert len(continuation) - len(continuation.lstrip(" ")) == start
    assert lines[block_start][start:].startswith("This item has")


def test_wrapped_text_keeps_every_word_in_order(main_catalog: OptionCatalog) -> None:
    spec = main_catalog.by_long("long-description")
    assert spec is not None
    widest = max(len(option_label(item)) for item in main_catalog)
    block = [
        line
        for line in main_catalog.help_text.splitlines()
        if line.startswith(" " * (widest + 3)) or "--long-description" in line
    ]
    words = " ".join(line[widest + 3 :] for line in block).split()

    assert words == spec.description.split()


def test_overlong_word_overflows_instead_of_splitting() -> None:
    word = "x" * 90
    text = format_help([OptionSpec.declare("a", description=f"short {word} tail")])

    assert text.splitlines() == ["  -a short", f"     {word}", "     tail"]


def test_empty_description_has_no_trailing_space() -> None:
    text = format_help([OptionSpec.declare("a"), OptionSpec.declare("b", "bee", "Bee")])

    assert text == "  -a\n  -b, --bee Bee\n"


def test_every_block_ends_with_single_newline(main_catalog: OptionCatalog) -> None:
    help_text = main_catalog.help_text

    assert help_text.endswith("\n")
    assert not help_text.endswith("\n\n")
    assert help_text.count("\n") == len(help_text.splitlines())


def test_empty_catalog_renders_nothing() -> None:
    assert format_help([]) == ""


def test_output_is_deterministic(main_catalog: OptionCatalog) -> None:
    assert format_help(main_catalog) == format_help(main_catalog) == main_catalog.help_text


def test_custom_layout_narrows_lines() -> None:
    layout = HelpLayout(line_width=30)
    catalog = OptionCatalog.build(
        [OptionSpec.declare("a", "all", "one two three four five six seven eight")],
        layout=layout,
    )

    assert all(len(line) <= 30 for line in catalog.help_text.splitlines())
    assert catalog.help_text.splitlines()[0] == "  -a, --all one two three four"


def test_wrap_words_respects_start_column() -> None:
    assert wrap_words("aa bb cc", start_column=5, line_width=10) == ["aa bb", "cc"]
    assert wrap_words("aa bb", start_column=0, line_width=5) == ["aa bb"]
    assert wrap_words("   ", start_column=0, line_width=5) == []


@pytest.mark.parametrize("values", [{"line_width": 0}, {"indent": -1}, {"gap": 0}, {"line_width": 3, "indent": 2}])
def test_invalid_layouts_are_rejected(values: dict[str, int]) -> None:
    with pytest.raises(ValidationError):
        HelpLayout(**values)

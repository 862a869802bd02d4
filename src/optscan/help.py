# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Fixed-width help-text rendering for option catalogs."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Final

from .config import DEFAULT_LAYOUT, HelpLayout
from .model_option import OptionSpec
from .types import LONG_PREFIX, OPTION_PREFIX, ArgumentPolicy

# Width of "-x, " reserved for options without a short form.
_SHORT_COLUMN_WIDTH: Final[int] = 4
_SHORT_LONG_SEPARATOR: Final[str] = ", "


def option_label(spec: OptionSpec) -> str:
    """Return the label rendered in the left-hand column for ``spec``.

    Args:
        spec: Option declaration to describe.

    Returns:
        str: Label such as ``-o, --output <file>`` or ``    --level[=arg]``.
    """

    parts: list[str] = []
    if spec.short_name is not None:
        parts.append(f"{OPTION_PREFIX}{spec.short_name}")
        if spec.long_name is not None:
            parts.append(_SHORT_LONG_SEPARATOR)
    else:
        parts.append(" " * _SHORT_COLUMN_WIDTH)
    if spec.long_name is not None:
        parts.append(f"{LONG_PREFIX}{spec.long_name}")
    parts.append(_argument_suffix(spec))
    return "".join(parts)


def _argument_suffix(spec: OptionSpec) -> str:
    if spec.policy is ArgumentPolicy.REQUIRED:
        return f" <{spec.placeholder}>"
    if spec.policy is ArgumentPolicy.OPTIONAL:
        if spec.long_name is not None:
            return f"[={spec.placeholder}]"
        return f"[{spec.placeholder}]"
    return ""


def wrap_words(text: str, *, start_column: int, line_width: int) -> list[str]:
    """Greedily pack the words of ``text`` into lines starting at ``start_column``.

    Words are never split. A line only wraps once it already holds a word, so a
    single word wider than the available space overflows instead of looping.

    Args:
        text: Free-form text; any whitespace separates words.
        start_column: Column at which every line's text begins.
        line_width: Maximum column a line may reach.

    Returns:
        list[str]: Line fragments without leading indentation.
    """

    lines: list[str] = []
    current: list[str] = []
    column = start_column
    for word in text.split():
        if current and column + 1 + len(word) > line_width:
            lines.append(" ".join(current))
            current = []
            column = start_column
        column += len(word) + (1 if current else 0)
        current.append(word)
    if current:
        lines.append(" ".join(current))
    return lines


def format_help(options: Iterable[OptionSpec], layout: HelpLayout = DEFAULT_LAYOUT) -> str:
    """Render ``options`` into a single word-wrapped help text blob.

    Args:
        options: Option declarations in display order.
        layout: Column geometry; the default wraps at column 80.

    Returns:
        str: Help text with one block per option, each ending in a newline.
    """

    specs: Sequence[OptionSpec] = tuple(options)
    if not specs:
        return ""
    labels = [option_label(spec) for spec in specs]
    label_width = max(len(label) for label in labels)
    start_column = layout.description_column(label_width)
    indent = " " * layout.indent
    continuation = " " * start_column

    blocks: list[str] = []
    for spec, label in zip(specs, labels, strict=True):
        lines = wrap_words(spec.description, start_column=start_column, line_width=layout.line_width)
        if not lines:
            blocks.append(f"{indent}{label}".rstrip() + "\n")
            continue
        head = f"{indent}{label.ljust(label_width)}{' ' * layout.gap}{lines[0]}"
        rendered = [head, *(f"{continuation}{line}" for line in lines[1:])]
        blocks.append("\n".join(rendered) + "\n")
    return "".join(blocks)


__all__ = ["format_help", "option_label", "wrap_words"]

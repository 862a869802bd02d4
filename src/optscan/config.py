# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models controlling help-text layout."""

from __future__ import annotations

from typing import Final

from pydantic import BaseModel, ConfigDict, Field, model_validator

DEFAULT_LINE_WIDTH: Final[int] = 80
DEFAULT_INDENT: Final[int] = 2
DEFAULT_GAP: Final[int] = 1


class HelpLayout(BaseModel):
    """Column geometry used when rendering option help text."""

    model_config = ConfigDict(frozen=True)

    line_width: int = Field(default=DEFAULT_LINE_WIDTH, gt=0)
    indent: int = Field(default=DEFAULT_INDENT, ge=0)
    gap: int = Field(default=DEFAULT_GAP, ge=1)

    @model_validator(mode="after")
    def _check_geometry(self) -> HelpLayout:
        """Reject layouts whose indentation alone fills the line."""

        if self.indent + self.gap >= self.line_width:
            raise ValueError("indent and gap must leave room on the line for labels and descriptions")
        return self

    def description_column(self, label_width: int) -> int:
        """Return the zero-based column where descriptions start.

        Args:
            label_width: Width of the widest option label.

        Returns:
            int: Column index of the first description character.
        """

        return self.indent + label_width + self.gap


DEFAULT_LAYOUT: Final[HelpLayout] = HelpLayout()

__all__ = ["DEFAULT_GAP", "DEFAULT_INDENT", "DEFAULT_LAYOUT", "DEFAULT_LINE_WIDTH", "HelpLayout"]

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tabconv/options/json.py
"""Options for JSON rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from tabconv.constants import DEFAULT_JSON_ENSURE_ASCII, DEFAULT_JSON_INDENT
from tabconv.options.base import BaseRendererOptions


@dataclass(frozen=True)
class JsonRendererOptions(BaseRendererOptions):
    """Configuration options for rendering records as a JSON array.

    Parameters
    ----------
    indent : int | None, default = 2
        Number of spaces for indentation. None for compact output.
    ensure_ascii : bool, default = False
        Escape non-ASCII characters as ``\\uXXXX`` sequences.

    """

    indent: int | None = field(
        default=DEFAULT_JSON_INDENT,
        metadata={"help": "Indentation spaces (None for compact)", "type": int, "importance": "core"},
    )
    ensure_ascii: bool = field(
        default=DEFAULT_JSON_ENSURE_ASCII,
        metadata={"help": "Escape non-ASCII characters", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate indentation."""
        super().__post_init__()
        if self.indent is not None and self.indent < 0:
            raise ValueError(f"indent must be non-negative, got {self.indent}")

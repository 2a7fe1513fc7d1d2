#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tabconv/options/markdown.py
"""Options for Markdown table rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from tabconv.constants import DEFAULT_MARKDOWN_LINE_BREAK, DEFAULT_MARKDOWN_SEPARATOR
from tabconv.options.base import BaseRendererOptions


@dataclass(frozen=True)
class MarkdownRendererOptions(BaseRendererOptions):
    """Configuration options for rendering a pipe table.

    Parameters
    ----------
    line_break : str, default = "<br>"
        Replacement for line endings inside cells
    separator : str, default = "---"
        Cell text of the header separator row

    """

    line_break: str = field(
        default=DEFAULT_MARKDOWN_LINE_BREAK,
        metadata={"help": "Replacement for newlines inside cells", "importance": "core"},
    )
    separator: str = field(
        default=DEFAULT_MARKDOWN_SEPARATOR,
        metadata={"help": "Header separator cell text", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate the separator and line break."""
        super().__post_init__()
        if "\n" in self.line_break or "\r" in self.line_break:
            raise ValueError("line_break must not contain line endings")
        if not self.separator or set(self.separator) - set("-:"):
            raise ValueError(f"separator must consist of '-' and ':' characters, got {self.separator!r}")

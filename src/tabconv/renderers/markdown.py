#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tabconv/renderers/markdown.py
"""Markdown pipe-table rendering.

.. code-block:: markdown

    | name | note |
    | --- | --- |
    | Alice | a\\|b |
    | Bob | first<br>second |

Pipes inside cells are escaped and line endings become ``<br>`` so that
every table row occupies exactly one line.
"""

from __future__ import annotations

import logging
from typing import Sequence

from tabconv.model import pad_row
from tabconv.options.markdown import MarkdownRendererOptions
from tabconv.renderers.base import BaseRenderer, TableData, as_table
from tabconv.utils.escape import escape_markdown_table_cell

logger = logging.getLogger(__name__)


class MarkdownRenderer(BaseRenderer):
    """Render a table as a Markdown pipe table.

    Parameters
    ----------
    options : MarkdownRendererOptions or None, default = None
        Markdown rendering options

    """

    format_name = "markdown"

    def __init__(self, options: MarkdownRendererOptions | None = None):
        """Initialize the Markdown renderer with options."""
        BaseRenderer._validate_options_type(options, MarkdownRendererOptions, "markdown")
        options = options or MarkdownRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: MarkdownRendererOptions = options

    def render_to_string(self, data: TableData) -> str:
        """Render a table to Markdown (empty when there are no headers)."""
        table = as_table(data)
        if not table.headers:
            return ""

        width = len(table.headers)
        lines = [
            self._format_row(table.headers),
            self._format_row([self.options.separator] * width, escape=False),
        ]
        lines.extend(self._format_row(pad_row(row, width)) for row in table.rows)
        return "\n".join(lines) + "\n"

    def _format_row(self, cells: Sequence[str], escape: bool = True) -> str:
        if escape:
            cells = [escape_markdown_table_cell(cell, self.options.line_break) for cell in cells]
        return "| " + " | ".join(cells) + " |"

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tabconv/utils/escape.py
"""Markdown table escaping utilities."""

from __future__ import annotations

from tabconv.constants import DEFAULT_MARKDOWN_LINE_BREAK


def escape_markdown_table_cell(text: str, line_break: str = DEFAULT_MARKDOWN_LINE_BREAK) -> str:
    r"""Escape a value for use inside a pipe-table cell.

    Pipes are backslash-escaped and every line ending is replaced by
    ``line_break`` so the row stays on a single line.

    Parameters
    ----------
    text : str
        Cell text to escape
    line_break : str, default "<br>"
        Replacement for ``\r\n``, ``\r`` and ``\n``

    Returns
    -------
    str
        Escaped cell text

    Examples
    --------
        >>> escape_markdown_table_cell("a|b")
        'a\\|b'
        >>> escape_markdown_table_cell("line one\nline two")
        'line one<br>line two'

    """
    if not text:
        return text

    result = text.replace("|", r"\|")
    return result.replace("\r\n", line_break).replace("\r", line_break).replace("\n", line_break)

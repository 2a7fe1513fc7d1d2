#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tabconv/normalize.py
"""Row normalization for worksheet data.

Raw worksheet rows go through whitespace trimming and empty-row removal;
the first surviving row becomes the header row. These functions do no I/O.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from tabconv.model import SheetTable


def normalize_row(cells: Sequence[str], trim_whitespace: bool) -> list[str]:
    """Apply whitespace trimming to a single row.

    Parameters
    ----------
    cells : Sequence[str]
        Cell strings for one row
    trim_whitespace : bool
        Strip leading and trailing whitespace from every cell

    Returns
    -------
    list[str]
        The processed row

    """
    if trim_whitespace:
        return [cell.strip() for cell in cells]
    return list(cells)


def is_empty_row(cells: Sequence[str]) -> bool:
    """Return True when every cell is the empty string."""
    return all(cell == "" for cell in cells)


def normalize_rows(
    raw_rows: Iterable[Sequence[str]],
    trim_whitespace: bool,
    remove_empty_rows: bool,
    name: str = "",
) -> SheetTable:
    """Split raw rows into a header row and data rows.

    Parameters
    ----------
    raw_rows : Iterable[Sequence[str]]
        Stringified worksheet rows in sheet order
    trim_whitespace : bool
        Strip surrounding whitespace from every cell before classification
    remove_empty_rows : bool
        Drop rows whose cells are all empty; a dropped row never becomes the
        header
    name : str, default ""
        Sheet name recorded on the result

    Returns
    -------
    SheetTable
        Headers from the first surviving row and the remaining rows as data.
        Both are empty when nothing survives.

    Examples
    --------
        >>> table = normalize_rows([["A", "B"], ["", ""], ["C", "D"]], True, True)
        >>> table.headers, table.rows
        (['A', 'B'], [['C', 'D']])

    """
    headers: list[str] | None = None
    rows: list[list[str]] = []

    for raw in raw_rows:
        row = normalize_row(raw, trim_whitespace)
        if remove_empty_rows and is_empty_row(row):
            continue
        if headers is None:
            headers = row
        else:
            rows.append(row)

    return SheetTable(headers=headers or [], rows=rows, name=name)


__all__ = ["normalize_row", "normalize_rows", "is_empty_row"]

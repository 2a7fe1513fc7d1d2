#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tabconv/model.py
"""Record model shared by the CSV and XLSX pipelines.

A table is an ordered header row plus ordered data rows of string cells.
Records are built by zipping the header row with each data row; rows may be
ragged, and duplicate header names resolve last-write-wins.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

from tabconv.constants import DEFAULT_COLUMN_PREFIX

Record = dict[str, str]


@dataclass
class SheetTable:
    """Header row and data rows for one sheet or delimited file.

    Parameters
    ----------
    headers : list[str]
        Column names in source order
    rows : list[list[str]]
        Data rows, positionally aligned to ``headers``
    name : str, default ""
        Sheet name (empty for CSV input)

    """

    headers: list[str] = field(default_factory=list)
    rows: list[list[str]] = field(default_factory=list)
    name: str = ""

    @property
    def is_empty(self) -> bool:
        """True when the table has neither headers nor rows."""
        return not self.headers and not self.rows

    def records(self) -> list[Record]:
        """Return one record per data row with every header present."""
        return table_records(self.headers, self.rows)


def build_record(headers: Sequence[str], row: Sequence[str]) -> Record:
    """Zip a header row with a data row.

    Extra cells beyond the header length are dropped and a short row yields
    a record with fewer keys. When two headers share a name the later cell
    wins and the key keeps its first position.

    Examples
    --------
        >>> build_record(["name", "age"], ["Alice", "30", "extra"])
        {'name': 'Alice', 'age': '30'}
        >>> build_record(["a", "a"], ["1", "2"])
        {'a': '2'}

    """
    record: Record = {}
    for header, cell in zip(headers, row):
        record[header] = cell
    return record


def build_records(headers: Sequence[str], rows: Iterable[Sequence[str]]) -> list[Record]:
    """Build records for each row, preserving row order."""
    return [build_record(headers, row) for row in rows]


def pad_row(row: Sequence[str], width: int) -> list[str]:
    """Fit a row to ``width`` cells, padding with empty strings or truncating."""
    cells = list(row[:width])
    if len(cells) < width:
        cells.extend([""] * (width - len(cells)))
    return cells


def table_records(headers: Sequence[str], rows: Iterable[Sequence[str]]) -> list[Record]:
    """Build records where missing cells become empty strings."""
    width = len(headers)
    return [build_record(headers, pad_row(row, width)) for row in rows]


def positional_headers(width: int, prefix: str = DEFAULT_COLUMN_PREFIX) -> list[str]:
    """Generate ``col1`` .. ``colN`` names for headerless input.

    Examples
    --------
        >>> positional_headers(3)
        ['col1', 'col2', 'col3']

    """
    return [f"{prefix}{i}" for i in range(1, width + 1)]


__all__ = [
    "Record",
    "SheetTable",
    "build_record",
    "build_records",
    "pad_row",
    "table_records",
    "positional_headers",
]

#  Copyright (c) 2025 Tom Villani, Ph.D.

# tabconv/options/xlsx.py
"""Configuration options for reading XLSX workbooks."""

from __future__ import annotations

from dataclasses import dataclass, field

from tabconv.constants import DEFAULT_XLSX_REMOVE_EMPTY_ROWS, DEFAULT_XLSX_TRIM_WHITESPACE
from tabconv.options.base import BaseParserOptions


@dataclass(frozen=True)
class XlsxOptions(BaseParserOptions):
    """Row normalization settings applied to every worksheet.

    Parameters
    ----------
    remove_empty_rows : bool, default True
        Drop rows whose cells are all empty (after trimming)
    trim_whitespace : bool, default True
        Strip leading and trailing whitespace from every cell

    """

    remove_empty_rows: bool = field(
        default=DEFAULT_XLSX_REMOVE_EMPTY_ROWS,
        metadata={"help": "Drop rows with no non-empty cells", "importance": "core"},
    )
    trim_whitespace: bool = field(
        default=DEFAULT_XLSX_TRIM_WHITESPACE,
        metadata={"help": "Strip surrounding whitespace from cells", "importance": "core"},
    )

#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Input readers for delimited text and XLSX workbooks."""

from tabconv.parsers.csv import CsvParser
from tabconv.parsers.xlsx import XlsxWorkbookReader, format_cell_value

__all__ = ["CsvParser", "XlsxWorkbookReader", "format_cell_value"]

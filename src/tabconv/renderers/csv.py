#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tabconv/renderers/csv.py
"""CSV rendering.

The header row is written first, verbatim; every data row is padded or
truncated to the header width. Quoting of embedded delimiters, quotes and
newlines is left to Python's csv module.
"""

from __future__ import annotations

import csv
import io
import logging

from tabconv.exceptions import SerializationError
from tabconv.model import pad_row
from tabconv.options.csv import CsvRendererOptions
from tabconv.renderers.base import BaseRenderer, TableData, as_table

logger = logging.getLogger(__name__)

_QUOTING_MAP = {
    "minimal": csv.QUOTE_MINIMAL,
    "all": csv.QUOTE_ALL,
    "nonnumeric": csv.QUOTE_NONNUMERIC,
    "none": csv.QUOTE_NONE,
}


class CsvRenderer(BaseRenderer):
    """Render a table to CSV.

    Parameters
    ----------
    options : CsvRendererOptions or None, default = None
        CSV rendering options

    Examples
    --------
        >>> from tabconv.model import SheetTable
        >>> CsvRenderer().render_to_string(SheetTable(["Name", "Age"], [["Alice", "30"]]))
        'Name,Age\\nAlice,30\\n'

    """

    format_name = "csv"

    def __init__(self, options: CsvRendererOptions | None = None):
        """Initialize the CSV renderer with options."""
        BaseRenderer._validate_options_type(options, CsvRendererOptions, "csv")
        options = options or CsvRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: CsvRendererOptions = options

    def render_to_string(self, data: TableData) -> str:
        """Render a table to a CSV string (empty when there are no headers)."""
        table = as_table(data)
        if not table.headers:
            return ""

        output = io.StringIO()
        writer = csv.writer(
            output,
            delimiter=self.options.delimiter,
            quotechar=self.options.quote_char,
            quoting=_QUOTING_MAP[self.options.quoting],
            lineterminator=self.options.line_terminator,
        )

        width = len(table.headers)
        try:
            writer.writerow(table.headers)
            for row in table.rows:
                writer.writerow(pad_row(row, width))
        except csv.Error as e:
            raise SerializationError("csv", original_error=e) from e

        result = output.getvalue()
        if self.options.include_bom:
            result = "\ufeff" + result
        return result

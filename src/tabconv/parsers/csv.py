#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tabconv/parsers/csv.py
"""Delimited text reader.

Reads a CSV (or any single-character-delimited) file into a ``SheetTable``.
The first row supplies the column names unless ``has_header`` is off, in
which case columns are numbered ``col1``, ``col2``, ...
"""

from __future__ import annotations

import csv
import io
import logging
from pathlib import Path
from typing import IO, Iterable, Union

from tabconv.exceptions import FileError, ParsingError
from tabconv.model import SheetTable, positional_headers
from tabconv.options.csv import CsvOptions

logger = logging.getLogger(__name__)


class CsvParser:
    """Parse delimited text into a header row and data rows.

    Parameters
    ----------
    options : CsvOptions or None, default = None
        Delimiter, header and encoding settings

    Examples
    --------
        >>> parser = CsvParser()
        >>> table = parser.parse(io.StringIO("name,age\\nAlice,30\\n"))
        >>> table.headers, table.rows
        (['name', 'age'], [['Alice', '30']])

    """

    def __init__(self, options: CsvOptions | None = None):
        """Initialize the parser with options."""
        self.options = options or CsvOptions()

    def parse(self, input_data: Union[str, Path, IO[str]]) -> SheetTable:
        """Read all rows from a file path or text stream.

        Parameters
        ----------
        input_data : str, Path, or IO[str]
            Path to a delimited file, or an open text stream

        Returns
        -------
        SheetTable
            Parsed headers and rows

        Raises
        ------
        ParsingError
            If the content cannot be decoded or is not valid delimited text
        FileError
            If the file cannot be opened

        """
        if isinstance(input_data, (str, Path)):
            path = Path(input_data)
            try:
                with open(path, encoding=self.options.encoding, newline="") as f:
                    rows = self._read_rows(f, source=str(path))
            except UnicodeDecodeError as e:
                raise ParsingError(
                    f"Cannot decode {path} as {self.options.encoding}: {e}",
                    parsing_stage="decode",
                    original_error=e,
                ) from e
            except LookupError as e:
                raise ParsingError(
                    f"Unknown encoding '{self.options.encoding}'", parsing_stage="decode", original_error=e
                ) from e
            except OSError as e:
                raise FileError(f"Cannot read input file {path}: {e}", file_path=str(path), original_error=e) from e
        else:
            rows = self._read_rows(input_data, source="<stream>")

        return self._split_header(rows)

    def _read_rows(self, stream: Iterable[str], source: str) -> list[list[str]]:
        """Read rows, skipping blank lines."""
        reader = csv.reader(stream, delimiter=self.options.delimiter)
        rows: list[list[str]] = []
        try:
            for row in reader:
                if not row:
                    continue
                rows.append(row)
        except csv.Error as e:
            raise ParsingError(
                f"Malformed delimited text in {source} at line {reader.line_num}: {e}",
                parsing_stage="read",
                original_error=e,
            ) from e

        logger.debug("Read %d rows from %s", len(rows), source)
        return rows

    def _split_header(self, rows: list[list[str]]) -> SheetTable:
        if not self.options.has_header:
            width = max((len(row) for row in rows), default=0)
            return SheetTable(headers=positional_headers(width), rows=rows)

        if not rows:
            return SheetTable()

        return SheetTable(headers=rows[0], rows=rows[1:])


def parse_csv_text(text: str, options: CsvOptions | None = None) -> SheetTable:
    """Parse delimited text held in memory."""
    return CsvParser(options).parse(io.StringIO(text, newline=""))


__all__ = ["CsvParser", "parse_csv_text"]

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tabconv/parsers/xlsx.py
"""XLSX workbook reader.

Opens a workbook with openpyxl (read-only, cached formula values) and
exposes its sheets as lists of string rows. Each sheet is read on demand so
one unreadable sheet does not prevent reading the others.

"""

from __future__ import annotations

import datetime
import logging
from pathlib import Path
from types import TracebackType
from typing import Any, Optional, Union

from tabconv.constants import DEPS_XLSX
from tabconv.exceptions import ParsingError
from tabconv.model import SheetTable
from tabconv.normalize import normalize_rows
from tabconv.options.xlsx import XlsxOptions
from tabconv.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)


def format_cell_value(value: Any) -> str:
    """Convert an openpyxl cell value to its string form.

    Parameters
    ----------
    value : Any
        Raw value as returned by ``iter_rows(values_only=True)``

    Returns
    -------
    str
        Empty string for empty cells, ``"true"``/``"false"`` for booleans,
        integral floats without a trailing ``.0``, ISO 8601 for dates and
        times, ``str(value)`` otherwise.

    Examples
    --------
        >>> format_cell_value(30.0)
        '30'
        >>> format_cell_value(True)
        'true'
        >>> format_cell_value(datetime.date(2024, 1, 31))
        '2024-01-31'

    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, (datetime.datetime, datetime.date, datetime.time)):
        return value.isoformat()
    return str(value)


class XlsxWorkbookReader:
    """Read worksheets from an XLSX workbook.

    Use as a context manager so the workbook handle is released on every
    exit path:

        >>> with XlsxWorkbookReader("report.xlsx") as reader:
        ...     for name in reader.sheet_names:
        ...         table = reader.read_sheet(name)

    Parameters
    ----------
    input_path : str or Path
        Workbook location
    options : XlsxOptions or None, default = None
        Row normalization settings used by ``read_sheet``

    """

    def __init__(self, input_path: Union[str, Path], options: XlsxOptions | None = None):
        """Initialize the reader; the workbook is opened by ``open`` or ``__enter__``."""
        self.input_path = Path(input_path)
        self.options = options or XlsxOptions()
        self._workbook: Any = None

    @requires_dependencies("xlsx", DEPS_XLSX)
    def open(self) -> None:
        """Open the workbook.

        Raises
        ------
        ParsingError
            If the file is not a readable XLSX workbook

        """
        import openpyxl

        try:
            self._workbook = openpyxl.load_workbook(self.input_path, read_only=True, data_only=True)
        except Exception as e:
            raise ParsingError(
                f"Failed to open XLSX workbook {self.input_path}: {e!r}",
                parsing_stage="open_workbook",
                original_error=e,
            ) from e
        logger.debug("Opened workbook %s with sheets %s", self.input_path, self._workbook.sheetnames)

    def close(self) -> None:
        """Release the workbook handle (safe to call more than once)."""
        if self._workbook is not None:
            self._workbook.close()
            self._workbook = None

    def __enter__(self) -> XlsxWorkbookReader:
        self.open()
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()

    @property
    def workbook(self) -> Any:
        if self._workbook is None:
            raise RuntimeError("Workbook is not open")
        return self._workbook

    @property
    def sheet_names(self) -> list[str]:
        """Sheet names in workbook order."""
        return list(self.workbook.sheetnames)

    def read_rows(self, sheet_name: str) -> list[list[str]]:
        """Read every row of a sheet as strings.

        Raises
        ------
        ParsingError
            If the sheet is missing or its cell range cannot be read
            (for example a chartsheet or a corrupt sheet part)

        """
        try:
            sheet = self.workbook[sheet_name]
            return [[format_cell_value(value) for value in row] for row in sheet.iter_rows(values_only=True)]
        except Exception as e:
            raise ParsingError(
                f"Failed to read sheet '{sheet_name}' from {self.input_path}: {e!r}",
                parsing_stage="read_sheet",
                original_error=e,
            ) from e

    def read_sheet(self, sheet_name: str) -> SheetTable:
        """Read a sheet and apply row normalization."""
        return normalize_rows(
            self.read_rows(sheet_name),
            trim_whitespace=self.options.trim_whitespace,
            remove_empty_rows=self.options.remove_empty_rows,
            name=sheet_name,
        )


__all__ = ["XlsxWorkbookReader", "format_cell_value"]

"""Test utilities for the tabconv test suite.

Helpers for building XLSX workbooks with openpyxl and for managing
temporary directories.
"""

import shutil
import tempfile
from pathlib import Path
from typing import Any, Iterable

import openpyxl
from openpyxl.chart import BarChart, Reference


def create_test_temp_dir() -> Path:
    """Create a temporary directory for test files."""
    return Path(tempfile.mkdtemp())


def cleanup_test_dir(temp_dir: Path) -> None:
    """Clean up test directory and files."""
    if temp_dir.exists():
        shutil.rmtree(temp_dir)


def write_workbook(path: Path, sheets: dict[str, Iterable[Iterable[Any]]]) -> Path:
    """Write a workbook with one worksheet per entry, in insertion order.

    Parameters
    ----------
    path : Path
        Destination ``.xlsx`` file
    sheets : dict
        Sheet name to rows; each row is appended as-is (``None`` leaves a cell blank)

    Returns
    -------
    Path
        The written workbook path

    """
    wb = openpyxl.Workbook()
    wb.remove(wb.active)
    for sheet_name, rows in sheets.items():
        ws = wb.create_sheet(title=sheet_name)
        for row in rows:
            ws.append(list(row))
    wb.save(path)
    return path


def write_workbook_with_chartsheet(path: Path) -> Path:
    """Write a workbook with a data sheet followed by a chartsheet.

    The chartsheet has no cell range, so it cannot be read as rows.
    """
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Sales"
    ws.append(["Month", "Revenue"])
    ws.append(["January", 100])
    ws.append(["February", 150])

    chart = BarChart()
    chart.add_data(Reference(ws, min_col=2, min_row=1, max_row=3), titles_from_data=True)
    chart.set_categories(Reference(ws, min_col=1, min_row=2, max_row=3))

    chartsheet = wb.create_chartsheet("Chart")
    chartsheet.add_chart(chart)
    wb.save(path)
    return path

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tabconv/cli/commands.py
"""Handlers for the ``csv`` and ``xlsx`` subcommands.

Each handler merges command-line values over config-file values over
built-in defaults, runs the pipeline and reports the written files.
"""

from __future__ import annotations

import argparse
import logging
import platform
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from rich.console import Console
from rich.table import Table

from tabconv import __version__
from tabconv.constants import (
    DEFAULT_CSV_DELIMITER,
    DEFAULT_CSV_ENCODING,
    DEFAULT_CSV_HAS_HEADER,
    DEFAULT_OUTPUT_DIR,
    DEPS_BY_FEATURE,
)
from tabconv.formats import OutputFormat
from tabconv.options.csv import CsvOptions
from tabconv.options.xlsx import XlsxOptions
from tabconv.pipeline import OutputFile, convert_csv, convert_xlsx
from tabconv.utils.packages import dependency_status

logger = logging.getLogger(__name__)


def _pick(cli_value: Any, config: Dict[str, Any], key: str, default: Any) -> Any:
    """Return the command-line value, else the config value, else the default."""
    if cli_value is not None:
        return cli_value
    return config.get(key, default)


def run_csv_command(args: argparse.Namespace, config: Optional[Dict[str, Any]] = None) -> list[OutputFile]:
    """Run the CSV pipeline for parsed ``csv`` subcommand arguments.

    Returns
    -------
    list[OutputFile]
        A single entry describing the written file

    """
    section = (config or {}).get("csv", {})

    delimiter = _pick(args.delimiter, section, "delimiter", DEFAULT_CSV_DELIMITER)
    options = CsvOptions(
        delimiter=delimiter,
        has_header=_pick(args.header, section, "header", DEFAULT_CSV_HAS_HEADER),
        encoding=_pick(args.encoding, section, "encoding", DEFAULT_CSV_ENCODING),
    )
    output_format = OutputFormat.parse(_pick(args.format, section, "format", OutputFormat.JSON.value))
    output = _pick(args.output, section, "output", None)

    logger.debug("CSV options: %s, format=%s, output=%s", options, output_format, output)
    return [convert_csv(args.input, output, output_format=output_format, options=options)]


def run_xlsx_command(args: argparse.Namespace, config: Optional[Dict[str, Any]] = None) -> list[OutputFile]:
    """Run the XLSX pipeline for parsed ``xlsx`` subcommand arguments.

    The ``--keep-*`` flags are inverted into ``remove_empty_rows`` and
    ``trim_whitespace``.

    Returns
    -------
    list[OutputFile]
        One entry per written sheet file

    """
    section = (config or {}).get("xlsx", {})

    options = XlsxOptions(
        remove_empty_rows=not _pick(args.keep_empty_rows, section, "keep_empty_rows", False),
        trim_whitespace=not _pick(args.keep_whitespace, section, "keep_whitespace", False),
    )
    output_format = OutputFormat.parse(_pick(args.format, section, "format", OutputFormat.JSON.value))
    output_dir = _pick(args.output_dir, section, "output_dir", DEFAULT_OUTPUT_DIR)

    logger.debug("XLSX options: %s, format=%s, output_dir=%s", options, output_format, output_dir)
    result = convert_xlsx(args.input, output_dir, output_format=output_format, options=options)
    if result.skipped:
        logger.debug("Skipped sheets: %s", ", ".join(result.skipped))
    return result.outputs


def report_outputs(outputs: list[OutputFile], use_rich: bool = False, console: Optional[Console] = None) -> None:
    """Print the written files, one per line or as a rich table."""
    if not use_rich:
        for output in outputs:
            print(f"Wrote {output.path}")
        return

    console = console or Console()
    table = Table(title="tabconv")
    table.add_column("Sheet")
    table.add_column("Rows", justify="right")
    table.add_column("Output")
    for output in outputs:
        table.add_row(output.sheet_name or "-", str(output.row_count), str(Path(output.path)))
    console.print(table)


def get_about_info() -> str:
    """Describe the tabconv version, the interpreter and each backing library."""
    lines = [
        f"tabconv {__version__}",
        f"Python {platform.python_version()} ({sys.executable})",
        f"Platform: {platform.platform()}",
        "",
        "Dependencies:",
    ]
    for feature, packages in DEPS_BY_FEATURE.items():
        for install_name, _import_name, version_spec in packages:
            dep = dependency_status(install_name, version_spec)
            mark = "ok" if dep.ok else "!!"
            found = dep.installed or "-"
            lines.append(f"  [{mark}] {dep.name} {found} (required {dep.required or 'any'}, {dep.status}) - {feature}")
    return "\n".join(lines)

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tabconv/pipeline.py
"""Conversion pipelines.

Two independent pipelines share the record model and renderers:

- ``convert_csv`` reads one delimited file and writes one JSON, YAML or TOML
  file holding an array of records.
- ``convert_xlsx`` reads every sheet of a workbook and writes one file per
  sheet, named ``<input-stem>_<sheet-name>.<ext>``, in any output format.

``encode_table`` is the pure step both pipelines share.

Examples
--------
    >>> from tabconv.pipeline import convert_csv, convert_xlsx
    >>> convert_csv("players.csv", "players.yaml", output_format="yaml")
    OutputFile(path=PosixPath('players.yaml'), row_count=2, sheet_name='')
    >>> result = convert_xlsx("report.xlsx", "out", output_format="markdown")
    >>> [o.path.name for o in result.outputs]
    ['report_Summary.md', 'report_Detail.md']

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

from tabconv.constants import DEFAULT_OUTPUT_DIR, DEFAULT_OUTPUT_STEM
from tabconv.exceptions import InputNotFoundError, OutputWriteError, ParsingError, UnsupportedFormatError
from tabconv.formats import OutputFormat, format_names
from tabconv.logging_utils import conversion_source
from tabconv.model import SheetTable, build_records
from tabconv.options.base import BaseRendererOptions
from tabconv.options.csv import CsvOptions
from tabconv.options.xlsx import XlsxOptions
from tabconv.parsers.csv import CsvParser
from tabconv.parsers.xlsx import XlsxWorkbookReader
from tabconv.renderers import TableData, get_renderer
from tabconv.utils.decorators import debug_timer
from tabconv.utils.io_utils import ensure_directory

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass
class OutputFile:
    """One file written by a pipeline.

    ``sheet_name`` is empty for CSV input; ``row_count`` counts data rows
    (records), not the header.
    """

    path: Path
    row_count: int
    sheet_name: str = ""


@dataclass
class XlsxConversionResult:
    """Files written and sheets skipped by ``convert_xlsx``."""

    outputs: list[OutputFile] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


def encode_table(
    data: TableData,
    output_format: OutputFormat | str,
    renderer_options: BaseRendererOptions | None = None,
) -> str:
    """Encode a table or record list as text without touching the filesystem.

    Parameters
    ----------
    data : SheetTable or sequence of records
        Data to encode
    output_format : OutputFormat or str
        Target format
    renderer_options : BaseRendererOptions, optional
        Options for the format's renderer

    Returns
    -------
    str
        Encoded text

    """
    return get_renderer(output_format, renderer_options).render_to_string(data)


def default_output_path(output_format: OutputFormat | str) -> Path:
    """Return ``output.<ext>`` for the given format."""
    return Path(f"{DEFAULT_OUTPUT_STEM}.{OutputFormat.parse(output_format).extension}")


def sheet_output_path(output_dir: PathLike, input_path: PathLike, sheet_name: str, output_format: OutputFormat) -> Path:
    """Return ``<output_dir>/<input_stem>_<sheet_name>.<ext>``."""
    stem = Path(input_path).stem or DEFAULT_OUTPUT_STEM
    return Path(output_dir) / f"{stem}_{sheet_name}.{output_format.extension}"


def _require_input(input_path: PathLike) -> Path:
    path = Path(input_path)
    if not path.is_file():
        raise InputNotFoundError(str(path))
    return path


def convert_csv(
    input_path: PathLike,
    output_path: PathLike | None = None,
    output_format: OutputFormat | str = OutputFormat.JSON,
    options: CsvOptions | None = None,
    renderer_options: BaseRendererOptions | None = None,
) -> OutputFile:
    """Convert a delimited file into a single JSON, YAML or TOML file.

    Parameters
    ----------
    input_path : str or Path
        Delimited input file; must exist
    output_path : str or Path, optional
        Destination file. Defaults to ``output.<ext>`` in the working directory.
        An existing file is overwritten.
    output_format : OutputFormat or str, default "json"
        One of json, yaml, toml
    options : CsvOptions, optional
        Delimiter, header and encoding settings
    renderer_options : BaseRendererOptions, optional
        Options for the output renderer

    Returns
    -------
    OutputFile
        The written file and its record count

    Raises
    ------
    UnsupportedFormatError
        If ``output_format`` is csv or markdown (nothing is read or written)
    InputNotFoundError
        If ``input_path`` does not exist
    ParsingError
        If the input is not valid delimited text
    SerializationError
        If the records cannot be encoded
    OutputWriteError
        If the output file cannot be written

    """
    fmt = OutputFormat.parse(output_format)
    if not fmt.csv_pipeline:
        raise UnsupportedFormatError(fmt.value, pipeline="csv", supported_formats=format_names(csv_pipeline_only=True))

    path = _require_input(input_path)
    destination = Path(output_path) if output_path is not None else default_output_path(fmt)
    options = options or CsvOptions()

    with conversion_source(path.name):
        logger.info("Converting %s to %s", path, fmt.value.upper())
        with debug_timer(logger, f"CSV conversion of {path.name}"):
            table = CsvParser(options).parse(path)
            records = build_records(table.headers, table.rows)
            get_renderer(fmt, renderer_options).render(records, destination)
        logger.info("Wrote %d records to %s", len(records), destination)

    return OutputFile(path=destination, row_count=len(records))


def convert_xlsx(
    input_path: PathLike,
    output_dir: PathLike = DEFAULT_OUTPUT_DIR,
    output_format: OutputFormat | str = OutputFormat.JSON,
    options: XlsxOptions | None = None,
    renderer_options: BaseRendererOptions | None = None,
) -> XlsxConversionResult:
    """Convert every sheet of a workbook into its own output file.

    Sheets are processed sequentially and independently. A sheet whose cell
    range cannot be read is logged and skipped; the remaining sheets are
    still converted.

    Parameters
    ----------
    input_path : str or Path
        XLSX workbook; must exist
    output_dir : str or Path, default "."
        Directory for output files, created with parents if missing
    output_format : OutputFormat or str, default "json"
        Any output format
    options : XlsxOptions, optional
        Empty-row and whitespace handling
    renderer_options : BaseRendererOptions, optional
        Options for the output renderer

    Returns
    -------
    XlsxConversionResult
        Written files in sheet order and names of skipped sheets

    Raises
    ------
    InputNotFoundError
        If ``input_path`` does not exist
    ParsingError
        If the workbook itself cannot be opened
    SerializationError
        If a sheet cannot be encoded
    OutputWriteError
        If the output directory or a file cannot be written

    """
    fmt = OutputFormat.parse(output_format)
    path = _require_input(input_path)
    options = options or XlsxOptions()
    renderer = get_renderer(fmt, renderer_options)

    result = XlsxConversionResult()
    with XlsxWorkbookReader(path, options) as reader:
        try:
            directory = ensure_directory(output_dir)
        except OSError as e:
            raise OutputWriteError(str(output_dir), message=f"Cannot create output directory {output_dir}: {e}") from e

        for sheet_name in reader.sheet_names:
            with conversion_source(f"{path.name}:{sheet_name}"):
                logger.info("Processing sheet: %s", sheet_name)
                try:
                    with debug_timer(logger, f"Reading sheet '{sheet_name}'"):
                        table: SheetTable = reader.read_sheet(sheet_name)
                except ParsingError as e:
                    logger.warning("Skipping sheet '%s': %s", sheet_name, e)
                    result.skipped.append(sheet_name)
                    continue

                destination = sheet_output_path(directory, path, sheet_name, fmt)
                renderer.render(table, destination)
                result.outputs.append(OutputFile(path=destination, row_count=len(table.rows), sheet_name=sheet_name))
                logger.info("Wrote %s", destination)

    return result


__all__ = [
    "OutputFile",
    "XlsxConversionResult",
    "encode_table",
    "default_output_path",
    "sheet_output_path",
    "convert_csv",
    "convert_xlsx",
]

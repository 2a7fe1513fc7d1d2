"""tabconv - convert spreadsheet exports into structured text formats.

tabconv reads CSV files and XLSX workbooks and writes their rows as JSON,
YAML, TOML, CSV or Markdown.

Pipelines
---------
- ``convert_csv``: one delimited file in, one JSON/YAML/TOML file out, an
  array of records built by zipping the header row with each data row.
- ``convert_xlsx``: one workbook in, one file per sheet out
  (``<stem>_<sheet>.<ext>``), with optional empty-row removal and
  whitespace trimming.

Examples
--------
Convert a CSV file to YAML:

    >>> from tabconv import convert_csv
    >>> convert_csv("players.csv", "players.yaml", output_format="yaml")

Convert every sheet of a workbook to Markdown tables, keeping blank rows:

    >>> from tabconv import convert_xlsx, XlsxOptions
    >>> convert_xlsx("report.xlsx", "docs/tables", "markdown", XlsxOptions(remove_empty_rows=False))

Encode in memory:

    >>> from tabconv import SheetTable, encode_table
    >>> print(encode_table(SheetTable(["a"], [["x|y"]]), "markdown"))
    | a |
    | --- |
    | x\\|y |

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys

if sys.version_info < (3, 10):
    raise RuntimeError(
        "tabconv requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "0.3.0"

from tabconv.exceptions import (  # noqa: E402
    DependencyError,
    FileError,
    FormatError,
    InputNotFoundError,
    OutputWriteError,
    ParsingError,
    RenderingError,
    SerializationError,
    TabconvError,
    UnsupportedFormatError,
    ValidationError,
)
from tabconv.formats import OutputFormat  # noqa: E402
from tabconv.model import SheetTable, build_record, build_records  # noqa: E402
from tabconv.normalize import normalize_row, normalize_rows  # noqa: E402
from tabconv.options import (  # noqa: E402
    CsvOptions,
    CsvRendererOptions,
    JsonRendererOptions,
    MarkdownRendererOptions,
    TomlRendererOptions,
    XlsxOptions,
    YamlRendererOptions,
)
from tabconv.pipeline import (  # noqa: E402
    OutputFile,
    XlsxConversionResult,
    convert_csv,
    convert_xlsx,
    encode_table,
)

__all__ = [
    "__version__",
    "convert_csv",
    "convert_xlsx",
    "encode_table",
    "normalize_row",
    "normalize_rows",
    "build_record",
    "build_records",
    "SheetTable",
    "OutputFile",
    "XlsxConversionResult",
    "OutputFormat",
    "CsvOptions",
    "XlsxOptions",
    "CsvRendererOptions",
    "JsonRendererOptions",
    "YamlRendererOptions",
    "TomlRendererOptions",
    "MarkdownRendererOptions",
    "TabconvError",
    "ValidationError",
    "FileError",
    "InputNotFoundError",
    "FormatError",
    "UnsupportedFormatError",
    "ParsingError",
    "RenderingError",
    "SerializationError",
    "OutputWriteError",
    "DependencyError",
]

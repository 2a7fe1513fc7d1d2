#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tabconv/cli/builder.py
"""Argument parser construction and exit-code mapping for the tabconv CLI.

Subcommand options default to ``None`` so that values from a config file
can fill in whatever the command line leaves unset; built-in defaults are
applied last, in ``tabconv.cli.commands``.
"""

from __future__ import annotations

import argparse

from tabconv import __version__
from tabconv.exceptions import (
    DependencyError,
    FileError,
    FormatError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from tabconv.formats import format_names

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_FORMAT_ERROR = 5
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7

_DELIMITER_ALIASES = {"\\t": "\t", "tab": "\t", "comma": ",", "semicolon": ";", "pipe": "|", "space": " "}


def parse_delimiter(value: str) -> str:
    r"""Parse a ``--delimiter`` value.

    Accepts a single character or one of the names ``tab`` (or ``\t``),
    ``comma``, ``semicolon``, ``pipe`` and ``space``.

    Raises
    ------
    argparse.ArgumentTypeError
        If the value does not resolve to exactly one character

    """
    resolved = _DELIMITER_ALIASES.get(value.lower() if len(value) > 1 else value, value)
    if len(resolved) != 1:
        raise argparse.ArgumentTypeError(f"delimiter must be a single character, got {value!r}")
    return resolved


def _format_choice(allowed: list[str]):
    aliases = {"yml": "yaml", "md": "markdown"}

    def parse(value: str) -> str:
        name = value.strip().lower()
        name = aliases.get(name, name)
        if name not in allowed:
            raise argparse.ArgumentTypeError(f"invalid format {value!r} (choose from {', '.join(allowed)})")
        return name

    return parse


class _AboutAction(argparse.Action):
    """Print version, platform and dependency status, then exit like --version."""

    def __init__(self, option_strings, dest=argparse.SUPPRESS, default=argparse.SUPPRESS, help=None):
        super().__init__(option_strings=option_strings, dest=dest, default=default, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        from tabconv.cli.commands import get_about_info

        print(get_about_info())
        parser.exit()


def create_parser() -> argparse.ArgumentParser:
    """Create the ``tabconv`` argument parser with ``csv`` and ``xlsx`` subcommands."""
    parser = argparse.ArgumentParser(
        prog="tabconv",
        description="Convert CSV files and XLSX workbooks into JSON, YAML, TOML, CSV or Markdown.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--about", "-A", action=_AboutAction, help="Show version and dependency status and exit")
    parser.add_argument("--config", type=str, help="Path to a configuration file (.toml, .yaml, .json)")
    parser.add_argument("--no-config", action="store_true", help="Ignore configuration files and TABCONV_CONFIG")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", type=str, help="Also write log messages to this file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Shortcut for --log-level DEBUG")
    parser.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")
    parser.add_argument("--rich", action="store_true", help="Print a summary table of written files")

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    csv_parser = subparsers.add_parser(
        "csv",
        help="Convert a delimited file to JSON, YAML or TOML",
        description="Convert a delimited file to a single JSON, YAML or TOML file holding an array of records.",
    )
    csv_parser.add_argument("-i", "--input", required=True, help="Input CSV file")
    csv_parser.add_argument("-o", "--output", help="Output file (default: output.<format>)")
    csv_parser.add_argument(
        "-d", "--delimiter", type=parse_delimiter, default=None, help="Field delimiter (default: ',')"
    )
    csv_parser.add_argument(
        "--header",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Input has a header row (default: true); --no-header names columns col1, col2, ...",
    )
    csv_parser.add_argument(
        "--format",
        type=_format_choice(format_names(csv_pipeline_only=True)),
        default=None,
        help=f"Output format: {', '.join(format_names(csv_pipeline_only=True))} (default: json)",
    )
    csv_parser.add_argument("--encoding", default=None, help="Input text encoding (default: utf-8-sig)")

    xlsx_parser = subparsers.add_parser(
        "xlsx",
        help="Convert each sheet of a workbook to its own file",
        description="Convert every sheet of an XLSX workbook into <stem>_<sheet>.<ext> files.",
    )
    xlsx_parser.add_argument("-i", "--input", required=True, help="Input XLSX workbook")
    xlsx_parser.add_argument("-o", "--output-dir", default=None, help="Output directory (default: current directory)")
    xlsx_parser.add_argument(
        "--format",
        type=_format_choice(format_names()),
        default=None,
        help=f"Output format: {', '.join(format_names())} (default: json)",
    )
    xlsx_parser.add_argument(
        "--keep-empty-rows", action="store_true", default=None, help="Keep rows whose cells are all empty"
    )
    xlsx_parser.add_argument(
        "--keep-whitespace", action="store_true", default=None, help="Keep leading and trailing whitespace in cells"
    )

    return parser


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (DependencyError, ImportError)):
        return EXIT_DEPENDENCY_ERROR

    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR

    if isinstance(exception, FormatError):
        return EXIT_FORMAT_ERROR

    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR

    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    return EXIT_ERROR

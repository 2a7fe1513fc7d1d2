#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tabconv/cli/__init__.py
"""Command-line interface for the tabconv conversion library.

Examples
--------
Convert a semicolon-delimited file to YAML::

    $ tabconv csv -i players.csv -o players.yaml -d ";" --format yaml

Convert a headerless file; columns are named col1, col2, ...::

    $ tabconv csv -i raw.csv --no-header

Write one Markdown table per sheet into ./out::

    $ tabconv xlsx -i report.xlsx -o out --format md

Print a summary table of what was written::

    $ tabconv --rich xlsx -i report.xlsx

"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Dict

from tabconv.cli.builder import (
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    create_parser,
    get_exit_code_for_exception,
)
from tabconv.cli.commands import report_outputs, run_csv_command, run_xlsx_command
from tabconv.cli.config import resolve_config
from tabconv.exceptions import TabconvError
from tabconv.logging_utils import configure_logging

logger = logging.getLogger(__name__)

_COMMANDS = {
    "csv": run_csv_command,
    "xlsx": run_xlsx_command,
}


def _setup_logging_level(parsed_args: argparse.Namespace, config: Dict[str, Any]) -> None:
    """Set up logging from command-line arguments, falling back to the config file.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed command-line arguments
    config : dict
        Validated configuration

    """
    # --trace takes highest precedence, then --verbose, then --log-level, then config
    if parsed_args.trace or parsed_args.verbose:
        log_level: int | str = logging.DEBUG
    else:
        log_level = parsed_args.log_level or str(config.get("log_level", "WARNING")).upper()

    log_file = parsed_args.log_file or config.get("log_file")
    configure_logging(log_level, log_file=log_file, trace_mode=parsed_args.trace)


def main(args: list[str] | None = None) -> int:
    """Execute the tabconv CLI.

    Parameters
    ----------
    args : list[str], optional
        Command-line arguments; ``sys.argv[1:]`` when omitted

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    try:
        config = resolve_config(parsed_args.config, no_config=parsed_args.no_config)
    except argparse.ArgumentTypeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    _setup_logging_level(parsed_args, config)

    handler = _COMMANDS[parsed_args.command]
    try:
        outputs = handler(parsed_args, config)
    except TabconvError as e:
        logger.debug("Conversion failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)
    except Exception as e:
        logger.debug("Unexpected error", exc_info=True)
        print(f"Unexpected error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    report_outputs(outputs, use_rich=parsed_args.rich)
    return EXIT_SUCCESS


__all__ = ["main", "create_parser"]

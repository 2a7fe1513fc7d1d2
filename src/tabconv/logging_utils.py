#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tabconv/logging_utils.py
"""Logging setup for the tabconv CLI and library callers.

Trace output names the input being converted: the pipelines wrap their work
in ``conversion_source`` and a handler filter copies that name onto every
record as ``source``.
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

NO_SOURCE = "-"

TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] [%(source)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
PLAIN_FORMAT = "%(levelname)s: %(message)s"

_current_source: ContextVar[str] = ContextVar("tabconv_log_source", default=NO_SOURCE)


class SourceFilter(logging.Filter):
    """Stamp each record with the file or sheet currently being converted."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.source = _current_source.get()
        return True


@contextmanager
def conversion_source(source: str) -> Iterator[None]:
    """Name the input for log records emitted inside the block.

    Parameters
    ----------
    source : str
        Label such as ``"players.csv"`` or ``"report.xlsx:Summary"``

    Examples
    --------
        >>> with conversion_source("report.xlsx:Summary"):
        ...     logger.info("Wrote %s", path)
        ... # trace output: [...] [tabconv.pipeline] [report.xlsx:Summary] Wrote ...

    """
    token = _current_source.set(source)
    try:
        yield
    finally:
        _current_source.reset(token)


def _attach(root: logging.Logger, handler: logging.Handler, level: int, formatter: logging.Formatter) -> None:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    handler.addFilter(SourceFilter())
    root.addHandler(handler)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Replace the root handlers with a stderr handler and an optional file handler.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name such as "INFO"; unknown names
        fall back to INFO
    log_file : str, optional
        File that receives a copy of every record, appended as UTF-8
    trace_mode : bool, default False
        Use the timestamped format that includes logger name and source

    Returns
    -------
    logging.Logger
        The root logger

    """
    level = log_level if isinstance(log_level, int) else getattr(logging, str(log_level).upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    if trace_mode:
        formatter = logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(PLAIN_FORMAT)

    _attach(root, logging.StreamHandler(sys.stderr), level, formatter)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            root.warning("Could not open log file %s: %s", log_file, exc)
        else:
            _attach(root, file_handler, level, formatter)
            root.info("Logging to file: %s", log_file)

    return root


__all__ = ["configure_logging", "conversion_source", "SourceFilter", "NO_SOURCE"]

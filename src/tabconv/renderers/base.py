#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tabconv/renderers/base.py
"""Base renderer class for tabconv output formats.

Every renderer turns tabular data into text. Input is either a
``SheetTable`` (headers plus positional rows) or a sequence of records
already built from one; ``render_to_string`` is pure and ``render`` writes
its result to a path or stream.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Any, Mapping, Sequence, Union

from tabconv.exceptions import OutputWriteError, SerializationError, ValidationError
from tabconv.model import Record, SheetTable
from tabconv.options.base import BaseRendererOptions
from tabconv.utils.io_utils import write_content

TableData = Union[SheetTable, Sequence[Mapping[str, str]]]


def as_records(data: TableData) -> list[Record]:
    """Return records for ``data``; table rows are padded to the header width."""
    if isinstance(data, SheetTable):
        return data.records()
    return [dict(record) for record in data]


def as_table(data: TableData) -> SheetTable:
    """Return ``data`` as a ``SheetTable``.

    For records, headers are the union of keys in first-seen order and
    missing keys become empty cells.
    """
    if isinstance(data, SheetTable):
        return data

    headers: list[str] = []
    seen: set[str] = set()
    for record in data:
        for key in record:
            if key not in seen:
                seen.add(key)
                headers.append(key)
    rows = [[record.get(header, "") for header in headers] for record in data]
    return SheetTable(headers=headers, rows=rows)


class BaseRenderer(ABC):
    """Abstract base class for all tabconv renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    """

    #: Name of the produced format, used in error messages
    format_name: str = ""

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render_to_string(self, data: TableData) -> str:
        """Render tabular data to text.

        Parameters
        ----------
        data : SheetTable or sequence of records
            Table to render

        Returns
        -------
        str
            Rendered text

        Raises
        ------
        SerializationError
            If the underlying encoder rejects the data

        """

    def render(self, data: TableData, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render tabular data and write it to ``output``.

        The full text is rendered and checked against UTF-8 before the
        destination is opened; an existing file is left untouched when either
        step fails.

        Raises
        ------
        SerializationError
            If rendering fails
        OutputWriteError
            If the destination cannot be written

        """
        text = self.render_to_string(data)
        try:
            text.encode("utf-8")
        except UnicodeEncodeError as e:
            raise SerializationError(self.format_name, original_error=e) from e
        self.write_text_output(text, output)

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Write text output to a file path or IO stream.

        Raises
        ------
        OutputWriteError
            If the destination cannot be written

        """
        try:
            write_content(text, output)
        except OSError as e:
            target = str(output) if isinstance(output, (str, Path)) else repr(output)
            raise OutputWriteError(target, original_error=e) from e

    @staticmethod
    def _validate_options_type(options: Any, expected_type: type, renderer_name: str) -> None:
        """Reject options objects of the wrong class."""
        if options is not None and not isinstance(options, expected_type):
            raise ValidationError(
                f"{renderer_name} renderer expected options of type '{expected_type.__name__}' "
                f"but received '{type(options).__name__}'",
                parameter_name="options",
                parameter_value=type(options),
            )

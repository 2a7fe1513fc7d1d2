#  Copyright (c) 2025 Tom Villani, Ph.D.

# tabconv/options/csv.py
"""Configuration options for CSV parsing and rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from tabconv.constants import (
    DEFAULT_CSV_DELIMITER,
    DEFAULT_CSV_ENCODING,
    DEFAULT_CSV_HAS_HEADER,
    DEFAULT_CSV_INCLUDE_BOM,
    DEFAULT_CSV_LINE_TERMINATOR,
    DEFAULT_CSV_QUOTE_CHAR,
    DEFAULT_CSV_QUOTING,
    CsvQuotingMode,
)
from tabconv.exceptions import ValidationError
from tabconv.options.base import BaseParserOptions, BaseRendererOptions


def _validate_single_char(value: str, name: str) -> None:
    if not isinstance(value, str) or len(value) != 1:
        raise ValidationError(
            f"{name} must be a single character, got {value!r}", parameter_name=name, parameter_value=value
        )


@dataclass(frozen=True)
class CsvOptions(BaseParserOptions):
    r"""Configuration options for reading delimited files.

    Parameters
    ----------
    delimiter : str, default ","
        Field separator (a single character, e.g. ``";"`` or ``"\t"``).
    has_header : bool, default True
        Treat the first row as column names. When False, columns are named
        ``col1``, ``col2``, ... and every row is data.
    encoding : str, default "utf-8-sig"
        Text encoding of the input file. The default strips a UTF-8 BOM.

    """

    delimiter: str = field(
        default=DEFAULT_CSV_DELIMITER,
        metadata={"help": "Field delimiter character", "importance": "core"},
    )
    has_header: bool = field(
        default=DEFAULT_CSV_HAS_HEADER,
        metadata={"help": "First row contains column names", "importance": "core"},
    )
    encoding: str = field(
        default=DEFAULT_CSV_ENCODING,
        metadata={"help": "Input text encoding", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate the delimiter."""
        super().__post_init__()
        _validate_single_char(self.delimiter, "delimiter")


@dataclass(frozen=True)
class CsvRendererOptions(BaseRendererOptions):
    r"""Configuration options for rendering tables as CSV.

    Parameters
    ----------
    delimiter : str, default ","
        Field delimiter
    quoting : {"minimal", "all", "nonnumeric", "none"}, default "minimal"
        Quoting strategy, mapped onto the :mod:`csv` constants
    quote_char : str, default '"'
        Quote character
    line_terminator : str, default "\n"
        Record terminator
    include_bom : bool, default False
        Prefix output with a UTF-8 byte-order mark for Excel

    """

    delimiter: str = field(
        default=DEFAULT_CSV_DELIMITER,
        metadata={"help": "CSV delimiter character", "importance": "core"},
    )
    quoting: CsvQuotingMode = field(
        default=DEFAULT_CSV_QUOTING,
        metadata={"help": "Quoting style: minimal, all, nonnumeric, none", "importance": "advanced"},
    )
    quote_char: str = field(
        default=DEFAULT_CSV_QUOTE_CHAR,
        metadata={"help": "Quote character", "importance": "advanced"},
    )
    line_terminator: str = field(
        default=DEFAULT_CSV_LINE_TERMINATOR,
        metadata={"help": "Line terminator", "importance": "advanced"},
    )
    include_bom: bool = field(
        default=DEFAULT_CSV_INCLUDE_BOM,
        metadata={"help": "Include UTF-8 BOM for Excel compatibility", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate delimiter, quote character and quoting mode."""
        super().__post_init__()
        _validate_single_char(self.delimiter, "delimiter")
        _validate_single_char(self.quote_char, "quote_char")
        if self.quoting not in ("minimal", "all", "nonnumeric", "none"):
            raise ValidationError(
                f"quoting must be one of minimal, all, nonnumeric, none; got {self.quoting!r}",
                parameter_name="quoting",
                parameter_value=self.quoting,
            )

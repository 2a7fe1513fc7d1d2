#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tabconv/formats.py
"""Output format enumeration.

``OutputFormat`` is the closed set of text encodings tabconv can produce.
Each member knows its file extension and whether the CSV pipeline can emit
it; pipelines ask the format rather than comparing names.
"""

from __future__ import annotations

from enum import Enum

from tabconv.exceptions import FormatError


class OutputFormat(str, Enum):
    """Target text encoding for converted tables.

    Examples
    --------
        >>> OutputFormat.parse("md")
        <OutputFormat.MARKDOWN: 'markdown'>
        >>> OutputFormat.MARKDOWN.extension
        'md'
        >>> OutputFormat.CSV.csv_pipeline
        False

    """

    JSON = "json"
    YAML = "yaml"
    TOML = "toml"
    CSV = "csv"
    MARKDOWN = "markdown"

    def __str__(self) -> str:
        return self.value

    @property
    def extension(self) -> str:
        """File extension (without dot) used for output files."""
        return _EXTENSIONS[self]

    @property
    def csv_pipeline(self) -> bool:
        """Whether the single-file CSV pipeline can produce this format.

        The CSV pipeline emits one array of records, so only formats that
        serialize a value tree qualify. The XLSX pipeline accepts every format.
        """
        return self in _RECORD_FORMATS

    @classmethod
    def parse(cls, value: str | OutputFormat) -> OutputFormat:
        """Resolve a user-supplied name (case-insensitive, with aliases).

        Parameters
        ----------
        value : str or OutputFormat
            Format name such as "json", "YML" or "md"

        Returns
        -------
        OutputFormat
            The matching format

        Raises
        ------
        FormatError
            If the name matches no known format

        """
        if isinstance(value, OutputFormat):
            return value

        name = str(value).strip().lower()
        name = _ALIASES.get(name, name)
        try:
            return cls(name)
        except ValueError as e:
            raise FormatError(format_type=str(value), supported_formats=format_names(), original_error=e) from e


_EXTENSIONS = {
    OutputFormat.JSON: "json",
    OutputFormat.YAML: "yaml",
    OutputFormat.TOML: "toml",
    OutputFormat.CSV: "csv",
    OutputFormat.MARKDOWN: "md",
}

_RECORD_FORMATS = frozenset({OutputFormat.JSON, OutputFormat.YAML, OutputFormat.TOML})

_ALIASES = {"yml": "yaml", "md": "markdown"}


def format_names(csv_pipeline_only: bool = False) -> list[str]:
    """List format names in declaration order.

    Parameters
    ----------
    csv_pipeline_only : bool, default False
        Restrict the list to formats the CSV pipeline accepts

    """
    return [fmt.value for fmt in OutputFormat if fmt.csv_pipeline or not csv_pipeline_only]


__all__ = ["OutputFormat", "format_names"]

#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers for every tabconv output format.

``get_renderer`` maps an ``OutputFormat`` to its renderer class.
"""

from __future__ import annotations

from tabconv.formats import OutputFormat
from tabconv.options.base import BaseRendererOptions
from tabconv.renderers.base import BaseRenderer, TableData, as_records, as_table
from tabconv.renderers.csv import CsvRenderer
from tabconv.renderers.json import JsonRenderer
from tabconv.renderers.markdown import MarkdownRenderer
from tabconv.renderers.toml import TomlRenderer
from tabconv.renderers.yaml import YamlRenderer

RENDERERS: dict[OutputFormat, type[BaseRenderer]] = {
    OutputFormat.JSON: JsonRenderer,
    OutputFormat.YAML: YamlRenderer,
    OutputFormat.TOML: TomlRenderer,
    OutputFormat.CSV: CsvRenderer,
    OutputFormat.MARKDOWN: MarkdownRenderer,
}


def get_renderer(output_format: OutputFormat | str, options: BaseRendererOptions | None = None) -> BaseRenderer:
    """Instantiate the renderer for ``output_format``.

    Parameters
    ----------
    output_format : OutputFormat or str
        Target format (names are resolved with ``OutputFormat.parse``)
    options : BaseRendererOptions or None
        Options matching the renderer's options class

    Returns
    -------
    BaseRenderer
        A configured renderer

    Raises
    ------
    FormatError
        If the format name is unknown
    ValidationError
        If ``options`` has the wrong type for the renderer

    """
    renderer_cls = RENDERERS[OutputFormat.parse(output_format)]
    return renderer_cls(options)  # type: ignore[call-arg]


__all__ = [
    "BaseRenderer",
    "TableData",
    "as_records",
    "as_table",
    "CsvRenderer",
    "JsonRenderer",
    "MarkdownRenderer",
    "TomlRenderer",
    "YamlRenderer",
    "RENDERERS",
    "get_renderer",
]

#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Options dataclasses for tabconv parsers and renderers."""

from tabconv.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from tabconv.options.csv import CsvOptions, CsvRendererOptions
from tabconv.options.json import JsonRendererOptions
from tabconv.options.markdown import MarkdownRendererOptions
from tabconv.options.toml import TomlRendererOptions
from tabconv.options.xlsx import XlsxOptions
from tabconv.options.yaml import YamlRendererOptions

__all__ = [
    "CloneFrozenMixin",
    "BaseParserOptions",
    "BaseRendererOptions",
    "CsvOptions",
    "CsvRendererOptions",
    "XlsxOptions",
    "JsonRendererOptions",
    "YamlRendererOptions",
    "TomlRendererOptions",
    "MarkdownRendererOptions",
]

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tabconv/constants.py
"""Constants and default values for tabconv.

Defaults live here so that options classes, pipelines and the CLI agree on a
single source of truth.
"""

from __future__ import annotations

from typing import Literal

# Backing libraries: (install_name, import_name, version_spec). All are hard
# requirements; requires_dependencies re-checks them where they are imported.
DEPS_XLSX = [("openpyxl", "openpyxl", ">=3.1")]
DEPS_YAML = [("pyyaml", "yaml", ">=6.0")]
DEPS_TOML = [("tomli-w", "tomli_w", ">=1.0.0")]

# Shown by --about, keyed by the feature each library backs
DEPS_BY_FEATURE = {
    "xlsx input": DEPS_XLSX,
    "yaml output": DEPS_YAML,
    "toml output": DEPS_TOML,
}

# CSV input
DEFAULT_CSV_DELIMITER = ","
DEFAULT_CSV_HAS_HEADER = True
DEFAULT_CSV_ENCODING = "utf-8-sig"

# Column naming for headerless input
DEFAULT_COLUMN_PREFIX = "col"

# XLSX input
DEFAULT_XLSX_REMOVE_EMPTY_ROWS = True
DEFAULT_XLSX_TRIM_WHITESPACE = True

# Output naming
DEFAULT_OUTPUT_STEM = "output"
DEFAULT_OUTPUT_DIR = "."

# JSON output
DEFAULT_JSON_INDENT = 2
DEFAULT_JSON_ENSURE_ASCII = False

# YAML output
DEFAULT_YAML_INDENT = 2
DEFAULT_YAML_DEFAULT_FLOW_STYLE = False

# TOML output (top level cannot be a bare array)
DEFAULT_TOML_RECORDS_KEY = "records"

# CSV output
CsvQuotingMode = Literal["minimal", "all", "nonnumeric", "none"]
DEFAULT_CSV_QUOTING: CsvQuotingMode = "minimal"
DEFAULT_CSV_QUOTE_CHAR = '"'
DEFAULT_CSV_LINE_TERMINATOR = "\n"
DEFAULT_CSV_INCLUDE_BOM = False

# Markdown output
DEFAULT_MARKDOWN_LINE_BREAK = "<br>"
DEFAULT_MARKDOWN_SEPARATOR = "---"

# Configuration discovery
CONFIG_ENV_VAR = "TABCONV_CONFIG"
CONFIG_FILENAMES = [".tabconv.toml", ".tabconv.yaml", ".tabconv.yml", ".tabconv.json"]
PYPROJECT_TOOL_SECTION = "tabconv"

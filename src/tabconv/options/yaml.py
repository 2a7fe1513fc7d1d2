#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tabconv/options/yaml.py
"""Options for YAML rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from tabconv.constants import DEFAULT_YAML_DEFAULT_FLOW_STYLE, DEFAULT_YAML_INDENT
from tabconv.options.base import BaseRendererOptions


@dataclass(frozen=True)
class YamlRendererOptions(BaseRendererOptions):
    """Configuration options for rendering records as a YAML sequence.

    Parameters
    ----------
    indent : int | None, default = 2
        Number of spaces for YAML indentation. None for default YAML formatting.
    default_flow_style : bool | None, default = False
        YAML flow style (inline braces/brackets). False for block style (default),
        True for flow style, None for automatic selection.

    """

    indent: int | None = field(
        default=DEFAULT_YAML_INDENT,
        metadata={
            "help": "Number of spaces for YAML indentation (None for default)",
            "type": int,
            "importance": "core",
        },
    )
    default_flow_style: bool | None = field(
        default=DEFAULT_YAML_DEFAULT_FLOW_STYLE,
        metadata={"help": "YAML flow style (False=block, True=flow, None=auto)", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate indentation (PyYAML accepts 2 through 9)."""
        super().__post_init__()
        if self.indent is not None and not 2 <= self.indent <= 9:
            raise ValueError(f"indent must be between 2 and 9, got {self.indent}")

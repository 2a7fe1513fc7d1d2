#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tabconv/options/toml.py
"""Options for TOML rendering.

TOML documents must have a table at the top level, so the record array is
wrapped under a single key and rendered as an array of tables.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from tabconv.constants import DEFAULT_TOML_RECORDS_KEY
from tabconv.options.base import BaseRendererOptions


@dataclass(frozen=True)
class TomlRendererOptions(BaseRendererOptions):
    """Configuration options for rendering records as TOML.

    Parameters
    ----------
    records_key : str, default = "records"
        Top-level key holding the array of tables (``[[records]]``).

    """

    records_key: str = field(
        default=DEFAULT_TOML_RECORDS_KEY,
        metadata={"help": "Top-level key for the array of tables", "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Validate the wrapper key."""
        super().__post_init__()
        if not self.records_key:
            raise ValueError("records_key must be a non-empty string")

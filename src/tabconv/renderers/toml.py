#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tabconv/renderers/toml.py
"""TOML rendering.

A TOML document cannot be a bare array, so records are wrapped under a
single top-level key and rendered as an array of tables:

.. code-block:: toml

    [[records]]
    name = "Alice"
    age = "30"

    [[records]]
    name = "Bob"
    age = "25"

"""

from __future__ import annotations

import logging
from typing import Any

from tabconv.constants import DEPS_TOML
from tabconv.exceptions import SerializationError
from tabconv.options.toml import TomlRendererOptions
from tabconv.renderers.base import BaseRenderer, TableData, as_records
from tabconv.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)


class TomlRenderer(BaseRenderer):
    """Render records as a TOML array of tables.

    Parameters
    ----------
    options : TomlRendererOptions or None, default = None
        TOML rendering options

    """

    format_name = "toml"

    def __init__(self, options: TomlRendererOptions | None = None):
        """Initialize the TOML renderer with options."""
        BaseRenderer._validate_options_type(options, TomlRendererOptions, "toml")
        options = options or TomlRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: TomlRendererOptions = options

    @requires_dependencies("toml", DEPS_TOML)
    def render_to_string(self, data: TableData) -> str:
        """Render records to a TOML string."""
        import tomli_w

        document: dict[str, Any] = {self.options.records_key: as_records(data)}
        try:
            return tomli_w.dumps(document, multiline_strings=False)
        except (TypeError, ValueError) as e:
            raise SerializationError("toml", original_error=e) from e

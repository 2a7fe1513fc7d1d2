#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tabconv/renderers/json.py
"""JSON rendering.

Tables become a JSON array of objects whose keys follow header order:

.. code-block:: json

    [
      {
        "name": "Alice",
        "age": "30"
      }
    ]

"""

from __future__ import annotations

import json
import logging

from tabconv.exceptions import SerializationError
from tabconv.options.json import JsonRendererOptions
from tabconv.renderers.base import BaseRenderer, TableData, as_records

logger = logging.getLogger(__name__)


class JsonRenderer(BaseRenderer):
    """Render records as a pretty-printed JSON array.

    Parameters
    ----------
    options : JsonRendererOptions or None, default = None
        JSON rendering options

    """

    format_name = "json"

    def __init__(self, options: JsonRendererOptions | None = None):
        """Initialize the JSON renderer with options."""
        BaseRenderer._validate_options_type(options, JsonRendererOptions, "json")
        options = options or JsonRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: JsonRendererOptions = options

    def render_to_string(self, data: TableData) -> str:
        """Render records to a JSON string."""
        records = as_records(data)
        try:
            return json.dumps(records, indent=self.options.indent, ensure_ascii=self.options.ensure_ascii)
        except (TypeError, ValueError) as e:
            raise SerializationError("json", original_error=e) from e

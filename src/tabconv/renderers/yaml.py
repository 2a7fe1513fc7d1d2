#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tabconv/renderers/yaml.py
"""YAML rendering.

Tables become a block-style YAML sequence of mappings, keys in header order:

.. code-block:: yaml

    - name: Alice
      age: '30'

"""

from __future__ import annotations

import logging

from tabconv.constants import DEPS_YAML
from tabconv.exceptions import SerializationError
from tabconv.options.yaml import YamlRendererOptions
from tabconv.renderers.base import BaseRenderer, TableData, as_records
from tabconv.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)


class YamlRenderer(BaseRenderer):
    """Render records as a YAML sequence.

    Parameters
    ----------
    options : YamlRendererOptions or None, default = None
        YAML rendering options

    """

    format_name = "yaml"

    def __init__(self, options: YamlRendererOptions | None = None):
        """Initialize the YAML renderer with options."""
        BaseRenderer._validate_options_type(options, YamlRendererOptions, "yaml")
        options = options or YamlRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: YamlRendererOptions = options

    @requires_dependencies("yaml", DEPS_YAML)
    def render_to_string(self, data: TableData) -> str:
        """Render records to a YAML string."""
        import yaml

        records = as_records(data)
        try:
            return yaml.safe_dump(
                records,
                indent=self.options.indent,
                default_flow_style=self.options.default_flow_style,
                allow_unicode=True,
                sort_keys=False,
            )
        except yaml.YAMLError as e:
            raise SerializationError("yaml", original_error=e) from e

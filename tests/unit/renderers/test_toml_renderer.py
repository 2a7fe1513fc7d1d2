#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/renderers/test_toml_renderer.py
"""Unit tests for TomlRenderer."""

import sys

import pytest

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from tabconv.model import SheetTable
from tabconv.options import TomlRendererOptions
from tabconv.renderers.toml import TomlRenderer


@pytest.mark.unit
class TestTomlRendering:
    """Tests for TOML output."""

    def test_records_wrapped_in_array_of_tables(self):
        records = [{"name": "Alice", "age": "30"}, {"name": "Bob", "age": "25"}]
        result = TomlRenderer().render_to_string(records)

        assert "[[records]]" in result
        assert tomllib.loads(result) == {"records": records}

    def test_key_order_preserved(self):
        table = SheetTable(headers=["z", "a"], rows=[["1", "2"]])
        loaded = tomllib.loads(TomlRenderer().render_to_string(table))
        assert list(loaded["records"][0]) == ["z", "a"]

    def test_custom_records_key(self):
        result = TomlRenderer(TomlRendererOptions(records_key="rows")).render_to_string([{"a": "1"}])
        assert tomllib.loads(result) == {"rows": [{"a": "1"}]}

    def test_special_characters_in_keys_and_values(self):
        records = [{"first name": 'say "hi"', "note": "line1\nline2"}]
        assert tomllib.loads(TomlRenderer().render_to_string(records)) == {"records": records}

    def test_empty(self):
        assert tomllib.loads(TomlRenderer().render_to_string([])) == {"records": []}

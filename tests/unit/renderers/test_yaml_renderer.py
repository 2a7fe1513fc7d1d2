#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/renderers/test_yaml_renderer.py
"""Unit tests for YamlRenderer."""

import pytest
import yaml

from tabconv.model import SheetTable
from tabconv.options import YamlRendererOptions
from tabconv.renderers.yaml import YamlRenderer


@pytest.mark.unit
class TestYamlRendering:
    """Tests for YAML output."""

    def test_sequence_of_mappings(self):
        records = [{"name": "Alice", "age": "30"}, {"name": "Bob", "age": "25"}]
        result = YamlRenderer().render_to_string(records)
        assert yaml.safe_load(result) == records

    def test_block_style_and_key_order(self):
        result = YamlRenderer().render_to_string([{"name": "Alice", "age": "30"}])
        assert result == "- name: Alice\n  age: '30'\n"

    def test_numeric_strings_stay_strings(self):
        result = YamlRenderer().render_to_string([{"flag": "true", "n": "007"}])
        assert yaml.safe_load(result) == [{"flag": "true", "n": "007"}]

    def test_unicode(self):
        result = YamlRenderer().render_to_string([{"city": "Zürich"}])
        assert "Zürich" in result

    def test_table_input(self):
        table = SheetTable(headers=["b", "a"], rows=[["1", "2"]])
        loaded = yaml.safe_load(YamlRenderer().render_to_string(table))
        assert list(loaded[0]) == ["b", "a"]

    def test_empty(self):
        assert yaml.safe_load(YamlRenderer().render_to_string([])) == []

    def test_flow_style(self):
        options = YamlRendererOptions(default_flow_style=True)
        result = YamlRenderer(options).render_to_string([{"a": "x"}])
        assert result.startswith("[")

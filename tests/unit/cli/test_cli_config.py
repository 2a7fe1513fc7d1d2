#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/cli/test_cli_config.py
"""Unit tests for CLI configuration discovery and loading."""

import argparse
import json
from pathlib import Path

import pytest
import yaml

from tabconv.cli.config import (
    discover_config_file,
    find_config_in_parents,
    load_config_file,
    resolve_config,
    validate_config,
)


@pytest.mark.unit
@pytest.mark.cli
class TestConfigDiscovery:
    """Tests for configuration file discovery."""

    def test_discover_in_start_dir(self, tmp_path: Path):
        config_file = tmp_path / ".tabconv.toml"
        config_file.write_text('[csv]\ndelimiter = ";"\n', encoding="utf-8")
        assert find_config_in_parents(tmp_path) == config_file.resolve()

    def test_discover_in_parent(self, tmp_path: Path):
        config_file = tmp_path / ".tabconv.yaml"
        config_file.write_text("csv:\n  format: yaml\n", encoding="utf-8")
        child = tmp_path / "a" / "b"
        child.mkdir(parents=True)
        assert find_config_in_parents(child) == config_file.resolve()

    def test_dedicated_file_wins_over_pyproject(self, tmp_path: Path):
        (tmp_path / "pyproject.toml").write_text('[tool.tabconv.csv]\nformat = "toml"\n', encoding="utf-8")
        dedicated = tmp_path / ".tabconv.json"
        dedicated.write_text("{}", encoding="utf-8")
        assert find_config_in_parents(tmp_path) == dedicated.resolve()

    def test_pyproject_with_section(self, tmp_path: Path):
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[tool.tabconv.xlsx]\nformat = "markdown"\n', encoding="utf-8")
        assert find_config_in_parents(tmp_path) == pyproject.resolve()

    def test_pyproject_without_section_is_ignored(self, tmp_path: Path):
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[project]\nname = "x"\n', encoding="utf-8")
        assert find_config_in_parents(tmp_path) != pyproject.resolve()

    def test_discover_in_home(self, tmp_path: Path, monkeypatch):
        home = tmp_path / "home"
        home.mkdir()
        config_file = home / ".tabconv.json"
        config_file.write_text('{"log_level": "INFO"}', encoding="utf-8")
        monkeypatch.setattr(Path, "home", lambda: home)
        monkeypatch.setattr("tabconv.cli.config.find_config_in_parents", lambda start_dir=None: None)
        assert discover_config_file() == config_file


@pytest.mark.unit
@pytest.mark.cli
class TestLoadConfigFile:
    """Tests for loading each config file format."""

    EXPECTED = {"log_level": "INFO", "csv": {"delimiter": ";", "format": "yaml"}, "xlsx": {"keep_empty_rows": True}}

    def test_toml(self, tmp_path: Path):
        path = tmp_path / "config.toml"
        path.write_text(
            'log_level = "INFO"\n[csv]\ndelimiter = ";"\nformat = "yaml"\n[xlsx]\nkeep_empty_rows = true\n',
            encoding="utf-8",
        )
        assert load_config_file(path) == self.EXPECTED

    def test_yaml(self, tmp_path: Path):
        path = tmp_path / "config.yml"
        path.write_text(yaml.safe_dump(self.EXPECTED), encoding="utf-8")
        assert load_config_file(path) == self.EXPECTED

    def test_json(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps(self.EXPECTED), encoding="utf-8")
        assert load_config_file(str(path)) == self.EXPECTED

    def test_pyproject(self, tmp_path: Path):
        path = tmp_path / "pyproject.toml"
        path.write_text('[tool.tabconv]\nlog_level = "INFO"\n[tool.tabconv.csv]\ndelimiter = ";"\n', encoding="utf-8")
        assert load_config_file(path) == {"log_level": "INFO", "csv": {"delimiter": ";"}}

    def test_empty_yaml(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config_file(path) == {}

    @pytest.mark.parametrize(
        "name,content",
        [
            ("bad.toml", "[csv\n"),
            ("bad.yaml", "csv: [unclosed\n"),
            ("bad.json", "{not json"),
            ("list.json", "[1, 2]"),
            ("list.yaml", "- a\n- b\n"),
            ("config.ini", "[csv]\n"),
        ],
    )
    def test_invalid_files(self, tmp_path: Path, name, content):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        with pytest.raises(argparse.ArgumentTypeError):
            load_config_file(path)

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(argparse.ArgumentTypeError, match="does not exist"):
            load_config_file(tmp_path / "nope.toml")

    def test_directory(self, tmp_path: Path):
        with pytest.raises(argparse.ArgumentTypeError, match="not a file"):
            load_config_file(tmp_path)


@pytest.mark.unit
@pytest.mark.cli
class TestValidateConfig:
    """Tests for config schema validation."""

    def test_unknown_keys_dropped(self):
        config = {"theme": "dark", "csv": {"delimiter": ",", "color": "red"}, "pdf": {}}
        assert validate_config(config) == {"csv": {"delimiter": ","}}

    def test_wrong_type(self):
        with pytest.raises(argparse.ArgumentTypeError, match="must be bool"):
            validate_config({"xlsx": {"keep_empty_rows": "yes"}})

    def test_section_must_be_table(self):
        with pytest.raises(argparse.ArgumentTypeError, match="must be a table"):
            validate_config({"csv": "json"})

    def test_top_level_type(self):
        with pytest.raises(argparse.ArgumentTypeError):
            validate_config({"log_level": 10})


@pytest.mark.unit
@pytest.mark.cli
class TestResolveConfig:
    """Tests for config source priority."""

    def test_no_config(self, tmp_path: Path, monkeypatch):
        path = tmp_path / "env.json"
        path.write_text('{"log_level": "DEBUG"}', encoding="utf-8")
        monkeypatch.setenv("TABCONV_CONFIG", str(path))
        assert resolve_config(str(path), no_config=True) == {}

    def test_explicit_beats_env(self, tmp_path: Path, monkeypatch):
        explicit = tmp_path / "explicit.json"
        explicit.write_text('{"log_level": "ERROR"}', encoding="utf-8")
        env = tmp_path / "env.json"
        env.write_text('{"log_level": "DEBUG"}', encoding="utf-8")
        monkeypatch.setenv("TABCONV_CONFIG", str(env))
        assert resolve_config(str(explicit)) == {"log_level": "ERROR"}

    def test_env_var(self, tmp_path: Path, monkeypatch):
        env = tmp_path / "env.json"
        env.write_text('{"log_level": "DEBUG"}', encoding="utf-8")
        monkeypatch.setenv("TABCONV_CONFIG", str(env))
        assert resolve_config(None) == {"log_level": "DEBUG"}

    def test_discovered(self, tmp_path: Path, monkeypatch):
        (tmp_path / ".tabconv.toml").write_text('[csv]\nformat = "toml"\n', encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        assert resolve_config(None) == {"csv": {"format": "toml"}}

    def test_nothing_found(self, monkeypatch):
        monkeypatch.setattr("tabconv.cli.config.discover_config_file", lambda start_dir=None: None)
        assert resolve_config(None) == {}

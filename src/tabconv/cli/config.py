#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the tabconv CLI.

Config files supply defaults for subcommand flags. Supported sources, in
priority order:

1. ``--config PATH`` on the command line
2. The ``TABCONV_CONFIG`` environment variable
3. ``.tabconv.toml``, ``.tabconv.yaml``, ``.tabconv.yml``, ``.tabconv.json``
   or a ``pyproject.toml`` with a ``[tool.tabconv]`` table, searched from the
   working directory up to the filesystem root
4. The same dedicated files in the user's home directory

Layout::

    log_level = "INFO"

    [csv]
    delimiter = ";"
    format = "yaml"

    [xlsx]
    format = "markdown"
    keep_empty_rows = true

"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional

import yaml

from tabconv.constants import CONFIG_ENV_VAR, CONFIG_FILENAMES, PYPROJECT_TOOL_SECTION

logger = logging.getLogger(__name__)

# Accepted keys and their expected types, per section ("" is the top level)
CONFIG_SCHEMA: Dict[str, Dict[str, type]] = {
    "": {"log_level": str, "log_file": str},
    "csv": {"delimiter": str, "header": bool, "format": str, "output": str, "encoding": str},
    "xlsx": {"format": str, "output_dir": str, "keep_empty_rows": bool, "keep_whitespace": bool},
}


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the ``[tool.tabconv]`` table from a pyproject.toml file.

    Returns an empty dict when the table is absent.

    Raises
    ------
    argparse.ArgumentTypeError
        If pyproject.toml cannot be parsed or the section is not a table

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in pyproject.toml {pyproject_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading pyproject.toml {pyproject_path}: {e}") from e

    config = data.get("tool", {}).get(PYPROJECT_TOOL_SECTION, {})
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"[tool.{PYPROJECT_TOOL_SECTION}] section in {pyproject_path} must be a table, "
            f"got {type(config).__name__}"
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by walking up from ``start_dir``.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to current working directory

    Returns
    -------
    Path or None
        First config file found, or None

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except argparse.ArgumentTypeError:
                logger.debug("Ignoring unreadable %s during config discovery", pyproject_path)

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Discover a configuration file in the parent chain, then the home directory."""
    config_in_parents = find_config_in_parents(start_dir)
    if config_in_parents:
        return config_in_parents

    home = Path.home()
    for filename in CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a JSON, TOML, YAML or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Validated configuration dictionary

    Raises
    ------
    argparse.ArgumentTypeError
        If the file cannot be read, parsed, or has invalid content

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise argparse.ArgumentTypeError(f"Configuration file does not exist: {config_path}")
    if not config_path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration path is not a file: {config_path}")

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    if filename == "pyproject.toml":
        config = _load_pyproject_section(config_path)
    elif ext == ".toml":
        config = _load_toml_config(config_path)
    elif ext in (".yaml", ".yml"):
        config = _load_yaml_config(config_path)
    elif ext == ".json":
        config = _load_json_config(config_path)
    else:
        raise argparse.ArgumentTypeError(f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml")

    return validate_config(config, source=str(config_path))


def _load_toml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in config file {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading TOML config {config_path}: {e}") from e


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise argparse.ArgumentTypeError(f"Invalid YAML in config file {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading YAML config {config_path}: {e}") from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"YAML config file must contain a mapping at root level, got {type(config).__name__}"
        )
    return config


def _load_json_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid JSON in config file {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading JSON config {config_path}: {e}") from e

    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"JSON config file must contain an object at root level, got {type(config).__name__}"
        )
    return config


def validate_config(config: Dict[str, Any], source: str = "<config>") -> Dict[str, Any]:
    """Check value types and drop unknown keys.

    Returns
    -------
    dict
        ``{"log_level": ..., "csv": {...}, "xlsx": {...}}`` with only known keys

    Raises
    ------
    argparse.ArgumentTypeError
        If a known key has a value of the wrong type or a section is not a table

    """
    validated: Dict[str, Any] = {}

    for key, value in config.items():
        if key in ("csv", "xlsx"):
            if not isinstance(value, dict):
                raise argparse.ArgumentTypeError(f"[{key}] in {source} must be a table, got {type(value).__name__}")
            validated[key] = _validate_section(value, CONFIG_SCHEMA[key], f"{source} [{key}]")
        elif key in CONFIG_SCHEMA[""]:
            validated.update(_validate_section({key: value}, CONFIG_SCHEMA[""], source))
        else:
            logger.debug("Ignoring unknown config key '%s' in %s", key, source)

    return validated


def _validate_section(section: Dict[str, Any], schema: Dict[str, type], source: str) -> Dict[str, Any]:
    result: Dict[str, Any] = {}
    for key, value in section.items():
        expected = schema.get(key)
        if expected is None:
            logger.debug("Ignoring unknown config key '%s' in %s", key, source)
            continue
        if not isinstance(value, expected):
            raise argparse.ArgumentTypeError(
                f"Config key '{key}' in {source} must be {expected.__name__}, got {type(value).__name__}"
            )
        result[key] = value
    return result


def resolve_config(config_arg: Optional[str], no_config: bool = False) -> Dict[str, Any]:
    """Load the effective configuration for a CLI run.

    Parameters
    ----------
    config_arg : str or None
        Value of ``--config``
    no_config : bool, default False
        Skip all configuration loading

    Returns
    -------
    dict
        Validated configuration (empty when nothing was found)

    """
    if no_config:
        return {}

    config_path: Optional[Path | str] = config_arg or os.environ.get(CONFIG_ENV_VAR) or discover_config_file()
    if not config_path:
        return {}

    logger.debug("Loading configuration from %s", config_path)
    return load_config_file(config_path)

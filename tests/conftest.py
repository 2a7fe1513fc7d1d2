"""Pytest configuration and shared fixtures for the tabconv test suite.

This module registers markers, configures Hypothesis profiles and provides
fixtures that build small CSV files and XLSX workbooks on disk.
"""

import logging
import os
from pathlib import Path
from typing import Callable, Generator

import pytest
from hypothesis import Phase, Verbosity, settings
from utils import cleanup_test_dir, create_test_temp_dir, write_workbook

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=25)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch, tmp_path_factory):
    """Keep user config files and TABCONV_CONFIG out of every test."""
    monkeypatch.delenv("TABCONV_CONFIG", raising=False)
    monkeypatch.setattr(Path, "home", lambda: tmp_path_factory.mktemp("home"))


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """Undo handler and level changes made by configure_logging."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for test files.

    Yields
    ------
    Path
        Temporary directory path that will be cleaned up after test.

    """
    temp_path = create_test_temp_dir()
    try:
        yield temp_path
    finally:
        cleanup_test_dir(temp_path)


@pytest.fixture
def players_csv(tmp_path: Path) -> Path:
    """Write the two-player CSV used across pipeline tests."""
    path = tmp_path / "players.csv"
    path.write_text("name,age\nAlice,30\nBob,25\n", encoding="utf-8")
    return path


@pytest.fixture
def make_workbook(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory that writes an XLSX workbook from ``{sheet: rows}``."""

    def factory(sheets: dict, name: str = "book.xlsx") -> Path:
        return write_workbook(tmp_path / name, sheets)

    return factory

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/cli/test_cli_main.py
"""Tests for the tabconv CLI entry point."""

import io
import json
import logging
import sys
from pathlib import Path

import pytest
import yaml
from rich.console import Console

from tabconv.cli import main
from tabconv.cli.builder import (
    EXIT_DEPENDENCY_ERROR,
    EXIT_FILE_ERROR,
    EXIT_FORMAT_ERROR,
    EXIT_PARSING_ERROR,
    EXIT_RENDERING_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
)
from tabconv.cli.commands import report_outputs
from tabconv.exceptions import ParsingError
from tabconv.parsers.xlsx import XlsxWorkbookReader
from tabconv.pipeline import OutputFile


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch) -> Path:
    """Run each CLI test from an empty working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.mark.unit
@pytest.mark.cli
class TestCsvCommand:
    """Tests for ``tabconv csv``."""

    def test_json_default(self, workdir: Path, players_csv: Path, capsys):
        assert main(["csv", "-i", str(players_csv)]) == EXIT_SUCCESS

        output = workdir / "output.json"
        assert json.loads(output.read_text(encoding="utf-8")) == [
            {"name": "Alice", "age": "30"},
            {"name": "Bob", "age": "25"},
        ]
        assert capsys.readouterr().out.strip() == "Wrote output.json"

    def test_explicit_output_and_format(self, workdir: Path, players_csv: Path):
        assert main(["csv", "-i", str(players_csv), "-o", "players.yaml", "--format", "yml"]) == EXIT_SUCCESS
        assert yaml.safe_load((workdir / "players.yaml").read_text(encoding="utf-8"))[1] == {"name": "Bob", "age": "25"}

    def test_delimiter_and_no_header(self, workdir: Path):
        (workdir / "raw.tsv").write_text("Alice\t30\n", encoding="utf-8")
        assert main(["csv", "-i", "raw.tsv", "-d", "tab", "--no-header", "-o", "raw.json"]) == EXIT_SUCCESS
        assert json.loads((workdir / "raw.json").read_text(encoding="utf-8")) == [{"col1": "Alice", "col2": "30"}]

    def test_missing_input(self, workdir: Path, capsys):
        assert main(["csv", "-i", "missing.csv"]) == EXIT_FILE_ERROR
        assert "Error: Input file not found: missing.csv" in capsys.readouterr().err
        assert not (workdir / "output.json").exists()

    def test_undecodable_input(self, workdir: Path, capsys):
        (workdir / "latin.csv").write_bytes("city\nZürich\n".encode("latin-1"))
        assert main(["csv", "-i", "latin.csv"]) == EXIT_PARSING_ERROR
        assert capsys.readouterr().err.startswith("Error: ")

    def test_unencodable_output(self, workdir: Path, capsys):
        (workdir / "utf7.csv").write_bytes(b"h\n+2AA-\n")
        (workdir / "output.json").write_text("previous", encoding="utf-8")
        assert main(["csv", "-i", "utf7.csv", "--encoding", "utf-7"]) == EXIT_RENDERING_ERROR
        assert capsys.readouterr().err.startswith("Error: Failed to render JSON")
        assert (workdir / "output.json").read_text(encoding="utf-8") == "previous"

    def test_broken_toml_install(self, workdir: Path, players_csv: Path, monkeypatch, capsys):
        monkeypatch.setitem(sys.modules, "tomli_w", None)
        assert main(["csv", "-i", str(players_csv), "--format", "toml"]) == EXIT_DEPENDENCY_ERROR
        assert "tomli-w" in capsys.readouterr().err

    def test_csv_rejects_markdown_at_parse_time(self, workdir: Path, players_csv: Path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["csv", "-i", str(players_csv), "--format", "markdown"])
        assert exc_info.value.code == 2


@pytest.mark.unit
@pytest.mark.cli
class TestXlsxCommand:
    """Tests for ``tabconv xlsx``."""

    def test_files_per_sheet(self, workdir: Path, make_workbook, capsys):
        book = make_workbook({"One": [["a"], ["1"]], "Two": [["b"], ["2"]]}, name="book.xlsx")
        assert main(["xlsx", "-i", str(book), "-o", "out", "--format", "md"]) == EXIT_SUCCESS

        assert (workdir / "out" / "book_One.md").read_text(encoding="utf-8") == "| a |\n| --- |\n| 1 |\n"
        assert (workdir / "out" / "book_Two.md").is_file()
        assert capsys.readouterr().out.splitlines() == [
            f"Wrote {Path('out') / 'book_One.md'}",
            f"Wrote {Path('out') / 'book_Two.md'}",
        ]

    def test_default_cleanup(self, workdir: Path, make_workbook):
        book = make_workbook({"S": [["h"], [None], ["  x  "]]})
        assert main(["xlsx", "-i", str(book)]) == EXIT_SUCCESS
        assert json.loads((workdir / "book_S.json").read_text(encoding="utf-8")) == [{"h": "x"}]

    def test_keep_flags(self, workdir: Path, make_workbook):
        book = make_workbook({"S": [["h"], [None], ["  x  "]]})
        assert main(["xlsx", "-i", str(book), "--keep-empty-rows", "--keep-whitespace"]) == EXIT_SUCCESS
        assert json.loads((workdir / "book_S.json").read_text(encoding="utf-8")) == [{"h": ""}, {"h": "  x  "}]

    def test_corrupt_workbook(self, workdir: Path, capsys):
        (workdir / "broken.xlsx").write_bytes(b"not a workbook")
        assert main(["xlsx", "-i", "broken.xlsx"]) == EXIT_PARSING_ERROR
        assert "Error:" in capsys.readouterr().err

    def test_rich_summary(self, workdir: Path, make_workbook, capsys):
        book = make_workbook({"S": [["h"], ["v"]]})
        assert main(["--rich", "xlsx", "-i", str(book)]) == EXIT_SUCCESS
        out = capsys.readouterr().out
        assert "Sheet" in out
        assert "Rows" in out


@pytest.mark.unit
@pytest.mark.cli
class TestConfigIntegration:
    """Tests for config-file defaults and precedence."""

    def test_config_supplies_defaults(self, workdir: Path):
        (workdir / "in.csv").write_text("name;age\nAlice;30\n", encoding="utf-8")
        (workdir / ".tabconv.toml").write_text('[csv]\ndelimiter = ";"\nformat = "yaml"\n', encoding="utf-8")

        assert main(["csv", "-i", "in.csv"]) == EXIT_SUCCESS
        assert yaml.safe_load((workdir / "output.yaml").read_text(encoding="utf-8")) == [{"name": "Alice", "age": "30"}]

    def test_cli_overrides_config(self, workdir: Path):
        (workdir / "in.csv").write_text("name;age\nAlice;30\n", encoding="utf-8")
        (workdir / ".tabconv.toml").write_text('[csv]\ndelimiter = ";"\nformat = "yaml"\n', encoding="utf-8")

        assert main(["csv", "-i", "in.csv", "--format", "json"]) == EXIT_SUCCESS
        assert (workdir / "output.json").is_file()
        assert not (workdir / "output.yaml").exists()

    def test_no_config(self, workdir: Path):
        (workdir / "in.csv").write_text("a,b\n1,2\n", encoding="utf-8")
        (workdir / ".tabconv.toml").write_text('[csv]\nformat = "yaml"\n', encoding="utf-8")

        assert main(["--no-config", "csv", "-i", "in.csv"]) == EXIT_SUCCESS
        assert (workdir / "output.json").is_file()

    def test_xlsx_config(self, workdir: Path, make_workbook):
        book = make_workbook({"S": [["h"], [None], ["v"]]})
        (workdir / "cfg.yaml").write_text("xlsx:\n  keep_empty_rows: true\n  output_dir: converted\n", encoding="utf-8")

        assert main(["--config", "cfg.yaml", "xlsx", "-i", str(book)]) == EXIT_SUCCESS
        assert json.loads((workdir / "converted" / "book_S.json").read_text(encoding="utf-8")) == [{"h": ""}, {"h": "v"}]

    def test_config_format_rejected_by_csv_pipeline(self, workdir: Path, players_csv: Path, capsys):
        (workdir / ".tabconv.json").write_text('{"csv": {"format": "markdown"}}', encoding="utf-8")
        assert main(["csv", "-i", str(players_csv)]) == EXIT_FORMAT_ERROR
        assert "not supported by the csv pipeline" in capsys.readouterr().err

    def test_config_bad_delimiter(self, workdir: Path, players_csv: Path):
        (workdir / ".tabconv.json").write_text('{"csv": {"delimiter": "::"}}', encoding="utf-8")
        assert main(["csv", "-i", str(players_csv)]) == EXIT_VALIDATION_ERROR

    def test_invalid_config_file(self, workdir: Path, players_csv: Path, capsys):
        (workdir / "bad.toml").write_text("[csv\n", encoding="utf-8")
        assert main(["--config", "bad.toml", "csv", "-i", str(players_csv)]) == EXIT_VALIDATION_ERROR
        assert "Invalid TOML" in capsys.readouterr().err

    def test_env_config(self, workdir: Path, players_csv: Path, monkeypatch):
        (workdir / "env.yaml").write_text("csv:\n  output: from_env.toml\n  format: toml\n", encoding="utf-8")
        monkeypatch.setenv("TABCONV_CONFIG", str(workdir / "env.yaml"))
        assert main(["csv", "-i", str(players_csv)]) == EXIT_SUCCESS
        assert (workdir / "from_env.toml").is_file()


@pytest.mark.unit
@pytest.mark.cli
class TestLoggingSetup:
    """Tests for log level and log file resolution."""

    def test_default_level_is_warning(self, workdir: Path, players_csv: Path):
        main(["csv", "-i", str(players_csv)])
        assert logging.getLogger().level == logging.WARNING

    def test_config_log_level(self, workdir: Path, players_csv: Path):
        (workdir / ".tabconv.toml").write_text('log_level = "info"\n', encoding="utf-8")
        main(["csv", "-i", str(players_csv)])
        assert logging.getLogger().level == logging.INFO

    def test_cli_log_level_beats_config(self, workdir: Path, players_csv: Path):
        (workdir / ".tabconv.toml").write_text('log_level = "INFO"\n', encoding="utf-8")
        main(["--log-level", "error", "csv", "-i", str(players_csv)])
        assert logging.getLogger().level == logging.ERROR

    def test_verbose(self, workdir: Path, players_csv: Path):
        main(["-v", "csv", "-i", str(players_csv)])
        assert logging.getLogger().level == logging.DEBUG

    def test_log_file(self, workdir: Path, players_csv: Path):
        assert main(["--log-level", "INFO", "--log-file", "run.log", "csv", "-i", str(players_csv)]) == EXIT_SUCCESS
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "Wrote 2 records" in (workdir / "run.log").read_text(encoding="utf-8")

    def test_trace_log_names_sheets(self, workdir: Path, make_workbook):
        book = make_workbook({"One": [["a"], ["1"]], "Two": [["b"], ["2"]]}, name="book.xlsx")
        assert main(["--trace", "--log-file", "trace.log", "xlsx", "-i", str(book)]) == EXIT_SUCCESS
        for handler in logging.getLogger().handlers:
            handler.flush()
        text = (workdir / "trace.log").read_text(encoding="utf-8")
        assert "[book.xlsx:One] Processing sheet: One" in text
        assert "[book.xlsx:Two] Processing sheet: Two" in text

    def test_skipped_sheet_warning_on_stderr(self, workdir: Path, make_workbook, monkeypatch, capsys):
        def fail(self, sheet_name):
            raise ParsingError("unreadable", parsing_stage="read_sheet")

        monkeypatch.setattr(XlsxWorkbookReader, "read_rows", fail)
        book = make_workbook({"S": [["h"]]})
        assert main(["xlsx", "-i", str(book)]) == EXIT_SUCCESS
        err = capsys.readouterr().err
        assert "WARNING: Skipping sheet 'S'" in err
        assert err.count("WARNING") == 1


@pytest.mark.unit
@pytest.mark.cli
class TestReportOutputs:
    """Tests for the written-files report."""

    OUTPUTS = [
        OutputFile(path=Path("out/book_One.json"), row_count=3, sheet_name="One"),
        OutputFile(path=Path("out/book_Two.json"), row_count=0, sheet_name="Two"),
    ]

    def test_plain(self, capsys):
        report_outputs(self.OUTPUTS)
        assert capsys.readouterr().out.splitlines() == [
            f"Wrote {Path('out/book_One.json')}",
            f"Wrote {Path('out/book_Two.json')}",
        ]

    def test_rich_table(self):
        buffer = io.StringIO()
        console = Console(file=buffer, width=120, color_system=None)
        report_outputs(self.OUTPUTS, use_rich=True, console=console)
        text = buffer.getvalue()
        assert "One" in text and "Two" in text
        assert "book_One.json" in text
        assert " 3 " in text

    def test_csv_output_has_no_sheet(self):
        buffer = io.StringIO()
        console = Console(file=buffer, width=120, color_system=None)
        report_outputs([OutputFile(path=Path("output.json"), row_count=2)], use_rich=True, console=console)
        assert "output.json" in buffer.getvalue()

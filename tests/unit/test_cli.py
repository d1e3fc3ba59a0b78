"""CLI tests: typer app commands and the standalone example-function script."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError
from typer.testing import CliRunner

from cli.main import app, example_function_entry
from core.services.arg_parser import USAGE_LINES

runner = CliRunner()


@pytest.fixture(autouse=True)
def _env(isolated_env):
    return isolated_env


class TestExampleFunctionCommand:
    def test_success_renders_table_and_summary(self):
        result = runner.invoke(app, ["example-function", "--first", "pos1", "pos2"])

        assert result.exit_code == 0, result.output
        assert "Parsed arguments" in result.output
        assert "pos1" in result.output
        assert "pos2" in result.output
        assert "First option is enabled." in result.output

    def test_flags_are_passed_through_untouched(self):
        result = runner.invoke(app, ["example-function", "--SECOND", "--param=Foo", "--param", "Bar"])

        assert result.exit_code == 0, result.output
        assert "Second option is enabled." in result.output
        assert "'Foo', 'Bar'" in result.output

    @pytest.mark.parametrize("help_flag", ["-h", "--help"])
    def test_help_prints_usage(self, help_flag):
        result = runner.invoke(app, ["example-function", "-f", help_flag, "a", "b", "c"])

        assert result.exit_code == 0
        for line in USAGE_LINES:
            assert line in result.output
        assert "Parsed arguments" not in result.output

    def test_missing_value(self):
        result = runner.invoke(app, ["example-function", "--param"])

        assert result.exit_code == 1
        assert "Error: --param requires a value" in result.output
        assert USAGE_LINES[0] in result.output

    def test_missing_value_when_next_is_flag(self):
        result = runner.invoke(app, ["example-function", "--param", "-f"])

        assert result.exit_code == 1
        assert "requires a value" in result.output

    def test_unexpected_argument(self):
        result = runner.invoke(app, ["example-function", "a", "b", "c"])

        assert result.exit_code == 1
        assert "Unexpected argument (got 'c')" in result.output

    def test_json_output_format(self, monkeypatch):
        monkeypatch.setenv("SHELL_IDIOMS_OUTPUT_FORMAT", "json")

        result = runner.invoke(app, ["example-function", "-f", "--param=foo", "a"])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == {
            "first": True,
            "second": False,
            "params": ["foo"],
            "positional1": "a",
            "positional2": None,
        }


class TestNotesCommand:
    def test_list_sections(self):
        result = runner.invoke(app, ["notes", "--list"])

        assert result.exit_code == 0
        for name in ("arithmetic", "arrays", "for-loop", "ifs-multiline"):
            assert name in result.output

    def test_single_section_with_stop(self):
        result = runner.invoke(app, ["--no-banner", "notes", "while-loop", "--stop", "2"])

        assert result.exit_code == 0, result.output
        assert "Number: 2" in result.output
        assert "Number: 3" not in result.output
        assert "Argument parsing" not in result.output

    def test_banner_shown_by_default(self):
        result = runner.invoke(app, ["notes", "arithmetic"])

        assert result.exit_code == 0
        assert "shell-idioms" in result.output
        assert "1 + 2 = 3" in result.output

    def test_banner_disabled_by_env(self, monkeypatch):
        monkeypatch.setenv("SHELL_IDIOMS_SHOW_BANNER", "false")

        result = runner.invoke(app, ["notes", "arithmetic"])

        assert "Argument parsing" not in result.output

    def test_section_lookup_ignores_case(self):
        result = runner.invoke(app, ["--no-banner", "notes", "IFS-COMMA", "--input", "red,green"])

        assert result.exit_code == 0, result.output
        assert "red" in result.output
        assert "green" in result.output

    def test_all_sections(self):
        result = runner.invoke(app, ["--no-banner", "notes"])

        assert result.exit_code == 0, result.output
        assert "Whole array1: 1 2 3 4 5" in result.output
        assert "banana" in result.output
        assert "line 3" in result.output

    def test_unknown_section(self):
        result = runner.invoke(app, ["notes", "pipes"])

        assert result.exit_code == 2
        assert "Unknown section" in result.output

    def test_invalid_log_level(self):
        result = runner.invoke(app, ["--log-level", "chatty", "notes", "--list"])

        assert result.exit_code == 2

    def test_stop_above_limit_rejected(self):
        result = runner.invoke(app, ["--no-banner", "notes", "while-loop", "--stop", "10001"])

        assert result.exit_code == 2
        assert "Number: 0" not in result.output

    def test_stop_at_limit_accepted(self):
        result = runner.invoke(app, ["--no-banner", "notes", "while-loop", "--stop", "10000"])

        assert result.exit_code == 0
        assert "Number: 10000" in result.output

    def test_invalid_env_setting_is_a_usage_error(self, monkeypatch):
        monkeypatch.setenv("SHELL_IDIOMS_OUTPUT_FORMAT", "yaml")

        result = runner.invoke(app, ["notes", "--list"])

        assert result.exit_code == 2
        assert "output_format" in result.output
        assert not isinstance(result.exception, ValidationError)


class TestExampleFunctionEntry:
    def test_success_exits_zero(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            example_function_entry(["-s", "only"])

        assert exc_info.value.code == 0
        captured = capsys.readouterr()
        assert "Second option is enabled." in captured.out
        assert captured.err == ""

    def test_help_on_stdout(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            example_function_entry(["--help"])

        assert exc_info.value.code == 0
        captured = capsys.readouterr()
        assert captured.out.splitlines() == list(USAGE_LINES)

    def test_error_on_stderr(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            example_function_entry(["a", "b", "c"])

        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.splitlines()[0] == "Error: Unexpected argument (got 'c')."

    def test_reads_sys_argv(self, monkeypatch, capsys):
        monkeypatch.setenv("SHELL_IDIOMS_OUTPUT_FORMAT", "json")
        monkeypatch.setattr("sys.argv", ["example-function", "--", "x"])

        with pytest.raises(SystemExit) as exc_info:
            example_function_entry()

        assert exc_info.value.code == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["positional1"] == "--"
        assert payload["positional2"] == "x"

    def test_invalid_env_setting_exits_one(self, monkeypatch, capsys):
        monkeypatch.setenv("SHELL_IDIOMS_OUTPUT_FORMAT", "yaml")

        with pytest.raises(SystemExit) as exc_info:
            example_function_entry(["a"])

        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("Invalid configuration: output_format:")
